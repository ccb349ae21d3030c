from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class PseudoizedResx(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class ReportSummary(BaseModel):
    entries: int = 0
    converted: int = 0
    skipped: int = 0
    include_blank: bool = False
    decode_used: Optional[str] = Field(default=None, examples=["utf-8"])


class ReportItem(BaseModel):
    key: Optional[str] = None
    issue: str
    action: str


class PseudoizeReport(BaseModel):
    summary: ReportSummary
    skipped: List[ReportItem] = Field(default_factory=list)
    warnings: List[ReportItem] = Field(default_factory=list)


class PseudoizeResponse(BaseModel):
    resource: Optional[PseudoizedResx] = None
    report: PseudoizeReport


class TextRequest(BaseModel):
    text: str


class TextResponse(BaseModel):
    text: str
    pseudo: str

class HealthResponse(BaseModel):
    ok: bool = True
