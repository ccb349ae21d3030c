from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import PseudoizeResponse, HealthResponse, TextRequest, TextResponse
from .pseudoize import pseudoize
from .resx import ResxParseError
from .convert import pseudoize_resx_bytes
from . import rules

app = FastAPI(
    title="pseudoizer",
    description="Deterministic pseudo-localization of resx resources for i18n testing",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/pseudoize", response_model=PseudoizeResponse)
async def pseudoize_resx(file: UploadFile = File(...), include_blank: bool = False):
    if not (file.filename or "").lower().endswith(rules.RESX_EXTENSION):
        raise HTTPException(status_code=422, detail="Only RESX files are supported")

    raw = await file.read()
    try:
        return pseudoize_resx_bytes(raw, include_blank=include_blank, source=file.filename)
    except ResxParseError as exc:
        raise HTTPException(status_code=422, detail=f"Could not parse {file.filename}: {exc.reason}")

@app.post("/pseudoize/text", response_model=TextResponse)
def pseudoize_text(body: TextRequest):
    return {"text": body.text, "pseudo": pseudoize(body.text)}
