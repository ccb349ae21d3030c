"""
Per-file pseudo-localization pipeline and directory walking.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from . import rules
from .pseudoize import filter_entries, pseudoize
from .resx import ResxParseError, decode_resx_bytes, parse_resx, read_resx, render_resx, write_resx

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    converted: List[Tuple[str, str]] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)


def convert_entries(entries: Iterable[Tuple[str, Any]], include_blank: bool = False) -> ConversionResult:
    selection = filter_entries(entries, include_blank)
    return ConversionResult(
        converted=[(key, pseudoize(value)) for key, value in selection.eligible],
        skipped=selection.skipped,
    )


def convert_file(source: Union[str, Path], destination: Union[str, Path], include_blank: bool = False) -> Optional[int]:
    """
    Pseudo-localize one resx file into destination.

    Returns the number of converted resources, 0 when the file has no text
    resources, None when it could not be parsed. Nothing is written in either
    of the last two cases. I/O errors propagate.
    """
    try:
        entries = read_resx(source)
    except ResxParseError as exc:
        logger.warning("could not parse %s: %s", source, exc.reason)
        return None

    result = convert_entries(entries, include_blank)
    for key, reason in result.skipped:
        logger.debug("%s: skipped %s (%s)", source, key, reason)

    if not result.converted:
        logger.warning("No text resources found in %s", source)
        return 0

    write_resx(destination, result.converted)
    logger.info("%s: converted %d text resource(s).", source, len(result.converted))
    return len(result.converted)


def _locale_suffix(path: Path) -> str:
    # strings.ja-JP.resx -> "ja-jp"; strings.resx -> ""
    return Path(path.stem).suffix.strip(" .").lower()


def is_known_locale(code: str) -> bool:
    language, _, _ = code.lower().partition("-")
    return language in rules.KNOWN_LANGUAGES or language in rules.KNOWN_LANGUAGES_3


def is_localized_name(path: Union[str, Path], lang_code: Optional[str] = None) -> bool:
    suffix = _locale_suffix(Path(path))
    if not suffix:
        return False
    if lang_code is not None and suffix == lang_code.lower():
        return True
    return is_known_locale(suffix)


def localized_path(path: Path, lang_code: str) -> Path:
    return path.with_name(f"{path.stem}.{lang_code}{rules.RESX_EXTENSION}")


def convert_directory(directory: Union[str, Path], lang_code: str, include_blank: bool = False) -> List[Path]:
    """
    Recursively pseudo-localize every neutral resx file under directory.

    Files already tagged with a locale (name.fr.resx, name.ja-JP.resx, or the
    target code itself) are left alone. Output goes next to each source as
    name.<lang_code>.resx. Returns the written paths.
    """
    directory = Path(directory)
    sources = sorted(
        path for path in directory.rglob(f"*{rules.RESX_EXTENSION}")
        if path.is_file() and not is_localized_name(path, lang_code)
    )

    written: List[Path] = []
    for source in sources:
        destination = localized_path(source, lang_code)
        if convert_file(source, destination, include_blank):
            written.append(destination)
    return written


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def pseudoize_resx_bytes(raw: bytes, include_blank: bool = False, source: str = "<upload>") -> Dict[str, Any]:
    """
    Pseudo-localize an uploaded resx document.
    Returns a dict matching the API's response envelope; raises ResxParseError.
    """
    text, decode_used = decode_resx_bytes(raw)
    entries = parse_resx(text, source=source)
    result = convert_entries(entries, include_blank)

    skipped = [
        {"key": key, "issue": reason, "action": "excluded"}
        for key, reason in result.skipped
    ]
    warnings: List[Dict[str, Any]] = []
    resource = None

    if result.converted:
        content = render_resx(result.converted)
        resource = {
            "sha256": _sha256_hex(content),
            "encoding": rules.RESX_ENCODING,
            "content_b64": base64.b64encode(content).decode("ascii"),
        }
    else:
        warnings.append({"key": None, "issue": "no_text_resources", "action": "no_output"})

    return {
        "resource": resource,
        "report": {
            "summary": {
                "entries": len(entries),
                "converted": len(result.converted),
                "skipped": len(result.skipped),
                "include_blank": include_blank,
                "decode_used": decode_used,
            },
            "skipped": skipped,
            "warnings": warnings,
        },
    }
