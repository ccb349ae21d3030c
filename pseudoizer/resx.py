"""
RESX resource container reading and writing.

Only what pseudo-localization needs:
- enumerate <data> entries as (key, value), string or opaque
- write (key, string) entries back as a fresh resx document
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple, Union

from charset_normalizer import from_bytes
from lxml import etree

from . import rules

logger = logging.getLogger(__name__)

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


class ResxParseError(ValueError):
    """The source is not a well-formed resx container."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"could not parse {source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True)
class OpaqueValue:
    """A non-string resource (bitmap, byte array, file reference...). Never converted."""

    type: Optional[str]
    mimetype: Optional[str]
    payload: str


class ResourceEntry(NamedTuple):
    key: str
    value: Any


def _create_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        dtd_validation=False,
        load_dtd=False,
        remove_blank_text=False,
    )


def _is_string_data(elem) -> bool:
    type_name = elem.get("type")
    if type_name is not None:
        return type_name.split(",", 1)[0].strip() == rules.STRING_TYPE_NAME
    return elem.get("mimetype") is None


def decode_resx_bytes(raw: bytes) -> Tuple[str, str]:
    """
    Decode uploaded resx bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer, utf-8 if nothing matches.
    - If decode fails, fall back to UTF-8 with replacement characters.
    - Strip the XML declaration; lxml refuses str input that declares an encoding.

    Returns (text, encoding_used).
    """
    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        logger.debug("Decoding as %s failed, falling back to utf-8", decode_used)
        decode_used = "utf-8"
        text = raw.decode(decode_used, errors="replace")

    return _XML_DECLARATION.sub("", text, count=1), decode_used


def parse_resx(content: Union[bytes, str], source: str = "<resx>") -> List[ResourceEntry]:
    """
    Enumerate the <data> entries of a resx document, in document order.

    A <data> element is text when it has neither type nor mimetype, or its type
    is System.String; everything else comes back as OpaqueValue. A repeated key
    keeps its first position and takes the last value.
    """
    if isinstance(content, str):
        content = _XML_DECLARATION.sub("", content, count=1)

    try:
        root = etree.fromstring(content, parser=_create_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ResxParseError(source, str(exc)) from exc

    if root.tag != "root":
        raise ResxParseError(source, f"unexpected root element <{root.tag}>")

    for header in root.iterfind("resheader"):
        if header.get("name") == "resmimetype":
            mimetype = (header.findtext("value") or "").strip()
            if mimetype != rules.RESX_MIMETYPE:
                raise ResxParseError(source, f"unsupported resmimetype {mimetype!r}")

    values = {}
    for elem in root.iterfind("data"):
        key = elem.get("name")
        if key is None:
            raise ResxParseError(source, f"<data> without a name on line {elem.sourceline}")

        text = elem.findtext("value") or ""
        if _is_string_data(elem):
            values[key] = text
        else:
            values[key] = OpaqueValue(type=elem.get("type"), mimetype=elem.get("mimetype"), payload=text)

    entries = [ResourceEntry(key, value) for key, value in values.items()]
    logger.debug("Parsed %d entries from %s", len(entries), source)
    return entries


def read_resx(path: Union[str, Path]) -> List[ResourceEntry]:
    path = Path(path)
    return parse_resx(path.read_bytes(), source=str(path))


def render_resx(entries: Iterable[Tuple[str, str]]) -> bytes:
    root = etree.Element("root")

    for name, value in rules.RESX_HEADERS:
        header = etree.SubElement(root, "resheader", name=name)
        etree.SubElement(header, "value").text = value

    for key, value in entries:
        data = etree.SubElement(root, "data", name=key)
        data.set(XML_SPACE, "preserve")
        etree.SubElement(data, "value").text = value

    return etree.tostring(root, encoding=rules.RESX_ENCODING, xml_declaration=True, pretty_print=True)


def write_resx(path: Union[str, Path], entries: Iterable[Tuple[str, str]]) -> None:
    """Create or overwrite a resx file holding the given (key, string) entries."""
    path = Path(path)
    path.write_bytes(render_resx(entries))
    logger.debug("Wrote %s", path)
