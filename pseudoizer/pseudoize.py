"""
Core pseudo-localization logic.

Responsibilities:
- character substitution via the fixed look-alike table
- length expansion + padding
- placeholder ({0}) and markup (<b>) protection
- selection of the resource entries that are display text
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from . import rules


def substitute(char: str) -> str:
    return rules.CHAR_MAP.get(char, char)


def target_length(length: int) -> int:
    if length < rules.SHORT_TEXT_LIMIT:
        return length * rules.SHORT_GROWTH_FACTOR
    # floor(n * 1.3) without float rounding
    return length * rules.LONG_GROWTH_NUMERATOR // rules.LONG_GROWTH_DENOMINATOR


def pad_count(length: int) -> int:
    count = (target_length(length) - length - 2) // len(rules.PAD_TOKEN)
    return max(count, rules.MIN_PAD_COUNT)


def is_link(text: str) -> bool:
    return any(marker in text for marker in rules.LINK_MARKERS)


def pseudoize(text: str) -> str:
    """
    Convert a string to its pseudo-internationalized form.

    Rules:
    - Links (http:// or https:// anywhere) come back unchanged.
    - Latin letters outside {...} and <...> regions are swapped for accented look-alikes.
    - Characters inside those regions, delimiters included, are copied verbatim.
      An unmatched "{" or "<" leaves the rest of the string untouched.
    - " !!!" padding approximates translation growth; at least two pads.
    - The result is wrapped in "[" and "]" so truncation shows up in the UI.

    Primarily for Latin based languages.
    """
    if is_link(text):
        return text

    parts: List[str] = [rules.OPEN_MARK]

    in_brace = False
    in_angle = False
    for char in text:
        if char == rules.BRACE_OPEN:
            in_brace = True
        elif char == rules.BRACE_CLOSE:
            in_brace = False
        elif char == rules.ANGLE_OPEN:
            in_angle = True
        elif char == rules.ANGLE_CLOSE:
            in_angle = False

        if in_brace or in_angle:
            parts.append(char)
        else:
            parts.append(substitute(char))

    parts.append(rules.PAD_TOKEN * pad_count(len(text)))
    parts.append(rules.CLOSE_MARK)
    return "".join(parts)


def classify_entry(key: str, value: Any, include_blank: bool = False) -> Optional[str]:
    """
    Return None when the entry is display text to convert, else the skip reason.

    "$this.Text" is exempt from the reserved-prefix rule but not from the blank rule.
    """
    if not isinstance(value, str):
        return rules.SKIP_NON_STRING

    if key != rules.FORM_TITLE_KEY and key.startswith(rules.RESERVED_KEY_PREFIXES):
        return rules.SKIP_RESERVED_KEY

    if value == "" and not include_blank:
        return rules.SKIP_BLANK

    return None


@dataclass
class FilterResult:
    eligible: List[Tuple[str, str]] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)


def filter_entries(entries: Iterable[Tuple[str, Any]], include_blank: bool = False) -> FilterResult:
    """
    Split (key, value) pairs into eligible text resources and skipped ones.

    Eligible entries are sorted by key (ordinal) for diffable output;
    skipped entries keep their input order.
    """
    result = FilterResult()
    for key, value in entries:
        reason = classify_entry(key, value, include_blank)
        if reason is None:
            result.eligible.append((key, value))
        else:
            result.skipped.append((key, reason))

    result.eligible.sort(key=lambda item: item[0])
    return result


def select_text_resources(entries: Iterable[Tuple[str, Any]], include_blank: bool = False) -> List[Tuple[str, str]]:
    return filter_entries(entries, include_blank).eligible
