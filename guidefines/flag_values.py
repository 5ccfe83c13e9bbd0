"""Parsing and normalisation of numeric flag values and flag classification."""

from __future__ import annotations

import re
from enum import Enum

_MAX_UINT32 = 0xFFFFFFFF
_SHIFT_RE = re.compile(r"\(?\s*1\s*<<\s*(\d+)\s*\)?")
_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")
_SUFFIX_RE = re.compile(r"[lLuU]+$")

_WINDOW_PREFIXES = ("WBS_", "WLVS_", "WSS_", "WCS_", "WVS_", "WFS_", "WNS_", "WMS_")
_CONTROL_PREFIXES = (
    "BS_", "EBS_", "CBS_", "LBS_", "SBS_", "TBS_", "MBS_", "RBS_", "TCS_",
    "PBS_", "GBS_", "FBS_", "HBS_", "DBS_", "UBS_", "KBS_",
)


class FlagCategory(Enum):
    """The group a flag name belongs to."""

    WINDOW = "window"
    CONTROL = "control"
    TYPE = "type"


def _to_uint(text: str, base: int) -> int | None:
    """Parse an unsigned 32-bit integer in the given base; ``None`` if invalid."""
    body = text.strip()
    if body.startswith("+"):
        body = body[1:]
    if base == 16:
        if body[:2].lower() == "0x":
            body = body[2:]
        if not _HEX_DIGITS_RE.fullmatch(body):
            return None
    elif not _DECIMAL_RE.fullmatch(body):
        return None
    value = int(body, base)
    return value if value <= _MAX_UINT32 else None


def _part_value(part: str) -> int:
    part = part.strip()
    base = 16 if part[:2].lower() == "0x" else 10
    return _to_uint(part, base) or 0


def _format(value: int) -> str:
    return f"0X{value & _MAX_UINT32:08X}"


def to_hex(value_str: str) -> str:
    """Evaluate a shift, OR-mask, sum, hex or decimal expression as ``0XXXXXXXXX``."""
    s = value_str.strip()
    value = 0
    shift = _SHIFT_RE.search(s)
    if shift:
        amount = int(shift.group(1))
        value = (1 << amount) if amount < 32 else 0
    elif "|" in s:
        for part in s.split("|"):
            value |= _part_value(part)
    elif "+" in s:
        for part in s.split("+"):
            value += _part_value(part)
    elif s[:2].lower() == "0x":
        value = _to_uint(s, 16) or 0
    elif _DECIMAL_RE.fullmatch(s):
        value = _to_uint(s, 10) or 0
    return _format(value)


def classify_flag(name: str) -> FlagCategory:
    """Classify a flag name by its prefix; unknown prefixes count as window types."""
    if name.startswith(_WINDOW_PREFIXES):
        return FlagCategory.WINDOW
    if name.startswith(_CONTROL_PREFIXES):
        return FlagCategory.CONTROL
    return FlagCategory.TYPE


def normalize_hex(value: str) -> str:
    """Bring a stored flag value into the uniform ``0X`` plus eight hex digits form."""
    val = value.strip().upper()
    if not val.startswith("0X"):
        num = _to_uint(val, 16)
        return _format(num) if num is not None else "0X00000000"
    val = val.replace("L", "")
    num = _to_uint(val[2:], 16)
    return _format(num) if num is not None else val


def parse_header_value(value: str) -> str | None:
    """Turn the value of a header ``#define`` into an upper-case hex string.

    Integer suffixes such as ``L``, ``U`` or ``UL`` are dropped.  Decimal values
    are padded to eight hex digits; hex values keep their digits.  Returns
    ``None`` for values that are not plain numbers.
    """
    text = _SUFFIX_RE.sub("", value.strip())
    if text[:2].lower() != "0x":
        number = _to_uint(text, 10)
        return _format(number) if number is not None else None
    if _to_uint(text, 16) is None:
        return None
    return text.upper()