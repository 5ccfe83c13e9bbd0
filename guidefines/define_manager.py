"""Management of ``#define`` constants for GUI windows and controls."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_MAX_UINT32 = 0xFFFFFFFF
_WHITESPACE = re.compile(r"\s+")


@dataclass
class DefineToken:
    """A layout token; tokens of type ``"Define"`` carry a ``#define`` line."""

    type: str = ""
    value: str = ""


def _parse_uint(text: str) -> int | None:
    """Parse an unsigned 32-bit integer, detecting the base from its prefix."""
    if not text:
        return None
    body = text[1:] if text[0] == "+" else text
    try:
        if body[:2].lower() == "0x":
            digits = body[2:]
            if not re.fullmatch(r"[0-9a-fA-F]+", digits):
                return None
            value = int(digits, 16)
        elif body.startswith("0") and len(body) > 1:
            if not re.fullmatch(r"[0-7]+", body):
                return None
            value = int(body, 8)
        else:
            if not re.fullmatch(r"[0-9]+", body):
                return None
            value = int(body, 10)
    except ValueError:
        return None
    return value if value <= _MAX_UINT32 else None


def _parse_define(line: str) -> tuple[str, int] | None:
    """Return ``(name, value)`` for a valid ``#define`` line, else ``None``."""
    trimmed = line.strip()
    if not trimmed.startswith("#define"):
        return None
    parts = [p for p in _WHITESPACE.split(trimmed) if p]
    if len(parts) < 3:
        return None
    value = _parse_uint(parts[2])
    if value is None:
        return None
    return parts[1], value


def _format_define(name: str, value: int) -> str:
    return f"#define {name} 0x{value:X}"


class DefineManager:
    """Holds all defines, split into window and control groups."""

    def __init__(self) -> None:
        self._all: dict[str, int] = {}
        self._window_defines: dict[str, int] = {}
        self._control_defines: dict[str, int] = {}
        self.dirty = False

    def mark_dirty(self) -> None:
        self.dirty = True

    def mark_clean(self) -> None:
        self.dirty = False

    @property
    def all_defines(self) -> dict[str, int]:
        return dict(sorted(self._all.items()))

    @property
    def window_defines(self) -> dict[str, int]:
        return dict(sorted(self._window_defines.items()))

    @property
    def control_defines(self) -> dict[str, int]:
        return dict(sorted(self._control_defines.items()))

    def clear(self) -> None:
        self._all.clear()
        self._window_defines.clear()
        self._control_defines.clear()
        self.mark_dirty()

    def add_define(self, name: str, value: int) -> None:
        """Add or update a define; an unchanged value is ignored."""
        if self._all.get(name, 0) == value:
            return
        self._all[name] = value
        upper = name.upper()
        if name.startswith("APP_") or upper.startswith("WND_"):
            self._window_defines[name] = value
        elif name.startswith("WIDC_") or upper.startswith("WTYPE_"):
            self._control_defines[name] = value
        self.mark_dirty()

    def process_define_line(self, line: str) -> None:
        parsed = _parse_define(line)
        if parsed is not None:
            self.add_define(*parsed)

    def has_define(self, name: str) -> bool:
        return name in self._all

    def get_value(self, name: str) -> int:
        return self._all.get(name, 0)

    def generate_defines(self, windows: Mapping[str, Any]) -> None:
        """Assign ids to windows (from 100) and their controls (window id * 1000 onwards)."""
        self._window_defines.clear()
        self._control_defines.clear()

        base_step = 1000
        for window_id, wnd_name in enumerate(sorted(windows), start=100):
            wnd = windows[wnd_name]
            self.add_define(f"WND_{wnd_name.upper()}", window_id)
            for control_id, ctrl in enumerate(wnd.controls, start=window_id * base_step):
                self.add_define(f"WIDC_{wnd_name.upper()}_{ctrl.id.upper()}", control_id)

        logger.info(
            "generate_defines finished: %d windows, %d controls",
            len(self._window_defines),
            len(self._control_defines),
        )
        self.mark_dirty()

    def rebuild_from_tokens(self, tokens: Iterable[DefineToken]) -> None:
        self.clear()
        for token in tokens:
            if token.type != "Define":
                continue
            parsed = _parse_define(token.value)
            if parsed is not None:
                self.add_define(*parsed)
        logger.info(
            "rebuild_from_tokens finished: %d windows, %d controls",
            len(self._window_defines),
            len(self._control_defines),
        )
        self.mark_dirty()

    def import_from_tokens(self, tokens: Iterable[DefineToken]) -> None:
        self.rebuild_from_tokens(tokens)
        self.mark_dirty()

    def export_to_tokens(self) -> list[DefineToken]:
        return [
            DefineToken("Define", _format_define(name, value))
            for name, value in sorted(self._all.items())
        ]

    def _lookup(self, group: dict[str, int], name: str) -> int:
        if name in group:
            return group[name]
        return self._all.get(name, 0)

    def apply_defines_to_layout(self, windows: Iterable[Any]) -> None:
        """Store matching define names and ids in each window's and control's behaviour attributes."""
        windows = list(windows)
        if not windows:
            logger.info("apply_defines_to_layout: no windows given")
            return
        if not (self._all or self._window_defines or self._control_defines):
            logger.info("apply_defines_to_layout: no defines loaded, skipping")
            return

        for wnd in windows:
            if wnd is None or not wnd.name:
                continue
            wnd_upper = wnd.name.upper()
            wnd_define = f"WND_{wnd_upper}"
            wnd_id = self._lookup(self._window_defines, wnd_define)
            if wnd_id != 0:
                wnd.behavior.attributes["defineName"] = wnd_define
                wnd.behavior.attributes["defineId"] = wnd_id

            for ctrl in wnd.controls:
                if ctrl is None or not ctrl.id:
                    continue
                ctrl_define = f"WIDC_{wnd_upper}_{ctrl.id.upper()}"
                ctrl_id = self._lookup(self._control_defines, ctrl_define)
                if ctrl_id != 0:
                    ctrl.behavior.attributes["defineName"] = ctrl_define
                    ctrl.behavior.attributes["defineId"] = ctrl_id


def load_defines(path: str | Path, manager: DefineManager) -> None:
    """Replace the manager's defines with those read from a text file."""
    with open(path, encoding="utf-8-sig", errors="replace") as handle:
        manager.clear()
        for line in handle:
            manager.process_define_line(line.rstrip("\r\n"))
    logger.info("Defines loaded: %s", path)


def save_defines(path: str | Path, manager: DefineManager) -> None:
    """Write all defines of the manager as ``#define NAME 0xHEX`` lines."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for name, value in manager.all_defines.items():
            handle.write(_format_define(name, value) + "\n")
    logger.info("Defines saved: %s", path)