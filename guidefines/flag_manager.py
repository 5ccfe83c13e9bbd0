"""Collection of window and control style flags from C headers into JSON files."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from guidefines import flag_rules
from guidefines.flag_semantics import default_semantics
from guidefines.flag_values import normalize_hex, parse_header_value

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

WINDOW_FLAGS_FILE = "window_flags.json"
LEGACY_WINDOW_FLAGS_FILE = "legacy_window_flags.json"
WINDOW_TYPES_FILE = "window_types.json"
LEGACY_DIR = "legacy"
LEGACY_WINDOW_SOURCE = "window_flags_legacy.json"
LEGACY_CONTROL_SOURCE = "control_flags_legacy.json"

_DEFAULT_WINDOW_FLAGS: dict[str, str] = {
    "WBS_CAPTION": "0X02000000",
    "WBS_CHILD": "0X00020000",
    "WBS_CHILDFRAME": "0X00800000",
    "WBS_DOCKING": "0X04000000",
    "WBS_EXTENSION": "0X00000020",
    "WBS_HELP": "0X00000004",
    "WBS_MOVE": "0X00010000",
    "WBS_MODAL": "0X00080000",
    "WBS_NOFOCUS": "0X80000000",
    "WBS_NOFRAME": "0X00200000",
    "WBS_NODRAWFRAME": "0X00040000",
    "WBS_TOPMOST": "0X10000000",
    "WBS_RESIZEABLE": "0X00000040",
    "WBS_THICKFRAME": "0X00000040",
    "WBS_POPUP": "0X08000000",
    "WBS_VSCROLL": "0X20000000",
    "WBS_HSCROLL": "0X40000000",
    "WBS_VIEW": "0X00000008",
    "WBS_PIN": "0X00000010",
    "WBS_MANAGER": "0X00100000",
    "WBS_KEY": "0X01000000",
    "WBS_SOUND": "0X00400000",
    "WBS_NOMENUICON": "0X00000400",
    "WBS_OVERRIDE_FIRST": "0X00000040",
    "WBS_NOCENTER": "0X00000080",
    "WBS_MAXIMIZEBOX": "0X00000002",
    "WBS_MINIMIZEBOX": "0X00000001",
}

_LEGACY_WINDOW_FLAGS: dict[str, str] = {
    "WBS_CHECK": "0X00000008",
    "WBS_PUSHLIKE": "0X00000200",
    "WBS_RADIO": "0X00000004",
    "WBS_MONEY": "0X00000004",
    "WBS_TEXT": "0X00000001",
    "WBS_SPRITE": "0X00000002",
    "WBS_MENUITEM": "0X00000100",
    "WBS_HIGHLIGHT": "0X00000010",
    "WBS_HIGHLIGHTPUSH": "0X00000020",
    "WBS_NOCLOSE": "0X00000080",
}

_BUTTON_STYLES: dict[str, int] = {
    "BS_PUSHBUTTON": 0x00000000,
    "BS_DEFPUSHBUTTON": 0x00000001,
    "BS_CHECKBOX": 0x00000002,
    "BS_AUTOCHECKBOX": 0x00000003,
    "BS_RADIOBUTTON": 0x00000004,
    "BS_3STATE": 0x00000005,
    "BS_AUTO3STATE": 0x00000006,
    "BS_GROUPBOX": 0x00000007,
    "BS_AUTORADIOBUTTON": 0x00000009,
    "BS_ICON": 0x00000040,
    "BS_BITMAP": 0x00000080,
    "BS_LEFT": 0x00000100,
    "BS_RIGHT": 0x00000200,
    "BS_TOP": 0x00000400,
    "BS_BOTTOM": 0x00000800,
    "BS_VCENTER": 0x00000C00,
}

_EDIT_STYLES: dict[str, int] = {
    "ES_LEFT": 0x0000,
    "ES_CENTER": 0x0001,
    "ES_RIGHT": 0x0002,
    "ES_MULTILINE": 0x0004,
    "ES_PASSWORD": 0x0020,
    "ES_AUTOVSCROLL": 0x0040,
    "ES_AUTOHSCROLL": 0x0080,
    "ES_NOHIDESEL": 0x0100,
    "ES_OEMCONVERT": 0x0400,
    "ES_READONLY": 0x0800,
    "ES_WANTRETURN": 0x1000,
    "ES_NUMBER": 0x2000,
}

_STATIC_STYLES: dict[str, int] = {
    "SS_LEFT": 0x00000000,
    "SS_CENTER": 0x00000001,
    "SS_RIGHT": 0x00000002,
    "SS_ICON": 0x00000003,
    "SS_BITMAP": 0x0000000E,
    "SS_NOTIFY": 0x00000100,
}

_LISTBOX_STYLES: dict[str, int] = {
    "LBS_NOTIFY": 0x0001,
    "LBS_SORT": 0x0002,
    "LBS_NOREDRAW": 0x0004,
    "LBS_MULTIPLESEL": 0x0008,
    "LBS_OWNERDRAWFIXED": 0x0010,
    "LBS_OWNERDRAWVARIABLE": 0x0020,
    "LBS_HASSTRINGS": 0x0040,
    "LBS_USETABSTOPS": 0x0080,
    "LBS_NOINTEGRALHEIGHT": 0x0100,
    "LBS_MULTICOLUMN": 0x0200,
    "LBS_WANTKEYBOARDINPUT": 0x0400,
    "LBS_EXTENDEDSEL": 0x0800,
    "LBS_DISABLENOSCROLL": 0x1000,
}


def _hex_strings(values: Mapping[str, int], digits: int) -> dict[str, str]:
    return {name: f"0x{value:0{digits}X}" for name, value in values.items()}


_DEFAULT_CONTROL_FLAGS: dict[str, str] = {
    **_hex_strings(_BUTTON_STYLES, 8),
    **_hex_strings(_EDIT_STYLES, 4),
    **_hex_strings(_STATIC_STYLES, 8),
    **_hex_strings(_LISTBOX_STYLES, 4),
}

_DEFAULT_WINDOW_TYPES: dict[str, str] = {
    "WTYPE_NONE": "0x00000000",
    "WTYPE_BASE": "0x00000001",
    "WTYPE_STATIC": "0x00000002",
    "WTYPE_BUTTON": "0x00000003",
    "WTYPE_EDIT": "0x00000004",
    "WTYPE_SCROLLBAR": "0x00000005",
    "WTYPE_LISTBOX": "0x00000006",
    "WTYPE_CUSTOM": "0x00000007",
}

_CONTROL_HEADER_PREFIXES = ("BS_", "EBS_", "TCS_", "WLVS_", "SS_")


def _write_json(path: Path, data: Mapping[str, Any]) -> bool:
    text = json.dumps(dict(data), indent=4, sort_keys=True, ensure_ascii=False) + "\n"
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write %s: %s", path, exc)
        return False
    logger.info("Saved %s", path)
    return True


def _load_flag_file(path: Path) -> dict[str, str]:
    """Read a flat flag file; values are upper-cased, non-strings become empty."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        logger.warning("Flag file not found: %s", path)
        return {}
    try:
        doc = json.loads(text)
    except ValueError:
        doc = None
    if not isinstance(doc, dict):
        logger.warning("Invalid JSON: %s", path)
        return {}
    result = {
        key: (value.upper() if isinstance(value, str) else "") for key, value in doc.items()
    }
    logger.info("Loaded %s (%d entries)", path.name, len(result))
    return result


class FlagManager:
    """Scans headers for style flags and writes flag, rule and group files."""

    def __init__(self, config: Any = None) -> None:
        self.config = config
        self._window_flags: dict[str, str] = {}
        self._control_flags: dict[str, str] = {}
        self._window_types: dict[str, str] = {}
        self._unknown_flags: dict[str, str] = {}
        self._legacy_window_flags: dict[str, str] = {}
        self._legacy_control_flags: dict[str, str] = {}
        self._legacy_overrides: list[str] = ["WBS_NOCLOSE"]
        self._default_semantics: dict[str, dict[str, Any]] = {}
        self.use_legacy = False

    @property
    def window_flags(self) -> dict[str, str]:
        return dict(sorted(self._window_flags.items()))

    @property
    def control_flags(self) -> dict[str, str]:
        return dict(sorted(self._control_flags.items()))

    @property
    def window_types(self) -> dict[str, str]:
        return dict(sorted(self._window_types.items()))

    @property
    def legacy_window_flags(self) -> dict[str, str]:
        return dict(sorted(self._legacy_window_flags.items()))

    @property
    def legacy_control_flags(self) -> dict[str, str]:
        return dict(sorted(self._legacy_control_flags.items()))

    @property
    def default_semantics(self) -> dict[str, dict[str, Any]]:
        return {name: dict(obj) for name, obj in self._default_semantics.items()}

    def load_legacy_flags(self, base_dir: str | Path) -> bool:
        """Load legacy flag files from ``base_dir/legacy``; true if any flag was found."""
        legacy_dir = Path(base_dir) / LEGACY_DIR
        if not legacy_dir.is_dir():
            logger.warning("Legacy directory missing: %s", legacy_dir)
            return False
        self._legacy_window_flags = _load_flag_file(legacy_dir / LEGACY_WINDOW_SOURCE)
        self._legacy_control_flags = _load_flag_file(legacy_dir / LEGACY_CONTROL_SOURCE)
        return bool(self._legacy_window_flags or self._legacy_control_flags)

    def use_legacy_mode(self, enabled: bool) -> bool:
        """Switch legacy mode; enabling it replaces the active flags with the legacy ones."""
        self.use_legacy = enabled
        if enabled:
            logger.info("Legacy mode enabled")
            self._window_flags = dict(self._legacy_window_flags)
            self._control_flags = dict(self._legacy_control_flags)
        else:
            logger.info("Legacy mode disabled")
        return True

    def generate_flags(
        self, source_dir: str | Path, wnd_path: str | Path, ctrl_path: str | Path
    ) -> bool:
        """Scan all headers below ``source_dir`` and write every derived JSON file.

        Returns ``False`` if the source directory is missing.
        """
        self._window_flags.clear()
        self._control_flags.clear()
        self._window_types.clear()
        self._unknown_flags.clear()

        if not str(source_dir) or not Path(source_dir).is_dir():
            logger.warning("Invalid source directory: %s", source_dir)
            return False

        headers = sorted(p for p in Path(source_dir).rglob("*.h") if p.is_file())
        logger.info("%d header files found in %s", len(headers), source_dir)
        for header in headers:
            self.parse_header_file(header)

        self.apply_default_window_flags()
        self.apply_default_window_types()
        self.apply_default_control_flags()

        logger.info(
            "Parsing finished: window flags %d, control flags %d, types %d, unknown %d",
            len(self._window_flags),
            len(self._control_flags),
            len(self._window_types),
            len(self._unknown_flags),
        )

        wnd_file = Path(wnd_path)
        _write_json(wnd_file, self._window_flags)
        _write_json(Path(ctrl_path), self._control_flags)
        config_dir = wnd_file.resolve().parent
        _write_json(config_dir / WINDOW_TYPES_FILE, self._window_types)

        self.generate_rule_templates(config_dir)
        self.generate_flag_groups(config_dir)
        self.extend_flag_groups(config_dir)
        return True

    def parse_header_file(self, file_path: str | Path) -> None:
        """Collect the WBS_, control style and WTYPE_ defines of one header."""
        try:
            with open(file_path, encoding="utf-8", errors="replace") as handle:
                lines = handle.readlines()
        except OSError:
            return

        for raw in lines:
            line = raw.strip()
            if not line.startswith("#define"):
                continue
            tokens = [t for t in _WHITESPACE.split(line) if t]
            if len(tokens) < 3:
                continue
            key = tokens[1]
            value = parse_header_value(tokens[2])
            if value is None:
                continue
            if key.startswith("WBS_"):
                self._window_flags[key] = value
            elif key.startswith(_CONTROL_HEADER_PREFIXES):
                self._control_flags[key] = value
            elif key.startswith("WTYPE_"):
                self._window_types[key] = value

    def apply_default_window_flags(self) -> int:
        """Add missing standard window flags; legacy-only flags go to the legacy set.

        Returns the number of flags added to the active window flags.
        """
        added = 0
        legacy = 0
        for key, value in _LEGACY_WINDOW_FLAGS.items():
            if key in self._legacy_overrides:
                if key not in self._window_flags:
                    self._window_flags[key] = value
                    added += 1
                    logger.info("Legacy override active: %s", key)
                continue
            if key not in self._legacy_window_flags:
                self._legacy_window_flags[key] = value
                legacy += 1

        for key, value in _DEFAULT_WINDOW_FLAGS.items():
            if key not in self._window_flags:
                self._window_flags[key] = value
                added += 1

        self._window_flags = dict(sorted(self._window_flags.items()))
        logger.info(
            "Window flags added: %d | legacy: %d | active: %d",
            added,
            legacy,
            len(self._window_flags),
        )
        return added

    def apply_default_window_types(self) -> int:
        """Add the standard WTYPE_ values that are missing; returns how many were added."""
        added = 0
        for key, value in _DEFAULT_WINDOW_TYPES.items():
            if key not in self._window_types:
                self._window_types[key] = value
                added += 1
                logger.info("Default window type added: %s = %s", key, value)
        return added

    def apply_default_control_flags(self) -> int:
        """Add the standard control style flags that are missing; returns how many."""
        added = 0
        for key, value in _DEFAULT_CONTROL_FLAGS.items():
            if key not in self._control_flags:
                self._control_flags[key] = value
                added += 1
        logger.info(
            "Default control flags added: %d new, total %d", added, len(self._control_flags)
        )
        return added

    def generate_rule_templates(self, config_dir: str | Path) -> tuple[Path, Path]:
        self.init_default_semantics()
        return flag_rules.generate_rule_templates(
            config_dir, self._window_flags, self._control_flags, self._default_semantics
        )

    def extend_rule_file(self, file_path: str | Path, known_flags: Mapping[str, Any]) -> list[str]:
        return flag_rules.extend_rule_file(file_path, known_flags)

    def init_default_semantics(self) -> None:
        self._default_semantics = default_semantics()

    def auto_fill_semantics(self, rule_file_path: str | Path) -> bool:
        return flag_rules.auto_fill_semantics(rule_file_path, self._default_semantics)

    def generate_flag_groups(self, config_dir: str | Path) -> dict[str, Any]:
        return flag_rules.generate_flag_groups(config_dir, self._control_flags)

    def extend_flag_groups(self, groups_path: str | Path) -> dict[str, Any] | None:
        return flag_rules.extend_flag_groups(
            groups_path, self._window_flags, self._control_flags
        )

    def save_flags(self, config_dir: str | Path) -> None:
        """Write the active and legacy window flags into ``config_dir``."""
        directory = Path(config_dir)
        self.save_json_file(directory / WINDOW_FLAGS_FILE, self._window_flags, "Window")
        self.save_json_file(
            directory / LEGACY_WINDOW_FLAGS_FILE, self._legacy_window_flags, "Legacy"
        )
        logger.info(
            "Flags saved: active %d | legacy %d",
            len(self._window_flags),
            len(self._legacy_window_flags),
        )

    def save_json_file(self, path: str | Path, data: Mapping[str, str], label: str) -> bool:
        """Write ``data`` with every value normalised to ``0X`` plus eight hex digits."""
        normalized = {key: normalize_hex(value) for key, value in data.items()}
        ok = _write_json(Path(path), normalized)
        if ok:
            logger.info("%s flags saved to %s", label, path)
        return ok