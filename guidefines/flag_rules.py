"""Rule templates and flag group files derived from known style flags."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from guidefines.flag_semantics import default_semantics

logger = logging.getLogger(__name__)

WINDOW_RULES_FILE = "window_flag_rules.json"
CONTROL_RULES_FILE = "control_flag_rules.json"
FLAG_GROUPS_FILE = "flag_groups.json"

_ALL_TYPES = ["WTYPE_ALL"]
_ONLY_WINDOW = ["WTYPE_WINDOW"]
_ALL_CONTROLS = [
    "WTYPE_BUTTON", "WTYPE_EDIT", "WTYPE_LISTBOX", "WTYPE_LISTCTRL",
    "WTYPE_TREE", "WTYPE_TAB", "WTYPE_STATIC", "WTYPE_SCROLLBAR", "WTYPE_CUSTOM",
]

_WINDOW_FLAG_TYPES: dict[str, list[str]] = {
    "WBS_CHILD": _ALL_TYPES,
    "WBS_VISIBLE": _ALL_TYPES,
    "WBS_DISABLED": _ALL_TYPES,
    "WBS_HSCROLL": _ALL_CONTROLS,
    "WBS_VSCROLL": _ALL_CONTROLS,
    "WBS_CAPTION": _ONLY_WINDOW,
    "WBS_TITLE": _ONLY_WINDOW,
    "WBS_MOVE": _ONLY_WINDOW,
    "WBS_SIZE": _ONLY_WINDOW,
    "WBS_BORDER": _ONLY_WINDOW,
    "WBS_FRAME": _ONLY_WINDOW,
    "WBS_SYSMENU": _ONLY_WINDOW,
    "WBS_TOOLWINDOW": _ONLY_WINDOW,
    "WBS_THICKFRAME": _ONLY_WINDOW,
    "WBS_MODAL": _ONLY_WINDOW,
    "WBS_NOFRAME": _ALL_CONTROLS,
}

_WINDOW_EXCLUSIVE: dict[str, list[str]] = {
    "align_h": ["WBS_LEFT", "WBS_CENTER", "WBS_RIGHT"],
    "align_v": ["WBS_TOP", "WBS_VCENTER", "WBS_BOTTOM"],
    "frame_mode": ["WBS_THICKFRAME", "WBS_NOFRAME", "WBS_NODRAWFRAME"],
}

_CONTROL_TYPE_PREFIXES: dict[str, tuple[str, ...]] = {
    "WTYPE_BUTTON": ("BS_",),
    "WTYPE_EDIT": ("ES_", "EBS_"),
    "WTYPE_LISTBOX": ("LBS_",),
    "WTYPE_LISTCTRL": ("WLVS_",),
    "WTYPE_TREE": ("WLVS_",),
    "WTYPE_STATIC": ("SS_", "WSS_"),
}

_DEFAULT_CONTROL_WINDOW_STYLE = ["WBS_CHILD", "WBS_NOFRAME"]


def _dump(obj: Any) -> str:
    return json.dumps(obj, indent=4, sort_keys=True, ensure_ascii=False) + "\n"


def _write_json(path: Path, obj: Any) -> bool:
    try:
        path.write_text(_dump(obj), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write %s: %s", path, exc)
        return False
    return True


def _read_json(path: Path) -> Any:
    """Return the parsed document, or ``None`` when it cannot be read or parsed."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not open %s: %s", path, exc)
        return None
    try:
        return json.loads(text)
    except ValueError as exc:
        logger.warning("Invalid JSON in %s: %s", path, exc)
        return None


def _as_object(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}


def _empty_rules(flags: Mapping[str, Any]) -> dict[str, Any]:
    return {name: {"set": {}} for name in flags}


def generate_rule_templates(
    config_dir: str | Path,
    window_flags: Mapping[str, Any],
    control_flags: Mapping[str, Any],
    semantics: Mapping[str, Mapping[str, Any]] | None = None,
) -> tuple[Path, Path]:
    """Create or complete the window and control rule files in ``config_dir``.

    Missing files are created with an empty rule per flag; existing files gain
    rules for unknown flags, then default semantics are merged in.
    Returns the paths of the window and control rule files.
    """
    if semantics is None:
        semantics = default_semantics()
    directory = Path(config_dir)
    wnd_path = directory / WINDOW_RULES_FILE
    ctrl_path = directory / CONTROL_RULES_FILE

    for path, flags in ((wnd_path, window_flags), (ctrl_path, control_flags)):
        if not path.exists():
            logger.info("Creating %s", path.name)
            _write_json(path, _empty_rules(flags))

    extend_rule_file(wnd_path, window_flags)
    extend_rule_file(ctrl_path, control_flags)

    auto_fill_semantics(wnd_path, semantics)
    auto_fill_semantics(ctrl_path, semantics)
    return wnd_path, ctrl_path


def auto_fill_semantics(
    rule_file_path: str | Path, semantics: Mapping[str, Mapping[str, Any]]
) -> bool:
    """Merge default semantics into a rule file without overwriting existing keys.

    Returns ``False`` when the file is missing or not a JSON object.
    """
    path = Path(rule_file_path)
    if not path.exists():
        logger.warning("auto_fill_semantics: file does not exist: %s", path)
        return False
    root = _read_json(path)
    if not isinstance(root, dict):
        logger.warning("auto_fill_semantics: not a JSON object: %s", path)
        return False

    for flag, defaults in semantics.items():
        if flag not in root:
            root[flag] = {"set": copy.deepcopy(dict(defaults))}
            continue
        entry = _as_object(root[flag])
        set_obj = _as_object(entry.get("set"))
        for key, value in defaults.items():
            set_obj.setdefault(key, copy.deepcopy(value))
        entry["set"] = set_obj
        root[flag] = entry

    if not _write_json(path, root):
        return False
    logger.info("auto_fill_semantics finished for %s", path.name)
    return True


def extend_rule_file(file_path: str | Path, known_flags: Mapping[str, Any]) -> list[str]:
    """Add an empty rule for every known flag the rule file lacks.

    Returns the names of the added flags; the file is rewritten only if any were added.
    A missing file is left alone.
    """
    path = Path(file_path)
    if not path.exists():
        logger.warning("extend_rule_file: file does not exist: %s", path)
        return []
    root = _as_object(_read_json(path))

    added = [name for name in sorted(known_flags) if name not in root]
    if not added:
        return []
    for name in added:
        root[name] = {"set": {}}
        logger.info("New rule added for %s", name)

    if _write_json(path, root):
        logger.info("Updated %s", path)
    return added


def generate_flag_groups(config_dir: str | Path, control_flags: Mapping[str, Any]) -> dict[str, Any]:
    """Write ``flag_groups.json`` with window flag scopes and per-type control flags."""
    window_obj = {
        "flags": {flag: list(types) for flag, types in _WINDOW_FLAG_TYPES.items()},
        "exclusive": {name: list(flags) for name, flags in _WINDOW_EXCLUSIVE.items()},
    }

    sorted_flags = sorted(control_flags)
    control_obj = {
        type_name: {
            "windowStyle": list(_DEFAULT_CONTROL_WINDOW_STYLE),
            "controlStyle": [flag for flag in sorted_flags if flag.startswith(prefixes)],
        }
        for type_name, prefixes in sorted(_CONTROL_TYPE_PREFIXES.items())
    }

    root = {"window": window_obj, "control": control_obj}
    path = Path(config_dir) / FLAG_GROUPS_FILE
    if _write_json(path, root):
        logger.info("%s created", FLAG_GROUPS_FILE)
    return root


def extend_flag_groups(
    groups_path: str | Path,
    window_flags: Mapping[str, Any],
    control_flags: Mapping[str, Any],
) -> dict[str, Any] | None:
    """Rewrite every top-level group of a groups file as a sorted list of flag names.

    Groups whose name contains ``style`` (any case) receive every known flag.
    Non-list groups become empty lists and non-string entries become ``""``.
    Returns the new content, or ``None`` if the file could not be read as an object.
    """
    path = Path(groups_path)
    root = _read_json(path)
    if not isinstance(root, dict):
        logger.warning("Cannot use flag groups file: %s", path)
        return None

    all_flags = list(control_flags) + list(window_flags)
    for group_name, value in list(root.items()):
        items = value if isinstance(value, list) else []
        members = {item if isinstance(item, str) else "" for item in items}
        if "style" in group_name.lower():
            members.update(all_flags)
        root[group_name] = sorted(members)

    if _write_json(path, root):
        logger.info("%s extended", path.name)
    return root