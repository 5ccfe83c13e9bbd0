"""Default semantic descriptions of window and control style flags."""

from __future__ import annotations

from typing import Any

_EDIT_COMMON: tuple[tuple[str, dict[str, Any]], ...] = (
    ("AUTOHSCROLL", {"autoHScroll": True, "scrollable": True}),
    ("AUTOVSCROLL", {"autoVScroll": True, "scrollable": True}),
    ("CENTER", {"textAlign": "center"}),
    ("LEFT", {"textAlign": "left"}),
    ("MULTILINE", {"multiline": True}),
    ("NOHIDESEL", {"keepSelectionVisible": True}),
    ("NUMBER", {"numeric": True}),
    ("OEMCONVERT", {"oemConvert": True}),
    ("PASSWORD", {"masked": True}),
    ("READONLY", {"readonly": True}),
    ("RIGHT", {"textAlign": "right"}),
    ("WANTRETURN", {"acceptReturn": True}),
)

_BUTTON: dict[str, dict[str, Any]] = {
    "BS_PUSHBUTTON": {"role": "button", "toggle": False},
    "BS_DEFPUSHBUTTON": {"role": "button", "default": True},
    "BS_CHECKBOX": {"role": "checkbox", "toggle": True, "triState": False},
    "BS_AUTOCHECKBOX": {"role": "checkbox", "toggle": True, "autoToggle": True},
    "BS_3STATE": {"role": "checkbox", "toggle": True, "triState": True},
    "BS_AUTO3STATE": {
        "role": "checkbox",
        "toggle": True,
        "triState": True,
        "autoToggle": True,
    },
    "BS_RADIOBUTTON": {
        "role": "radiobutton",
        "toggle": True,
        "exclusive": True,
        "groupMember": True,
    },
    "BS_AUTORADIOBUTTON": {
        "role": "radiobutton",
        "toggle": True,
        "exclusive": True,
        "groupMember": True,
        "autoToggle": True,
    },
    "BS_GROUPBOX": {"role": "groupbox", "container": True},
    "BS_BITMAP": {"role": "picturebutton", "usesBitmap": True},
    "BS_ICON": {"role": "picturebutton", "usesIcon": True},
    "BS_LEFT": {"contentAlign": "left"},
    "BS_RIGHT": {"contentAlign": "right"},
    "BS_TOP": {"contentVAlign": "top"},
    "BS_BOTTOM": {"contentVAlign": "bottom"},
    "BS_VCENTER": {"contentVAlign": "center"},
    "BS_NONE": {"role": "none"},
    "BS_MODEL": {"role": "model"},
    "BS_OBJECT": {"role": "object"},
    "BS_MTRLBLK": {"role": "materialblock"},
}

_EDIT_EXTRA: dict[str, dict[str, Any]] = {
    "EBS_LOWERCASE": {"forceLowercase": True},
    "EBS_UPPERCASE": {"forceUppercase": True},
}

_LISTBOX: dict[str, dict[str, Any]] = {
    "LBS_DISABLENOSCROLL": {"disableNoScroll": True},
    "LBS_EXTENDEDSEL": {"extendedSelect": True},
    "LBS_HASSTRINGS": {"hasStrings": True},
    "LBS_MULTICOLUMN": {"multiColumn": True},
    "LBS_MULTIPLESEL": {"multiSelect": True},
    "LBS_NOINTEGRALHEIGHT": {"noIntegralHeight": True},
    "LBS_NOREDRAW": {"noRedraw": True},
    "LBS_NOTIFY": {"notify": True},
    "LBS_OWNERDRAWFIXED": {"ownerDraw": True, "itemHeightFixed": True},
    "LBS_OWNERDRAWVARIABLE": {"ownerDraw": True, "itemHeightVariable": True},
    "LBS_SORT": {"sorted": True},
    "LBS_USETABSTOPS": {"useTabStops": True},
    "LBS_WANTKEYBOARDINPUT": {"wantKeyboardInput": True},
}

_STATIC: dict[str, dict[str, Any]] = {
    "SS_BITMAP": {"role": "picture", "usesBitmap": True},
    "SS_CENTER": {"textAlign": "center"},
    "SS_ICON": {"role": "picture", "usesIcon": True},
    "SS_LEFT": {"textAlign": "left"},
    "SS_NOTIFY": {"clickable": True},
    "SS_RIGHT": {"textAlign": "right"},
}

_LISTVIEW: dict[str, dict[str, Any]] = {
    "WLVS_ALIGNLEFT": {"align": "left"},
    "WLVS_ALIGNMASK": {"alignMask": True},
    "WLVS_ALIGNTOP": {"align": "top"},
    "WLVS_AUTOARRANGE": {"autoArrange": True},
    "WLVS_EDITLABELS": {"editableLabels": True},
    "WLVS_ICON": {"view": "icon"},
    "WLVS_LIST": {"view": "list"},
    "WLVS_NOCOLUMNHEADER": {"noColumnHeader": True},
    "WLVS_NOLABELWRAP": {"noLabelWrap": True},
    "WLVS_NOSCROLL": {"noScroll": True},
    "WLVS_NOSORTHEADER": {"noSortHeader": True},
    "WLVS_OWNERDRAWFIXED": {"ownerDraw": True},
    "WLVS_REPORT": {"view": "report"},
    "WLVS_SHAREIMAGELISTS": {"shareImageLists": True},
    "WLVS_SHOWSELALWAYS": {"showSelectionAlways": True},
    "WLVS_SINGLESEL": {"singleSelection": True},
    "WLVS_SMALLICON": {"view": "smallicon"},
    "WLVS_SORTASCENDING": {"sortOrder": "ascending"},
    "WLVS_SORTDESCENDING": {"sortOrder": "descending"},
    "WLVS_TYPEMASK": {"typeMask": True},
    "WLVS_TYPESTYLEMASK": {"typeStyleMask": True},
}

_WINDOW: dict[str, dict[str, Any]] = {
    "WBS_CAPTION": {"hasCaption": True},
    "WBS_CHILD": {"isChild": True},
    "WBS_CHILDFRAME": {"isChildFrame": True},
    "WBS_DOCKING": {"dockable": True},
    "WBS_EXTENSION": {"hasExtension": True},
    "WBS_HELP": {"hasHelp": True},
    "WBS_HSCROLL": {"hasHScroll": True},
    "WBS_KEY": {"keyWindow": True},
    "WBS_MANAGER": {"managerWindow": True},
    "WBS_MAXIMIZEBOX": {"maximizeBox": True},
    "WBS_MINIMIZEBOX": {"minimizeBox": True},
    "WBS_MODAL": {"modal": True},
    "WBS_MOVE": {"draggable": True},
    "WBS_NOCENTER": {"noCenter": True},
    "WBS_NOCLOSE": {"noClose": True},
    "WBS_NODRAWFRAME": {"noDrawFrame": True},
    "WBS_NOFOCUS": {"noFocus": True},
    "WBS_NOFRAME": {"borderless": True},
    "WBS_NOMENUICON": {"noMenuIcon": True},
    "WBS_OVERRIDE_FIRST": {"overrideFirst": True},
    "WBS_PIN": {"pinnable": True},
    "WBS_POPUP": {"popup": True},
    "WBS_RESIZEABLE": {"resizable": True},
    "WBS_SOUND": {"sound": True},
    "WBS_THICKFRAME": {"thickFrame": True, "resizable": True},
    "WBS_TOPMOST": {"topmost": True},
    "WBS_VIEW": {"viewWindow": True},
    "WBS_VSCROLL": {"hasVScroll": True},
}


def _all_semantics() -> dict[str, dict[str, Any]]:
    table: dict[str, dict[str, Any]] = {}
    table.update(_BUTTON)
    for prefix in ("EBS_", "ES_"):
        table.update({prefix + suffix: obj for suffix, obj in _EDIT_COMMON})
    table.update(_EDIT_EXTRA)
    table.update(_LISTBOX)
    table.update(_STATIC)
    table.update(_LISTVIEW)
    table.update(_WINDOW)
    return table


def default_semantics() -> dict[str, dict[str, Any]]:
    """Return a fresh mapping of flag name to its default semantic attributes, sorted by name."""
    return {name: dict(obj) for name, obj in sorted(_all_semantics().items())}