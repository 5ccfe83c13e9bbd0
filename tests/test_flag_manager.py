import json

import pytest

from guidefines.flag_manager import FlagManager


def _write_header(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_default_window_flags_and_legacy_split():
    mgr = FlagManager()
    added = mgr.apply_default_window_flags()
    flags = mgr.window_flags
    assert flags["WBS_CAPTION"] == "0X02000000"
    assert flags["WBS_NOCLOSE"] == "0X00000080"
    assert "WBS_CHECK" not in flags
    assert mgr.legacy_window_flags["WBS_CHECK"] == "0X00000008"
    assert "WBS_NOCLOSE" not in mgr.legacy_window_flags
    assert added == len(flags)
    assert list(flags) == sorted(flags)


def test_default_window_flags_do_not_overwrite(tmp_path):
    header = _write_header(tmp_path / "a.h", "#define WBS_CAPTION 0x1\n")
    mgr = FlagManager()
    mgr.parse_header_file(header)
    before = mgr.window_flags["WBS_CAPTION"]
    mgr.apply_default_window_flags()
    assert mgr.window_flags["WBS_CAPTION"] == before
    assert mgr.apply_default_window_flags() == 0


def test_parse_header_file_groups(tmp_path):
    header = _write_header(
        tmp_path / "flags.h",
        "#define WBS_FOO 0x10L\n"
        "  #define BS_BAR 0xAB\n"
        "#define WTYPE_THING 0x3\n"
        "#define OTHER_X 0x1\n"
        "#define NOTNUM abc\n"
        "#define SHORT\n"
        "// #define WBS_COMMENT 0x4\n",
    )
    mgr = FlagManager()
    mgr.parse_header_file(header)
    assert mgr.window_flags == {"WBS_FOO": "0X10"}
    assert mgr.control_flags == {"BS_BAR": "0XAB"}
    assert mgr.window_types == {"WTYPE_THING": "0X3"}


def test_parse_missing_header_is_ignored(tmp_path):
    mgr = FlagManager()
    mgr.parse_header_file(tmp_path / "missing.h")
    assert mgr.window_flags == {}
    assert mgr.control_flags == {}


def test_default_types_and_control_flags():
    mgr = FlagManager()
    assert mgr.apply_default_window_types() == len(mgr.window_types)
    assert mgr.window_types["WTYPE_BUTTON"] == "0x00000003"
    assert mgr.apply_default_control_flags() == len(mgr.control_flags)
    assert mgr.control_flags["BS_VCENTER"] == "0x00000C00"
    assert mgr.apply_default_control_flags() == 0


def test_generate_flags_invalid_source(tmp_path):
    mgr = FlagManager()
    result = mgr.generate_flags(tmp_path / "nope", tmp_path / "w.json", tmp_path / "c.json")
    assert result is False
    assert not (tmp_path / "w.json").exists()
    assert mgr.window_flags == {}


def test_generate_flags_writes_files(tmp_path):
    src = tmp_path / "src" / "sub"
    src.mkdir(parents=True)
    _write_header(src / "wnd.h", "#define WBS_CUSTOM 0x1000\n#define EBS_NUMBER 0x2\n")
    cfg = tmp_path / "cfg"
    cfg.mkdir()
    mgr = FlagManager()
    assert mgr.generate_flags(tmp_path / "src", cfg / "window_flags.json", cfg / "control_flags.json")

    wnd = json.loads((cfg / "window_flags.json").read_text(encoding="utf-8"))
    ctrl = json.loads((cfg / "control_flags.json").read_text(encoding="utf-8"))
    types = json.loads((cfg / "window_types.json").read_text(encoding="utf-8"))
    assert wnd == mgr.window_flags
    assert ctrl == mgr.control_flags
    assert types == mgr.window_types
    assert "WBS_CUSTOM" in wnd and "EBS_NUMBER" in ctrl

    rules = json.loads((cfg / "control_flag_rules.json").read_text(encoding="utf-8"))
    assert rules["EBS_NUMBER"]["set"]["numeric"] is True
    wnd_rules = json.loads((cfg / "window_flag_rules.json").read_text(encoding="utf-8"))
    assert wnd_rules["WBS_CUSTOM"] == {"set": {}}

    groups = json.loads((cfg / "flag_groups.json").read_text(encoding="utf-8"))
    assert set(groups) == {"window", "control"}
    assert "EBS_NUMBER" in groups["control"]["WTYPE_EDIT"]["controlStyle"]


def test_init_default_semantics():
    mgr = FlagManager()
    assert mgr.default_semantics == {}
    mgr.init_default_semantics()
    assert mgr.default_semantics["WBS_NOFRAME"] == {"borderless": True}


def test_auto_fill_and_extend_rule_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"BS_CHECKBOX": {"set": {"toggle": False}}}), encoding="utf-8")
    mgr = FlagManager()
    assert mgr.extend_rule_file(path, {"BS_NEW": "0X1"}) == ["BS_NEW"]
    mgr.init_default_semantics()
    assert mgr.auto_fill_semantics(path) is True
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["BS_CHECKBOX"]["set"]["toggle"] is False
    assert data["BS_CHECKBOX"]["set"]["role"] == "checkbox"
    assert data["BS_NEW"] == {"set": {}}


def test_extend_flag_groups_on_directory_is_noop(tmp_path):
    mgr = FlagManager()
    assert mgr.extend_flag_groups(tmp_path) is None


def test_save_flags_normalizes(tmp_path):
    mgr = FlagManager()
    mgr.apply_default_window_flags()
    mgr.save_flags(tmp_path)
    active = json.loads((tmp_path / "window_flags.json").read_text(encoding="utf-8"))
    legacy = json.loads((tmp_path / "legacy_window_flags.json").read_text(encoding="utf-8"))
    assert active["WBS_CAPTION"] == "0X02000000"
    assert legacy["WBS_PUSHLIKE"] == "0X00000200"
    assert set(active) == set(mgr.window_flags)


def test_save_json_file_invalid_value(tmp_path):
    mgr = FlagManager()
    path = tmp_path / "out.json"
    assert mgr.save_json_file(path, {"A": "zz"}, "Test") is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"A": "0X00000000"}


def test_load_legacy_missing_dir(tmp_path):
    mgr = FlagManager()
    assert mgr.load_legacy_flags(tmp_path) is False


def test_load_legacy_and_switch_mode(tmp_path):
    legacy = tmp_path / "legacy"
    legacy.mkdir()
    (legacy / "window_flags_legacy.json").write_text(
        json.dumps({"WBS_OLD": "0x0000ab"}), encoding="utf-8"
    )
    mgr = FlagManager()
    assert mgr.load_legacy_flags(tmp_path) is True
    assert mgr.legacy_window_flags == {"WBS_OLD": "0X0000AB"}
    assert mgr.legacy_control_flags == {}

    mgr.apply_default_window_flags()
    assert mgr.use_legacy_mode(False) is True
    assert "WBS_CAPTION" in mgr.window_flags
    assert mgr.use_legacy_mode(True) is True
    assert mgr.use_legacy is True
    assert mgr.window_flags == mgr.legacy_window_flags
    assert mgr.control_flags == {}


@pytest.mark.parametrize("content", ["[1, 2]", "not json"])
def test_load_legacy_invalid_json(tmp_path, content):
    legacy = tmp_path / "legacy"
    legacy.mkdir()
    (legacy / "window_flags_legacy.json").write_text(content, encoding="utf-8")
    mgr = FlagManager()
    assert mgr.load_legacy_flags(tmp_path) is False
    assert mgr.legacy_window_flags == {}