from guidefines.flag_semantics import default_semantics


def test_push_button_semantics():
    assert default_semantics()["BS_PUSHBUTTON"] == {"role": "button", "toggle": False}


def test_thick_frame_semantics():
    assert default_semantics()["WBS_THICKFRAME"] == {
        "thickFrame": True,
        "resizable": True,
    }


def test_auto_radio_button_semantics():
    entry = default_semantics()["BS_AUTORADIOBUTTON"]
    assert entry["role"] == "radiobutton"
    assert entry["autoToggle"] is True
    assert entry["exclusive"] is True


def test_keys_are_sorted():
    keys = list(default_semantics())
    assert keys == sorted(keys)


def test_every_entry_is_non_empty():
    assert all(obj for obj in default_semantics().values())


def test_edit_prefixes_share_semantics():
    table = default_semantics()
    es_names = [name for name in table if name.startswith("ES_")]
    assert es_names
    for name in es_names:
        assert table["EBS_" + name[3:]] == table[name]


def test_edit_case_flags_only_for_ebs():
    table = default_semantics()
    assert table["EBS_UPPERCASE"] == {"forceUppercase": True}
    assert "ES_UPPERCASE" not in table


def test_returns_independent_copies():
    first = default_semantics()
    first["BS_PUSHBUTTON"]["role"] = "changed"
    del first["WBS_MODAL"]
    second = default_semantics()
    assert second["BS_PUSHBUTTON"]["role"] == "button"
    assert "WBS_MODAL" in second


def test_known_prefixes_only():
    prefixes = ("BS_", "EBS_", "ES_", "LBS_", "SS_", "WLVS_", "WBS_")
    assert all(name.startswith(prefixes) for name in default_semantics())