# guidefines

Tools for the numeric identifiers and style flags used when editing GUI
window layouts.

It covers two jobs:

- **Defines**: reading and writing `#define NAME value` tables for windows
  (`WND_*`, `APP_*`) and controls (`WIDC_*`, `WTYPE_*`), generating fresh
  identifiers from a set of windows, and attaching them to layout objects.
- **Flags**: scanning C header files for style flags (`WBS_*`, `BS_*`,
  `EBS_*`, `TCS_*`, `WLVS_*`, `SS_*`, `WTYPE_*`), filling in well-known
  defaults and writing JSON files: flag values, rule templates with default
  semantics, and flag groups per control type.

## Installation

```
pip install .
```

No third-party dependencies are required.

## Defines

```python
from guidefines.define_manager import DefineManager, load_defines, save_defines

manager = DefineManager()
load_defines("resdata.h", manager)        # raises OSError if the file cannot be opened

manager.add_define("WND_INVENTORY", 0x64)
manager.has_define("WND_INVENTORY")        # True
manager.get_value("WND_MISSING")           # 0

tokens = manager.export_to_tokens()        # list of DefineToken("Define", "#define NAME 0xHEX")
save_defines("resdata_out.h", manager)
```

- `process_define_line(line)` accepts lines of the form `#define NAME VALUE`;
  the value may be decimal, `0x` hex or leading-zero octal and must fit in
  32 bits. Other lines are ignored.
- `add_define(name, value)` also sorts the name into `window_defines`
  (`APP_`, `WND_`) or `control_defines` (`WIDC_`, `WTYPE_`); `all_defines`
  holds every define. Changes set the `dirty` attribute.
- `generate_defines(windows)` takes a mapping of window name to window object
  and assigns `WND_<NAME>` ids from 100 upwards (windows in name order) and
  `WIDC_<WINDOW>_<CONTROL>` ids from `window_id * 1000` upwards.
- `rebuild_from_tokens(tokens)` / `import_from_tokens(tokens)` replace all
  defines with those carried by tokens of type `"Define"`.
- `apply_defines_to_layout(windows)` writes `defineName` and `defineId` into
  `behavior.attributes` of each window and control for which a matching
  non-zero define exists.

Window objects are expected to have `name`, `controls` and `behavior.attributes`;
controls need `id` and `behavior.attributes`.

## Flags

```python
from guidefines.flag_manager import FlagManager

flags = FlagManager()
flags.generate_flags("path/to/source", "config/window_flags.json",
                     "config/control_flags.json")   # False if the source directory is missing
```

`generate_flags` parses every `*.h` file below the source directory, adds the
standard window flags, window types and control flags that are missing, and
writes:

- the window flags to the first path and the control flags to the second
- `window_types.json`, `window_flag_rules.json`, `control_flag_rules.json`
  and `flag_groups.json` in the directory of the window flag file

Rule files are only created when missing; flags they lack are added with an
empty rule, and default semantics are merged in without overwriting existing
keys.

`save_flags(config_dir)` writes `window_flags.json` and
`legacy_window_flags.json`, with every value normalised to `0X` plus eight hex
digits.

Legacy flag sets can be loaded from `<base>/legacy/window_flags_legacy.json`
and `<base>/legacy/control_flags_legacy.json` with `load_legacy_flags(base)`
and switched in with `use_legacy_mode(True)`.

Lower-level helpers:

- `guidefines.flag_values`: `to_hex`, `normalize_hex`, `parse_header_value`,
  `classify_flag` (returning a `FlagCategory`)
- `guidefines.flag_semantics`: `default_semantics()`
- `guidefines.flag_rules`: `generate_rule_templates`, `auto_fill_semantics`,
  `extend_rule_file`, `generate_flag_groups`, `extend_flag_groups`

## What it does not do

This is a library only. It has no layout editor, no window or control
rendering, no layout file parser and no command-line program; it works on
define tables, header files and the JSON files described above.

## Tests

```
pip install .[test]
pytest
```