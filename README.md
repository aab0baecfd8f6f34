# strapkit

Small libraries that applications tend to need from day one:

- `strapkit.locale`: gettext-backed message translation with `{1}`-style
  positional formatting.
- `strapkit.json_value` and `strapkit.json_container`: JSON value types,
  compact serialisation, parsing, and a `JsonContainer` whose nested entries
  are read, type-checked and written by key path or array index.
- `strapkit.log_levels` and `strapkit.logger`: levelled logging to a stream
  or to syslog, with optional terminal colours, a message callback and an
  "an error has been logged" flag.

The package has no dependencies beyond the standard library.

## Translating and formatting

```python
from strapkit.locale import format, format_n, translate, translate_n

translate("requesting {1} item.")              # unchanged when no catalog is found
translate_n("one item", "many items", 0)       # 'many items'
format("requesting {1} item.", 1.25)           # 'requesting 1.25 item.'
format_n("{1} item.", "{1} items.", 2, 3)      # '3 items.'
```

Placeholders are numbered from 1. `{1}`, `{1,number}` and `%1%` are all
replaced by the first argument; a placeholder without a matching argument
raises `ValueError`. Floats are rendered with up to six significant digits
and booleans as `1` or `0`.

The functions are `translate`, `translate_p` (with a context),
`translate_n` (singular/plural chosen by `n`) and `translate_np`, and the
formatting counterparts `format`, `format_p`, `format_n` and `format_np`,
with the short aliases `_`, `p_`, `n_` and `np_`. If translation fails, the
message is returned as given, and plural forms fall back to the singular
when `n == 1` and the plural otherwise.

Catalogs are loaded once per domain by `get_locale(id, domain, paths)` and
kept until `clear_domain(domain)` is called. The default domain is
`strapkit`. Catalogs are searched under `share/locale` in the directory
named by the `STRAPKIT_LOCALE_DIR` environment variable, or in
`sys.prefix` if it is not set, and then in any extra `paths`. The
translation functions load a domain with no extra paths, so call
`get_locale` with your paths first if your catalogs live elsewhere.

## Working with JSON

```python
from strapkit.json_container import JsonContainer
from strapkit.json_value import DataType

data = JsonContainer('{"foo": {"bar": 2}, "vec": [1, 2], "nothing": null}')
data.get(["foo", "bar"], kind=int)             # 2
data.get("vec", kind=list[int])                # [1, 2]
data.get("vec", 1, kind=int)                   # 2
data.get("nothing", kind=str)                  # '' (null gives the empty value)
data.type("vec") is DataType.Array             # True
data.set(["level1", "level2"], "a string")     # creates the "level1" object
data.includes(["level1", "level2"])            # True
data.get_with_default("missing", 42)           # 42
data.to_string("foo")                          # '{"bar":2}'
print(data.to_pretty_json(2))
```

A `JsonContainer` is built from nothing (an empty object), a JSON text,
another container or plain Python JSON data. Its methods are `raw`,
`to_string`, `to_pretty_string`, `to_pretty_json`, `empty`, `size`, `keys`,
`includes`, `type`, `get`, `get_with_default` and `set`. Containers compare
equal when their documents match in value and in type.

The `kind` given to `get` is one of `bool`, `int`, `float`, `str`,
`JsonContainer`, or `list[...]` of these. With no `kind` a copy of the
plain value is returned.

Errors derive from `DataError`:

- `DataParseError`: the text is not valid JSON.
- `DataKeyError`: a key is unknown, or `set` cannot navigate the path.
- `DataIndexError`: an array index is out of bounds.
- `DataTypeError`: a value has the wrong type, for example an `int` read
  from a double, or a key looked up in something that is not an object.

`strapkit.json_value` also offers `parse_json`, `value_to_string` and
`value_type` for plain Python data.

## Logging

```python
import sys
from strapkit import logger
from strapkit.log_levels import LogLevel, parse_log_level

logger.setup_logging(sys.stderr)               # level is reset to warning
logger.set_level(parse_log_level("info"))
logger.log("myapp", LogLevel.info, 0, "started with {1} workers", 4)

logger.on_message(lambda level, message: True) # return False to suppress
logger.error_has_been_logged()                 # False until an error is logged
```

Stream lines look like

```
2024-01-31 12:00:00.123456 INFO  myapp - started with 4 workers
```

with `:<line>` after the logger name when `line_num` is greater than zero.
Messages are coloured when colourisation is on; `setup_logging` switches it
on if the stream is standard output or error attached to a terminal, and
`set_colorization` changes it. Error and fatal messages set the flag read by
`error_has_been_logged`, even when they are filtered out.

`parse_log_level` accepts `none`, `trace`, `debug`, `info`, `warn`,
`error` and `fatal`, ignoring case, and raises `ValueError` otherwise.

To log to syslog instead:

```python
logger.setup_syslog_logging("myapp", "local0")
logger.log("myapp", LogLevel.warning, 0, "disk at {1}%", 91)
logger.clean_syslog_logging()
logger.disable_syslog()                        # back to the stream
```

Facility names are those of `SyslogFacility` (`kern`, `user`, `mail`,
`daemon`, `auth`, `syslog`, `lpr`, `news`, `uucp`, `cron`, `local0` to
`local7`); an unknown name raises `ValueError`.

## What it does not do

- There is no Windows event log backend; logging goes to a stream or to
  syslog only, and syslog requires a POSIX platform.
- There are no command-line programs; everything is used as a library.

## Installing

```
pip install strapkit
```