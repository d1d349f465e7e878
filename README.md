# envloader

Parse the lines of a `.env` file into `(key, value)` pairs.

A `.env` line has the form `KEY=value`. Keys start with an ASCII letter or
`_` and may go on with ASCII letters, digits, `_` and `.`. An optional
`export` prefix is accepted, and `export` may also be a key of its own.
Values may be:

- unquoted, where `\` escapes the next character and a space or tab ends the
  value (anything after it other than a `#` comment is an error);
- `'single quoted'`, taken literally;
- `"double quoted"`, where `\` escapes apply.

The escapes allowed are `\\`, `\'`, `\"`, `\$`, `\ ` (a space) and `\n`
(a newline); any other escape is an error. Outside single quotes, `$NAME`
and `${NAME}` are replaced by the value of `NAME`, looked up first in the
process environment and then among the keys parsed earlier; an unknown name
becomes the empty string.

## Usage

```python
from envloader.parse import parse_line, parse_value

data = {}
parse_line("# a comment", data)                   # None
parse_line('export GREETING="hello world"', data) # ("GREETING", "hello world")
parse_line("DB_HOST=localhost", data)             # ("DB_HOST", "localhost")
parse_line("URL=http://${DB_HOST}:5432", data)    # ("URL", "http://localhost:5432")
parse_line("EMPTY=", data)                        # ("EMPTY", "")
```

(The `URL` result assumes `DB_HOST` is not already set in the process
environment, since the environment is consulted first.)

- `parse_line(line, substitution_data)` parses one logical line. It returns
  `None` for blank and comment lines, and otherwise a `(key, value)` tuple.
  Each parsed value is stored in `substitution_data` (an empty value is
  stored as `None`) so that later lines can refer to it.
- `parse_value(text, substitution_data)` takes the raw text after `=` and
  returns it unquoted, unescaped and with variables substituted.

A quoted value may contain newlines when the text passed in holds them.

## Errors

`envloader.errors` defines the exceptions, all subclasses of `DotenvError`:

- `LineParseError` is raised by `parse_line` and `parse_value` for a
  malformed line. Its `line` attribute holds the text being parsed and
  `index` the position where parsing failed.
- `IoError` wraps an `OSError` (kept as `error`); its `not_found()` method
  returns `True` when that error is a `FileNotFoundError`.
- `EnvVarError`, also a `KeyError`, describes a missing environment
  variable; its `key` attribute names it.

`DotenvError.not_found()` returns `False` for every error other than a
missing-file `IoError`.

## What this package does not do

The package parses lines and values only. It does not open or search for
`.env` files, split a file into logical lines, strip a byte-order mark, or
write anything into `os.environ`, and it has no command-line tool. Reading
a file and applying the resulting pairs to the environment is left to the
caller.