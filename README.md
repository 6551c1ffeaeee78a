# pipex

`pipex` is a small Python library with the pieces a piped command runner
needs: finding programs on the search path, reading a here-document from
standard input, and a `printf`-style formatter.

## Installation

```sh
pip install .
```

For running the tests:

```sh
pip install ".[test]"
pytest
```

## Search path — `pipex.paths`

- `split_words(text, sep)` splits `text` on `sep` and drops empty fields.
- `get_paths(envp)` returns the search directories, each ending in `/`.
  `envp` is either a mapping such as `os.environ` or an iterable of
  `KEY=VALUE` strings. The first entry that contains `PATH=` is used, with
  its first five characters skipped; if there is none,
  `/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin` is used.
- `find_command(paths, cmd)` returns the first `directory + cmd` that
  exists and is executable, or `None`.

```python
import os
from pipex.paths import find_command, get_paths

find_command(get_paths(os.environ), "ls")  # e.g. '/bin/ls'
```

## Here-documents — `pipex.heredoc`

- `has_here_doc(argument)` tells whether an argument selects
  here-document mode. Any prefix of `here_doc` is accepted, the empty
  string included.
- `read_here_doc(limiter, stdin=None, prompt=None)` writes a `> ` prompt
  before each line, reads lines from `stdin` (standard input by default)
  and returns them joined, up to the line that ends the document or the
  end of input. A line ends the document when it is a prefix of
  `limiter + "\n"`, so `END\n` ends a document whose limiter is `END`.
- `line_matches_limiter(line, limiter)` is that test, with `limiter`
  already carrying its newline.
- `iter_lines(stream)` yields lines with their newlines until end of input.

```python
import io
from pipex.heredoc import read_here_doc

read_here_doc("END", io.StringIO("one\ntwo\nEND\nlater\n"), io.StringIO())
# 'one\ntwo\n'
```

## Formatting — `pipex.printf` and `pipex.printf_flags`

`format_printf(fmt, *args)` supports the conversions `c s p d i u x X %`
with the flags `-`, `+`, space, `#` and `0`, a width and a precision. It
returns the text together with the count the formatter reports for it;
`printf(fmt, *args)` writes the text to standard output and returns that
count.

```python
from pipex.printf import format_printf

format_printf("%-5d|%#x|%.3s", 42, 255, "abcdef")  # ('42   |0xff|abc', 14)
```

Some details:

- `d` and `i` wrap their argument to a signed 32-bit integer; `u`, `x`
  and `X` to an unsigned one.
- `%s` of `None` prints `(null)`; `%p` of `0` or `None` prints `0x0`.
- A `%c` with a width reports the width as its count.
- An unknown conversion character is printed as is. Too few arguments
  raise `TypeError`; a `%` at the very end of the format raises
  `ValueError`.

The single conversions are available as `format_character`,
`format_string`, `format_pointer`, `format_number`, `format_unsigned` and
`format_hex`, each taking a `Flags` value and returning the text and its
count. `pipex.printf_flags` holds `Flags`, `parse_flags(fmt, pos)` and the
padding helpers they are built on (`atoi`, `pad`, `total_width`,
`precised_number`, `hex_prefix`, `sign_prefix`, `precised_string`,
`string_width`).

## What this package does not do

The package installs no command. It does not start programs, connect
them with pipes or open input and output files; it provides the path
lookup, here-document reading and formatting that such a runner would
use.