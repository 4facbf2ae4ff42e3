# pipex

`pipex` does what this shell line does:

```sh
< file1 cmd1 | cmd2 > file2
```

It opens `file1` for reading, runs `cmd1` with that file as its standard
input, pipes the output of `cmd1` into `cmd2`, and writes the output of
`cmd2` to `file2`, which is created (mode 0644) or truncated.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex file1 "cmd1 args" "cmd2 args" file2
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

- Exactly four arguments are required. Otherwise
  `Usage: /pipex file1 cmd1 cmd2 file2` is printed on standard error and the
  exit status is 1.
- Each command is split on spaces (runs of spaces count as one separator; there
  is no quoting). Its first word is looked up in each directory of `PATH`; the
  first executable match is used. If nothing matches, the word is used as it
  stands: a word containing `/` is taken as a path, a bare word is taken
  relative to the current directory.
- An empty command prints `Command not found`; a command that cannot be
  started prints `Error executing command: <reason>`. Either way the other
  command still runs.
- A file that cannot be opened prints `Error opening file: <reason>` and the
  exit status is 1.
- Otherwise the exit status is that of `cmd2` (127 if it was empty, 1 if it
  could not be started, 128 plus the signal number if it was killed by a
  signal).

## Library use

```python
import os
from pipex.pipeline import run_pipeline, find_path, get_env, resolve_command

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
print(find_path("ls"))                      # e.g. "/bin/ls", or "ls" if not on PATH
print(get_env("PATH", ["PATH=/usr/bin", "HOME=/tmp"]))   # "/usr/bin"
print(resolve_command("wc -l", dict(os.environ)))         # (path, ["wc", "-l"])
```

The `env` argument of these functions may be a mapping or a list of
`NAME=value` strings; when left out, `os.environ` is used. `open_file(name,
"r" | "w")` returns a raw file descriptor. Failures raise `PipexError`, which
carries the exit `status`; `CommandNotFound` is its subclass with status 127.
`main(argv=None)` is the command-line entry and returns the exit status.

## Helper modules

- `pipex.chars` – ASCII classification and case conversion: `isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`. Each takes
  an integer code or a one-character string; the case functions return the
  same kind they were given.
- `pipex.memory` – byte buffer helpers: `memset`, `bzero`, `calloc`,
  `memchr` (returns an index or `None`), `memcmp`, `memcpy`, `memmove`.
- `pipex.strings` – `atoi`, `itoa`, `split` (drops empty fields), `strchr`,
  `strrchr`, `strnstr` (return indexes or `None`), `strcmp`, `strncmp`,
  `strlen`, `strdup`, `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`,
  and the bytearray-based `strlcpy` and `strlcat`.
- `pipex.linked` – `LinkedList` of `Node` objects with `push_front`,
  `push_back`, `last`, `for_each`, `map`, `clear`, `len()` and iteration.
- `pipex.output` – `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  to a file descriptor; `format_printf` renders and `printf` writes to
  standard output a format with `%c %s %p %d %i %u %x %X %%` (other
  conversions produce nothing; `printf` returns the byte count).
- `pipex.lines` – `LineReader(buffer_size=32).next_line(fd)` returns the next
  line as bytes, newline included, or `None` at end of input, keeping leftover
  bytes per descriptor; `iter_lines(fd)` yields every remaining line.

## What it does not do

Only two commands are supported; there is no here-document mode, no append
mode for the output file, and no shell-style quoting or expansion of the
command strings.

## Running the tests

```sh
pip install ".[test]"
pytest
```