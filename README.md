# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file and the second writes to an output file. It works like this shell
line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

This counts the lines of `input.txt` that contain `error` and writes the
count to `count.txt`.

- Each command string is split on spaces into the program name and its
  arguments. Empty words are dropped, and quotes and escapes are not
  interpreted.
- The program name is always looked up in the directories listed in `PATH`,
  even when the name contains a slash. The first executable match is used.
- The output file is created if it does not exist and truncated if it does.

### Errors and exit status

- If there are not exactly four arguments, `pipex` writes a usage message to
  standard error and exits with status 1.
- If the input file cannot be opened, the output file cannot be opened, or a
  command cannot be found or started, `pipex` writes a line beginning with
  `Error:` to standard error, for example `Error: foo: command not found`.
  The other stage still runs. If the first stage fails, the second command
  reads empty input. In this case `pipex` still exits with status 0. The exit
  statuses of the commands are not passed on.

## Library use

```python
import os
from pipex.execute import run_pipeline, find_command, CommandNotFoundError

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
print(statuses)  # exit status of each command, e.g. [0, 0]

try:
    print(find_command("ls"))  # uses os.environ when no env is given
except CommandNotFoundError as exc:
    print(exc)
```

- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` returns a list with
  the two exit statuses. A stage that could not start counts as status 1.
- `find_command(cmd, env=None)` returns the path of the command, or raises
  `CommandNotFoundError`, which is a subclass of `PipexError`.
- `parse_command(arg)` splits a command string into its words.
- `pipex.cli.main(argv=None)` is the command-line entry point. It returns the
  exit status.

The package also includes small text helpers:

- `pipex.chars`: ASCII character tests and case conversion, such as
  `is_alpha`, `is_digit`, `is_whitespace`, `to_upper` and `to_lower`.
- `pipex.search`: `strnstr`, `strncmp`, `strchr`, `strrchr`, `memchr` and
  `memcmp`. The search functions return an index, or `None` when there is no
  match.
- `pipex.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strlcpy`,
  `strlcat`, `strjoin`, `str_lower` and `map_indexed`.
- `pipex.printf`: `format_printf`, `printf`, `putnbr` and `putendl`. The
  printf functions support the conversions `%c %s %p %d %i %u %x %X %%`.
- `pipex.lines`: `LineReader` and `get_next_line`, which read a text or
  binary stream one line at a time using a read buffer of a fixed size.

## What it does not do

`pipex` joins exactly two commands. It does not support longer pipelines,
here-documents, appending to the output file, or shell quoting and
expansion.

## Running the tests

```sh
pip install ".[test]"
pytest
```