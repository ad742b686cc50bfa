# pipex

`pipex` feeds a file through a chain of commands and writes the result to
another file, much like the shell pipeline

    < infile cmd1 | cmd2 | ... | cmdn > outfile

## Installation

    pip install .

## Command line

Run the commands on an input file and write to an output file. The output
file is created if needed and truncated:

    pipex infile "grep error" "sort" "uniq -c" outfile

Read the input from standard input instead, up to the first line that starts
with a limiter (a here-doc). The limiter line is not passed on, and the
output is appended to the output file:

    pipex here_doc END "cat" "wc -l" outfile

The same entry point can be run as `python -m pipex.runner`.

Behaviour worth knowing:

- At least four arguments are required. With fewer, a usage message is
  printed to standard output and the exit status is 1.
- If the input file or the output file cannot be opened, a message is
  printed to standard error and the exit status is 1.
- Each command line is split on spaces; empty words are dropped and quotes
  are not interpreted, so `"grep 'a b'"` passes the words `'a` and `b'`.
- A command containing `/` is used as given when that path exists; otherwise
  it is searched for in the directories of `PATH`, in order. Without `PATH`
  nothing is found.
- If an inner command cannot be found, `command not found` is printed to
  standard error and the next command receives empty input. If the last
  command cannot be found, the exit status is 127.
- Otherwise the exit status is that of the last command.

## What it does not do

The commands are not run concurrently: each one runs to completion with its
whole input held in memory before the next one starts, so `pipex` is not
suited to endless or very large streams. It offers no redirections, quoting,
globbing, variables or other shell syntax.

## Library use

The pipeline is available from Python in `pipex.runner`:

```python
from pipex.runner import run_pipeline, run_here_doc

status = run_pipeline("infile", ["grep error", "sort"], "outfile")

with open("notes.txt", "rb") as source:
    run_here_doc("END", ["cat"], "outfile", stdin=source)
```

Both take an optional `env` mapping used for the `PATH` lookup and passed to
the commands. Errors are raised as `pipex.resolve.PipexError` (with a
`status` attribute), `pipex.resolve.CommandNotFoundError` (status 127) and
`pipex.runner.UsageError`. `read_here_doc(stream, limiter)` returns the text
read before the limiter line.

`pipex.resolve` splits and locates commands without running them:
`split_command(text)`, `find_path(cmd, env)` and `resolve_command(text, env)`,
which returns the program path and its argument list.

The package also contains small helper modules:

- `pipex.lines`: `LineReader(stream, buffer_size=42)` and `iter_lines` read a
  file object or file descriptor line by line, keeping the newlines.
- `pipex.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args, stream=None)`
  with the `%c %s %p %d %i %u %x %X %%` conversions, plus the `format_*`
  functions behind them (integers are reduced to 32 bits, as in C).
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream or a file descriptor (standard output by default).
- `pipex.text`: C-style string helpers such as `split`, `strjoin`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strchr`, `strrchr`,
  `strtrim`, `substr`, `strmapi` and `striteri`; searches return indices or
  `None`.
- `pipex.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), `to_upper`, `to_lower`, `atoi` and `itoa`.
- `pipex.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove` on `bytearray` buffers.
- `pipex.linked_list`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `clear`, `iterate`, `map`, `len()` and iteration.

## Tests

    pip install ".[test]"
    pytest