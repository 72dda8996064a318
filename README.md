# oslabs

A handful of small operating-system exercises as a Python package:

- a prime sieve built from chained filtering stages (`oslabs.primes`),
- a batching `xargs` (`oslabs.xargs`),
- two file copiers: `oslabs.cp0`, which refuses to overwrite, and `oslabs.cp1`, which copies through memory maps,
- a substring `find` (`oslabs.find`),
- a `ps` that lists process ids and command names from `/proc` (`oslabs.ps`),
- a block file system with inode and data bitmaps, kept in memory and saved to a single image file (`oslabs.fisopfs`, `oslabs.inode`, `oslabs.bitmap`),
- a minimal interactive shell with pipes, redirections, environment variables and background jobs (`oslabs.sh` and the modules it uses).

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the tests, install with `pip install .[test]` and run `pytest`.

## Commands

Print `primo N` for every prime from 2 up to a limit; the limit must be at least 2:

```
oslabs-primes 30
```

Run a command with the lines of standard input as its arguments, four lines per run. Trailing newlines are removed, and a last run is always made with whatever lines are left, even none:

```
seq 10 | oslabs-xargs echo
```

Copy a file, failing if the destination already exists:

```
oslabs-cp0 source.txt copy.txt
```

Copy a file through memory maps, creating or truncating the destination. An empty source cannot be mapped and is reported as an error:

```
oslabs-cp1 source.txt copy.txt
```

List every entry below the current directory whose name contains a string, as `./path/name`. Subdirectories are searched without following symbolic links; `-i` makes the match ignore ASCII case:

```
oslabs-find notes
oslabs-find -i NOTES
```

List running processes as a `PID COMMAND` table:

```
oslabs-ps
```

Start the shell:

```
oslabs-sh
```

It changes to `$HOME` and shows the working directory as the prompt. It handles:

- the built-ins `cd` (alone it goes to `$HOME`), `pwd` and `exit`; `history` is accepted but shows nothing,
- `KEY=value` words, which set variables for the program being run,
- `$VAR` and `$?` expansion; a variable that is unset or empty drops the word,
- `<file`, `>file`, `2>file` and `2>&1`,
- `|` pipes,
- `&` to run a command in the background in a process group of its own.

When standard output is a terminal, the shell reports how each program finished and the pid of each background job. A finished background job is reported when `SIGCHLD` arrives or before the next line is read. End of input or `exit` stops the shell.

## Library use

The file system is a plain Python object:

```python
from oslabs.fisopfs import FileSystem

fs = FileSystem("file.fisopfs")
fs.init()                       # loads the image file if it exists
fs.mkdir("/docs", 0o755)
fs.create("/docs/a.txt", 0o644)
fs.write("/docs/a.txt", b"hello", 0)
print(fs.read("/docs/a.txt", 5, 0))   # b'hello'
print(fs.readdir("/docs"))            # ['.', '..', 'a.txt']
print(fs.getattr("/docs/a.txt").size) # 5
fs.destroy()                    # saves the image file
```

`FileSystem` also offers `truncate`, `rmdir`, `unlink`, `utimens` and `flush`. Each file and directory holds one data block of 4096 bytes. Failed operations raise `oslabs.fisopfs.FileSystemError`, an `OSError` whose `errno` is the reason (`ENOENT`, `ENOTDIR`, `EISDIR`, `ENOTEMPTY`, `ENOSPC`, `ENAMETOOLONG`, `EINVAL`, `ENOMEM`).

The shell parser can be used on its own:

```python
from oslabs.parsing import parse_line

tree = parse_line("ls -l | grep py", 0)   # a PipeCommand of two ExecCommands
```

`oslabs.execution.run` runs a parsed command to completion and returns its status; `oslabs.execution.spawn` starts it without waiting.

## What it does not do

The file system is not mounted anywhere: nothing connects `FileSystem` to the operating system, so it is used only through its Python methods. The shell keeps no command history, and `oslabs-ps` works only where `/proc` exists.