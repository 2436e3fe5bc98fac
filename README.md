# minitools

A grab bag of small command-line utilities and the library functions behind
them. Every tool is installed as an `mt-*` command, and the work each one does
is also available as plain Python functions.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

The package needs a POSIX system: several tools use `curses`, `termios`,
`/proc/uptime` or raw sockets. Directory watching uses `watchdog`.

## Commands

### Files and text

| Command | What it does |
| --- | --- |
| `mt-cat FILE...` | Print each file followed by a newline; unreadable files are reported and skipped. |
| `mt-head [-n N] FILE...` | Print the first N lines (default 10) of each file, each prefixed with its number. |
| `mt-linecount FILE` | Count the lines in a file (lines longer than 1023 bytes count once per 1023-byte piece). |
| `mt-filesize FILE` | Show a file's size in bytes. |
| `mt-listdir [DIR]` | List the entries of a directory, including `.` and `..` (the current directory by default). |
| `mt-copy FILE DIR` | Copy a file into an existing directory under the same base name. |
| `mt-tee FILE` | Copy standard input to both standard output and FILE (FILE is truncated first). |
| `mt-icat FILE` | Print a file in 1 KiB pieces with a short pause after each; Ctrl+C is reported but does not stop it. |
| `mt-showhex FILE` | Hex dump: offset, 16 bytes per row in hex, then the printable characters. |
| `mt-vowels` | Read a line, lower-case it and count its vowels. |
| `mt-histgrep PATTERN` | Case-insensitive POSIX basic regular-expression search of `~/.bash_history`. |

### Ciphers

```
mt-encryptor --encrypt --method caesar --key 3 --input plain.txt --output secret.txt
mt-encryptor --decrypt --method caesar --key 3 --input secret.txt --output plain.txt
mt-encryptor --encrypt --method xor --key 42 --input plain.txt --output out.bin
mt-rot13
```

The short forms are `-e`, `-d`, `-k`, `-i`, `-o` and `-m`. Exactly one of
`--encrypt` and `--decrypt` must be given, and both input and output files are
required. The methods on the command line are `xor` and `caesar`.

`mt-rot13` reads one line and prints it lower-cased and rotated by 13.

The module `minitools.ciphers` also offers `xor_cipher`, `caesar_cipher`,
`transpose_line`, `transpose_cipher`, `vigenere_cipher` and `rot13` as
functions, and the `Method` enum.

### Small programs

| Command | What it does |
| --- | --- |
| `mt-bank` | A bank menu: create an account, deposit, withdraw, transfer, check a balance or view details. Each run carries out one menu choice. Accounts are kept in `users.dat` in the current directory. |
| `mt-circle` | Area or circumference of a circle. |
| `mt-rectangle` | Area or perimeter of a rectangle. |
| `mt-temperature` | A whole Celsius temperature to Fahrenheit or Kelvin. |
| `mt-factorial N` | Factorial of a positive integer, kept within 64 unsigned bits. |
| `mt-tinyvm PROGRAM` | Run a bytecode file on a tiny stack machine. |

The virtual machine understands these one-byte opcodes:

| Opcode | Meaning |
| --- | --- |
| `0x00` | HALT |
| `0x01 n` | PUSH the byte `n` |
| `0x02` | POP |
| `0x03` | ADD |
| `0x04` | SUB |
| `0x05` | MUL |
| `0x06` | DIV (truncating towards zero) |
| `0x08` | PRINT the top of the stack |

Arithmetic wraps at 32 bits and the stack holds at most 256 values. The
program is read in 256-byte blocks, and a PUSH operand must lie in the same
block as its opcode. Errors such as an empty stack or division by zero stop the
program with a message.

### System

| Command | What it does |
| --- | --- |
| `mt-envdump` | Print every environment variable as `NAME=value`. |
| `mt-uptime` | Seconds since boot and total idle seconds, from `/proc/uptime`. |
| `mt-time` | The current Unix time and the local time as text. |
| `mt-elfread -h FILE` | Summarise a 64-bit ELF header: magic, type, entry point, section and program-header counts. |
| `mt-elfread -S VALUE FILE` | List the section headers with their types and sizes. `-S` takes a value, which is not used. |
| `mt-dirhash --dir DIR --out MANIFEST` | Write a SHA-256 manifest (`digest path` per line) of every regular file under DIR. Asks before overwriting an existing manifest. |
| `mt-scheduler` | Run shell scripts at set times, configured in `scheduler.conf` in the current directory. |
| `mt-microshell` | A tiny interactive shell; `exit` or Ctrl+D leaves it. |
| `mt-watch DIR` | Report files created, deleted or modified anywhere under DIR until interrupted. |
| `mt-ping ADDRESS` | Send one ICMP echo request to an IPv4 address and show the round-trip time (needs root). |

The scheduler's configuration has one job per line; lines starting with `#`
and blank lines are ignored:

```
# hour minute /absolute/path/to/script.sh
6 30 /home/me/backup.sh
```

If `scheduler.conf` is missing, the scheduler offers to create one holding only
comments. Each script must exist when the configuration is read. Due jobs are
started with `sh` once a minute; starts and finished children are logged to
`scheduler.log`.

### Network

```
mt-send PORT ADDRESS FILE     # listen on ADDRESS:PORT and serve FILE to one client
mt-recv PORT ADDRESS FILE     # connect to ADDRESS:PORT and save what arrives in FILE
mt-httpget https://example.com/
```

Ports must be whole numbers from 1 to 65535 and addresses must be IPv4.
`mt-recv` writes over the start of FILE without truncating it. `mt-httpget`
writes the body of the page to standard output; with no argument it fetches a
built-in default page.

### Interactive terminal tools

* `mt-onan [FILE]` — a small full-screen editor. Arrow keys move, Backspace
  deletes, Ctrl+S saves and quits, Ctrl+X quits without saving. With no file
  it edits `~/temp.txt`. Only printable ASCII characters and newlines can be
  typed.
* `mt-typelogger -b -o FILE` records keystrokes to FILE until Escape;
  `mt-typelogger -p -o FILE` plays a recording back and then waits ten
  seconds. For recording, `-b` must come before `-o`.

## Using the library

```python
from minitools.ciphers import caesar_cipher, rot13
from minitools.hexdump import hexdump
from minitools.tinyvm import execute

print(caesar_cipher("Hello", 3, True))     # Khoor
print(rot13("Hello"))                      # uryyb
for row in hexdump(b"minitools"):
    print(row)
print(list(execute(bytes([0x01, 2, 0x01, 3, 0x03, 0x08, 0x00]))))  # [5]
```

Other useful pieces:

* `minitools.bank.Bank` — `accounts`, `save`, `deposit`, `withdraw`,
  `transfer`, `balance` and `details` over the binary accounts file; refused
  operations raise `AccountNotFound` or `InsufficientFunds`.
* `minitools.elf` — `parse_header`, `parse_sections`, `describe_type` and
  `section_type_name`.
* `minitools.editor.TextBuffer` — the editor's text and cursor movement,
  usable without a terminal.
* `minitools.ping` — `checksum`, `build_echo_request` and `parse_reply`.
* `minitools.mathutils` — `factorial`, `digits_to_decimal`, `find_max`,
  `swap` and `sum4`.
* `minitools.geometry` — circle, rectangle and temperature formulas.

## What it does not do

* The bank keeps balances in single precision with PINs stored as plain
  numbers; it is a toy, not a secure store, and offers no way to close an
  account.
* `mt-elfread` reads only 64-bit little-endian ELF files and shows no symbol
  tables.
* `mt-microshell` has no pipes, redirection, quoting or built-ins other than
  `exit`.
* `mt-ping` sends a single request and has no timeout.