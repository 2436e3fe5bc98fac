"""Sending a file to one TCP client and receiving it on the other side."""

from __future__ import annotations

import os
import re
import socket
import sys
from contextlib import contextmanager
from typing import Iterator, Sequence

PORT_MIN = 1
PORT_MAX = 65535
BUFFER_SIZE = 1024

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_datasync = getattr(os, "fdatasync", os.fsync)


def parse_port(text: str) -> int:
    """Validate a decimal port number in 1..65535."""
    found = _NUMBER.match(text)
    if not found:
        raise ValueError("Port number is not numeric")
    if found.end() != len(text):
        raise ValueError("Port number contains invalid characters")
    value = int(found.group(1))
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError("Port number out of range")
    if not PORT_MIN <= value <= PORT_MAX:
        raise ValueError("Port must be between 1 and 65535")
    return value


def _check_address(host: str) -> None:
    try:
        socket.inet_pton(socket.AF_INET, host)
    except (OSError, TypeError):
        raise ValueError("Ip Address is not valid") from None


@contextmanager
def _stage(label: str) -> Iterator[None]:
    """Prefix the message of an OSError with the step that failed."""
    try:
        yield
    except OSError as exc:
        raise OSError(exc.errno, f"{label}: {exc.strerror or exc}") from exc


def _tcp_socket() -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    return sock


def serve_file(host: str, port: int, path) -> int:
    """Wait for one client on host:port, send it the file; return bytes sent."""
    _check_address(host)
    with _tcp_socket() as server:
        with _stage("Bind failed"):
            server.bind((host, port))
        with _stage("Listening failed"):
            server.listen(1)
        with _stage("accept"):
            conn, _ = server.accept()
        with conn:
            with _stage("File error"):
                fh = open(path, "rb")
            with fh, _stage("Sending failed"):
                return conn.sendfile(fh)


def receive_file(host: str, port: int, path) -> int:
    """Connect to host:port and write everything received over the start of path.

    The file is created if needed but not truncated. Returns bytes received.
    """
    _check_address(host)
    with _tcp_socket() as sock:
        with _stage("connect"):
            sock.connect((host, port))
        with _stage("File"):
            fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
        total = 0
        with os.fdopen(fd, "wb") as fh:
            with _stage("Error during file transfer"):
                while chunk := sock.recv(BUFFER_SIZE):
                    fh.write(chunk)
                    total += len(chunk)
            fh.flush()
            try:
                _datasync(fh.fileno())
            except OSError as exc:
                print(f"File not written to disk: {exc.strerror}", file=sys.stderr)
    return total


def _prog(default: str) -> str:
    return sys.argv[0] if sys.argv and sys.argv[0] else default


def send_main(argv: Sequence[str] | None = None) -> int:
    """Serve one file to the first client that connects."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(f"Usage: {_prog('send_file')} <port_num> <remote ip> <file>", file=sys.stderr)
        return 1
    try:
        port = parse_port(args[0])
        serve_file(args[1], port, args[2])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc.strerror or exc, file=sys.stderr)
        return 1
    return 0


def recv_main(argv: Sequence[str] | None = None) -> int:
    """Fetch a file from a waiting sender."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(f"Usage: {_prog('recv_file')} <port_num> <remote ip> <dest file>", file=sys.stderr)
        return 1
    try:
        port = parse_port(args[0])
        receive_file(args[1], port, args[2])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc.strerror or exc, file=sys.stderr)
        return 1
    print("File transfer was successful")
    return 0