"""Sending one ICMP echo request and timing the reply."""

from __future__ import annotations

import os
import socket
import struct
import sys
import time
from dataclasses import dataclass
from typing import Sequence, Tuple

ICMP_ECHOREPLY = 0
ICMP_ECHO = 8
PACKET_SIZE = 64
RECV_SIZE = 1024

_ICMP_HEADER = struct.Struct("!BBHHH")


@dataclass(frozen=True)
class EchoReply:
    icmp_type: int
    code: int
    ident: int
    sequence: int


def checksum(data: bytes) -> int:
    """Internet checksum of data: one's complement of the one's complement sum."""
    data = bytes(data)
    if len(data) % 2:
        data += b"\0"
    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return ~total & 0xFFFF


def build_echo_request(ident: int, sequence: int, size: int = PACKET_SIZE) -> bytes:
    """An echo request of size bytes, zero padded, with its checksum filled in."""
    if size < _ICMP_HEADER.size:
        raise ValueError(f"packet must be at least {_ICMP_HEADER.size} bytes")
    ident &= 0xFFFF
    sequence &= 0xFFFF
    body = b"\0" * (size - _ICMP_HEADER.size)
    unsigned = _ICMP_HEADER.pack(ICMP_ECHO, 0, 0, ident, sequence) + body
    return _ICMP_HEADER.pack(ICMP_ECHO, 0, checksum(unsigned), ident, sequence) + body


def parse_reply(packet: bytes) -> EchoReply:
    """Read the ICMP header that follows the IP header of a received packet."""
    if not packet:
        raise ValueError("packet too short")
    offset = (packet[0] & 0x0F) * 4
    if len(packet) < offset + _ICMP_HEADER.size:
        raise ValueError("packet too short")
    icmp_type, code, _, ident, sequence = _ICMP_HEADER.unpack_from(packet, offset)
    return EchoReply(icmp_type, code, ident, sequence)


def _check_address(address: str) -> None:
    try:
        socket.inet_pton(socket.AF_INET, address)
    except (OSError, TypeError):
        raise ValueError("Invalid IP address") from None


def ping(address: str) -> Tuple[EchoReply, float]:
    """Send one echo request to address; return the reply and round trip in ms."""
    _check_address(address)
    with socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP) as sock:
        packet = build_echo_request(os.getpid() & 0xFFFF, 1)
        start = time.perf_counter()
        sock.sendto(packet, (address, 0))
        data, _ = sock.recvfrom(RECV_SIZE)
        elapsed = (time.perf_counter() - start) * 1000.0
    return parse_reply(data), elapsed


def main(argv: Sequence[str] | None = None) -> int:
    """Ping the IPv4 address named on the command line once."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "ping_icmp"
    if len(args) != 1:
        print(f"Usage: {prog} <IP address>", file=sys.stderr)
        return 1
    getuid = getattr(os, "getuid", None)
    if getuid is not None and getuid() != 0:
        print(f"{prog}: This program requires root privilege", file=sys.stderr)
        return 1
    address = args[0]
    try:
        _check_address(address)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Socket created. Ready to build ICMP packet to {address}")
    try:
        reply, rtt = ping(address)
    except (OSError, ValueError) as exc:
        print(f"ping failed: {getattr(exc, 'strerror', None) or exc}", file=sys.stderr)
        return 1
    if reply.icmp_type == ICMP_ECHOREPLY:
        print(f"Reply from {address}: icmp_seq={reply.sequence} time={rtt:.3f} ms")
    else:
        print(f"Received ICMP type {reply.icmp_type} code {reply.code}")
    return 0