"""Parsing, ordering and filtering of IPv4 addresses."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import TextIO

IpAddress = tuple[int, int, int, int]

_PATCH_VERSION = 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def version() -> int:
    """Return the patch number of the project version."""
    return _PATCH_VERSION


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on every ``delimiter``, keeping empty fields.

    ``split("", ".")`` gives ``[""]`` and ``split("11.", ".")`` gives
    ``["11", ""]``.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return text.split(delimiter)


def _octet(field: str, source: str) -> int:
    """Read the leading integer of a field; an empty field counts as zero."""
    if not field:
        return 0
    match = _LEADING_INT.match(field)
    if match is None:
        raise ValueError(f"Wrong format ip, not a number {source}")
    return int(match.group(1))


def parse_ip(text: str) -> IpAddress:
    """Parse dotted text such as ``"10.0.0.1"`` into a 4-tuple of octets.

    Empty fields are read as 0. Raises ValueError when there are not
    exactly four fields or a field is outside 0..255.
    """
    fields = split(text, ".")
    if len(fields) != 4:
        raise ValueError(f"Wrong format ip {text}")
    octets = tuple(_octet(field, text) for field in fields)
    if not all(0 <= octet < 256 for octet in octets):
        raise ValueError(f"Wrong format ip, too big numbers {text}")
    return octets  # type: ignore[return-value]


def sort_descending(ips: Iterable[IpAddress]) -> list[IpAddress]:
    """Return the addresses ordered from the greatest to the smallest."""
    return sorted(ips, reverse=True)


def filter_prefix(ips: Iterable[IpAddress], *args: int) -> list[IpAddress]:
    """Keep addresses whose leading octets equal ``args`` in order."""
    if not 1 <= len(args) <= 4:
        raise TypeError("filter_prefix takes between 1 and 4 octet values")
    width = len(args)
    return [ip for ip in ips if tuple(ip[:width]) == args]


def filter_any(ips: Iterable[IpAddress], value: int) -> list[IpAddress]:
    """Keep addresses that have ``value`` in any of their octets."""
    return [ip for ip in ips if value in ip]


def format_ip(ip: IpAddress) -> str:
    """Render an address in dotted notation."""
    return ".".join(str(octet) for octet in ip)


def print_ips(ips: Iterable[IpAddress], file: TextIO | None = None) -> None:
    """Write each address on its own line."""
    out = sys.stdout if file is None else file
    for ip in ips:
        out.write(format_ip(ip) + "\n")