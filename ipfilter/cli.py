"""Command that sorts and filters the addresses in ip_filter.tsv."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from ipfilter.core import (
    IpAddress,
    filter_any,
    filter_prefix,
    parse_ip,
    print_ips,
    sort_descending,
    split,
)

POOL_FILE = "ip_filter.tsv"


def read_pool(lines: Iterable[str]) -> list[IpAddress]:
    """Parse the address in the first tab-separated column of each line."""
    return [parse_ip(split(line.rstrip("\n"), "\t")[0]) for line in lines]


def run(lines: Iterable[str], out: TextIO) -> None:
    """Print the sorted pool followed by the three filtered selections."""
    pool = sort_descending(read_pool(lines))
    print_ips(pool, out)
    print_ips(filter_prefix(pool, 1), out)
    print_ips(filter_prefix(pool, 46, 70), out)
    print_ips(filter_any(pool, 46), out)


def main(argv: Sequence[str] | None = None) -> int:
    """Process ip_filter.tsv from the working directory; arguments are ignored."""
    try:
        try:
            handle = open(POOL_FILE, encoding="utf-8")
        except OSError:
            raise RuntimeError(f"Could not open {POOL_FILE} file") from None
        with handle:
            run(handle, sys.stdout)
    except (RuntimeError, ValueError) as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())