# ipfilter

A small tool and library for working with lists of IPv4 addresses taken
from tab-separated log files. It reads the first column of each line as an
address, sorts the addresses in descending order and prints a few filtered
views of them.

## Command line

Install the package, then run the command in a directory that holds a file
named `ip_filter.tsv`:

```
ip-filter
```

The command takes no options; any arguments are ignored. Only the first
tab-separated field of each line is used. The command prints, one address
per line and one after another:

1. every address, sorted in descending order;
2. the addresses whose first octet is `1`;
3. the addresses whose first two octets are `46` and `70`;
4. the addresses that have `46` in any octet.

If the file cannot be opened or a line holds a malformed address, the
message is written to standard error and the command still exits with
status 0. The file name is fixed; there is no way to read another file or
standard input from the command line.

The same command can be started with `python -m ipfilter.cli`.

## Library

The functions in `ipfilter.core` can be used on their own:

```python
import sys
from ipfilter.core import (
    parse_ip, sort_descending, filter_prefix, filter_any, print_ips, format_ip,
)

pool = [parse_ip(s) for s in ["1.2.3.4", "46.70.1.1", "10.46.0.1"]]
pool = sort_descending(pool)

print_ips(pool, sys.stdout)
print_ips(filter_prefix(pool, 46, 70), sys.stdout)
print_ips(filter_any(pool, 46), sys.stdout)
print(format_ip(pool[0]))
```

- `split(text, delimiter)` splits a string on a single character and keeps
  empty fields, so `split("11.", ".")` gives `["11", ""]`. A delimiter that
  is not exactly one character raises `ValueError`.
- `parse_ip(text)` turns a dotted address into a tuple of four integers. An
  empty part counts as `0`, so `"..."` parses as `(0, 0, 0, 0)`, and leading
  zeros are accepted (`"001.002.003.004"` gives `(1, 2, 3, 4)`). An address
  without exactly four parts, with a part that does not start with a number,
  or with a part outside 0–255, raises `ValueError`.
- `sort_descending(ips)` returns a new list ordered from highest to lowest.
- `filter_prefix(ips, *args)` keeps addresses whose leading octets equal the
  given values, in order; it takes one to four values and raises
  `TypeError` otherwise.
- `filter_any(ips, value)` keeps addresses with `value` in any octet.
- `format_ip(ip)` renders an address in dotted form, and
  `print_ips(ips, file=None)` writes each one on its own line to `file`, or
  to standard output when no file is given.
- `version()` returns the package's patch version number.

`ipfilter.cli` offers `read_pool(lines)` to parse the lines of a TSV file
and `run(lines, out)` to produce the full report on any text stream.

## Tests

```
pip install -e ".[test]"
pytest
```