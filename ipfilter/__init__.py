"""Parse, sort and filter IPv4 addresses from tab-separated logs."""

__version__ = "0.0.1"