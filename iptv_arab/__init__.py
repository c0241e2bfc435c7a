"""Arab IPTV playlist curator: fetch, filter, merge, categorize and serve."""

__version__ = "1.0.0"
