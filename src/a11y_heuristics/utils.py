import sys

import requests


def fetch_url(url: str, timeout: int = 10) -> str:
    """Fetch a URL and return its text. Raises requests.HTTPError on bad status."""
    headers = {"User-Agent": "a11y-heuristics/1.0"}
    resp = requests.get(url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp.text


def read_source(path: str) -> str:
    """Read markup from a file, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
