"""
Sample store contents and helpers for reading store files in tests.
"""

import json
from pathlib import Path

SAMPLE_WEBSITES = [
    {"name": "docs", "url": "https://docs.python.org/3/"},
    {"name": "news", "url": "https://news.ycombinator.com"},
    {"name": "pypi", "url": "https://pypi.org"},
]


def read_store_file(path: Path) -> dict:
    """Parse a store file written by Store.save()."""
    return json.loads(path.read_text(encoding="utf-8"))
