"""Word list loading for building a DAWG from a file or a download."""

import time

import requests

from dawg import DAWG
from utils import DICT_URL, DEFAULT_TIMEOUT, log_with_time, vlog


def parse_words(text, min_length=1, max_length=None, upper=False, alpha_only=False):
    """Split ``text`` into words, one per line.

    Blank lines and ``#`` comments are skipped. Lengths count code points.
    Duplicates are kept; the DAWG ignores them.
    """
    words = []
    for line in text.splitlines():
        w = line.strip()
        if not w or w.startswith('#'):
            continue
        if upper:
            w = w.upper()
        if alpha_only and not w.isalpha():
            continue
        if len(w) < min_length:
            continue
        if max_length is not None and len(w) > max_length:
            continue
        words.append(w)
    return words


def read_words(path, **filters):
    with open(path, 'r', encoding='utf-8') as f:
        return parse_words(f.read(), **filters)


def download_words(url=DICT_URL, timeout=DEFAULT_TIMEOUT, **filters):
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return parse_words(resp.text, **filters)


def load_dawg(path=None, url=None, **filters):
    """Load a word list and build a DAWG from it.

    Reads ``path`` when given, otherwise downloads ``url`` (default
    ``utils.DICT_URL``). Returns ``(dawg, words)``.
    """
    if path is not None and url is not None:
        raise ValueError("Pass either a word list path or a URL, not both")

    t0 = time.time()
    if path is not None:
        log_with_time(f"⟳ Reading word list {path}…")
        words = read_words(path, **filters)
    else:
        url = url or DICT_URL
        log_with_time(f"⟳ Downloading word list {url}…")
        words = download_words(url, **filters)
    vlog(f"Word list loaded and filtered ({len(words)} words)", t0)

    t1 = time.time()
    dawg = DAWG.build(words)
    vlog(f"DAWG built with {dawg.node_count} nodes", t1)
    log_with_time(f"✅ {len(dawg)} words")
    return dawg, words
