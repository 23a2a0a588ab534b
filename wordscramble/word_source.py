import re
import json
import time
import random
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import requests

from .exceptions import WordLoadFailure
from .models import WordEntry

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r'^[A-Za-z]+$')
DEFAULT_CATEGORY = "general"


def parse_records(records) -> List[WordEntry]:
    """
    Turn a decoded word list into entries.

    Each record is a positional list ``[word, _unused, category?]``; bare
    strings are read as ``[word]``. Records that are not usable are skipped.
    """
    if not isinstance(records, list):
        raise WordLoadFailure(f"Expected a JSON array of records, got {type(records).__name__}")
    entries = []
    skipped = 0
    for item in records:
        if isinstance(item, str):
            item = [item]
        if not isinstance(item, (list, tuple)) or not item or not isinstance(item[0], str):
            skipped += 1
            continue
        category = item[2] if len(item) > 2 and isinstance(item[2], str) and item[2] else DEFAULT_CATEGORY
        entries.append(WordEntry(word=item[0], category=category))
    if skipped:
        logger.debug(f"Skipped {skipped} malformed word records")
    return entries


def filter_entries(entries: Iterable[WordEntry], min_len: int, max_len: int) -> List[WordEntry]:
    """Keep letters-only words within the length bounds, dropping case-insensitive duplicates."""
    seen = set()
    result = []
    for entry in entries:
        word = entry.word
        if not (min_len <= len(word) <= max_len):
            continue
        if not WORD_PATTERN.fullmatch(word):
            continue
        key = word.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(entry)
    return result


class WordSource:
    """
    Supplies candidate words for a pair of length bounds.

    Tries the configured word list first (URL or local path), then the
    built-in list. Never raises: the worst case is an empty list.
    """

    def __init__(self, location: Optional[str] = None, use_remote: bool = True,
                 fallback: Optional[Callable[[], List[WordEntry]]] = None,
                 timeout: float = 10, max_retries: int = 3, initial_backoff: float = 1):
        self.location = location
        self.use_remote = use_remote and bool(location)
        if fallback is None:
            from .fallback_words import get_fallback_entries
            fallback = get_fallback_entries
        self.fallback = fallback
        self.timeout = timeout
        self.max_retries = max_retries
        self.initial_backoff = initial_backoff
        self._cache: Dict[Tuple[int, int], List[WordEntry]] = {}

        if self.use_remote:
            logger.info(f"Word list configured at {self.location}")
        else:
            logger.info("No remote word list configured. Using built-in word list.")

    @classmethod
    def from_settings(cls, settings) -> "WordSource":
        return cls(
            location=settings.word_list,
            use_remote=settings.use_remote_words,
            timeout=settings.fetch_timeout,
            max_retries=settings.max_retries,
            initial_backoff=settings.initial_backoff,
        )

    def invalidate(self) -> None:
        """Drop cached results so the next fetch re-reads the word list."""
        if self._cache:
            logger.info(f"Cleared word cache for bounds {list(self._cache)}")
        self._cache.clear()

    def fetch_words(self, min_len: int, max_len: int) -> List[WordEntry]:
        key = (min_len, max_len)
        if key in self._cache:
            return list(self._cache[key])

        if self.use_remote:
            try:
                words = self._load_remote(min_len, max_len)
            except WordLoadFailure as e:
                logger.warning(f"Word list load failed: {e}. Falling back to built-in word list.")
                # Not cached: the next round tries the word list again
                return self._load_fallback(min_len, max_len)
        else:
            words = self._load_fallback(min_len, max_len)
            if not words:
                return []

        # Clear the cache so stale bounds never linger next to the new ones
        self._cache = {key: words}
        logger.info(f"Loaded {len(words)} words for lengths {min_len}-{max_len}")
        return list(words)

    def _load_fallback(self, min_len: int, max_len: int) -> List[WordEntry]:
        try:
            words = filter_entries(self.fallback(), min_len, max_len)
        except Exception as e:
            logger.error(f"Built-in word list unavailable: {e}")
            words = []
        if not words:
            logger.error(f"No words available for lengths {min_len}-{max_len}")
        return words

    def _load_remote(self, min_len: int, max_len: int) -> List[WordEntry]:
        records = self._read_location()
        words = filter_entries(parse_records(records), min_len, max_len)
        if not words:
            raise WordLoadFailure(f"No words of length {min_len}-{max_len} in {self.location}")
        return words

    def _read_location(self):
        location = str(self.location)
        if location.startswith(("http://", "https://")):
            return self._request_json(location)
        try:
            with open(Path(location), 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise WordLoadFailure(f"Failed to read {location}: {e}") from e

    def _request_json(self, url: str, retry_count: int = 0):
        try:
            logger.debug(f"Fetching word list from {url}")
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            if retry_count >= self.max_retries:
                logger.error(f"Max retries ({self.max_retries}) reached. Error: {e}")
                raise WordLoadFailure(f"Failed to load {url}: {e}") from e

            # Exponential backoff with jitter
            backoff = self.initial_backoff * (2 ** retry_count)
            jitter = random.uniform(0, 0.1 * backoff)
            wait_time = backoff + jitter

            logger.warning(f"Word list request failed. Retrying in {wait_time:.2f} seconds... (Attempt {retry_count + 1}/{self.max_retries})")
            time.sleep(wait_time)

            return self._request_json(url, retry_count + 1)
