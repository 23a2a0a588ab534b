import json
import pytest
import requests
from unittest.mock import Mock, patch

from wordscramble.exceptions import WordLoadFailure
from wordscramble.fallback_words import FALLBACK_WORDS, get_fallback_entries
from wordscramble.models import WordEntry
from wordscramble.word_source import WordSource, filter_entries, parse_records

RECORDS = [
    ["planet", 12, "space"],
    ["Planet", 3, "space"],
    ["it's", 1],
    ["tree", 5],
    ["elephant", 9, "animals"],
    ["ox", 1, "animals"],
    "garden",
    [42, 1, "bad"],
    [],
]


def _mock_response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status = Mock()
    return response


@pytest.mark.unit
def test_parse_records_reads_word_and_category():
    entries = parse_records(RECORDS)
    assert WordEntry("planet", "space") in entries
    assert WordEntry("tree", "general") in entries
    assert WordEntry("garden", "general") in entries
    assert all(isinstance(e.word, str) for e in entries)


@pytest.mark.unit
def test_parse_records_rejects_non_list():
    with pytest.raises(WordLoadFailure):
        parse_records({"words": []})


@pytest.mark.unit
def test_filter_entries_bounds_letters_and_duplicates():
    words = [e.word for e in filter_entries(parse_records(RECORDS), 4, 7)]
    assert words == ["planet", "tree", "garden"]


@pytest.mark.unit
def test_filter_entries_rejects_trailing_newline():
    entries = [WordEntry("cat\n", "animals"), WordEntry("dog", "animals")]
    assert [e.word for e in filter_entries(entries, 3, 5)] == ["dog"]


@pytest.mark.unit
def test_newline_word_in_file_never_reaches_pool(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps([["cat\n", 0, "animals"], ["owl", 0, "animals"]]), encoding="utf-8")
    source = WordSource(location=str(path), fallback=lambda: [])
    assert [e.word for e in source.fetch_words(3, 5)] == ["owl"]


@pytest.mark.unit
def test_fetch_from_local_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    source = WordSource(location=str(path))
    words = source.fetch_words(6, 8)
    assert [e.word for e in words] == ["planet", "elephant", "garden"]


@pytest.mark.api
def test_fetch_from_url():
    with patch("wordscramble.word_source.requests.get") as mock_get:
        mock_get.return_value = _mock_response(RECORDS)
        source = WordSource(location="https://example.com/words.json")
        words = source.fetch_words(4, 7)

    assert [e.word for e in words] == ["planet", "tree", "garden"]
    mock_get.assert_called_once_with("https://example.com/words.json", timeout=10)


@pytest.mark.api
def test_fetch_is_cached_until_invalidated():
    with patch("wordscramble.word_source.requests.get") as mock_get:
        mock_get.return_value = _mock_response(RECORDS)
        source = WordSource(location="https://example.com/words.json")
        source.fetch_words(4, 7)
        source.fetch_words(4, 7)
        assert mock_get.call_count == 1

        source.invalidate()
        source.fetch_words(4, 7)
        assert mock_get.call_count == 2


@pytest.mark.api
def test_new_bounds_are_not_served_from_old_cache():
    with patch("wordscramble.word_source.requests.get") as mock_get:
        mock_get.return_value = _mock_response(RECORDS)
        source = WordSource(location="https://example.com/words.json")
        short = source.fetch_words(4, 7)
        long = source.fetch_words(8, 8)

    assert {e.word for e in short} == {"planet", "tree", "garden"}
    assert [e.word for e in long] == ["elephant"]


@pytest.mark.api
def test_network_failure_falls_back_to_builtin():
    with patch("wordscramble.word_source.requests.get") as mock_get:
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")
        source = WordSource(location="https://example.com/words.json", max_retries=0)
        words = source.fetch_words(5, 5)

    builtin = {w for by_len in FALLBACK_WORDS.values() for w in by_len.get(5, [])}
    assert words
    assert {e.word for e in words} <= builtin


@pytest.mark.api
def test_retry_logic():
    with patch("wordscramble.word_source.requests.get") as mock_get, \
            patch("wordscramble.word_source.time.sleep") as mock_sleep:
        mock_get.side_effect = [
            requests.exceptions.Timeout("slow"),
            _mock_response(RECORDS),
        ]
        source = WordSource(location="https://example.com/words.json", max_retries=2)
        words = source.fetch_words(4, 7)

    assert [e.word for e in words] == ["planet", "tree", "garden"]
    assert mock_get.call_count == 2
    mock_sleep.assert_called_once()


@pytest.mark.api
def test_empty_remote_result_falls_back():
    with patch("wordscramble.word_source.requests.get") as mock_get:
        mock_get.return_value = _mock_response([["ox", 1]])
        source = WordSource(location="https://example.com/words.json")
        words = source.fetch_words(4, 4)
    assert words
    assert all(len(e.word) == 4 for e in words)


@pytest.mark.unit
def test_remote_disabled_never_fetches():
    with patch("wordscramble.word_source.requests.get") as mock_get:
        source = WordSource(location="https://example.com/words.json", use_remote=False)
        words = source.fetch_words(3, 5)
    mock_get.assert_not_called()
    assert words


@pytest.mark.unit
def test_never_raises_when_everything_is_empty():
    source = WordSource(location=None, fallback=lambda: [])
    assert source.fetch_words(3, 5) == []


@pytest.mark.unit
def test_invalid_utf8_file_falls_back(tmp_path):
    path = tmp_path / "words.json"
    path.write_bytes(b'[["caf\xff", 0]]')
    source = WordSource(location=str(path), fallback=lambda: [WordEntry("bee", "animals")])
    assert [e.word for e in source.fetch_words(3, 5)] == ["bee"]


@pytest.mark.unit
def test_invalid_utf8_file_without_fallback_returns_empty(tmp_path):
    path = tmp_path / "words.json"
    path.write_bytes(b'[["caf\xff", 0]]')
    source = WordSource(location=str(path), fallback=lambda: [])
    assert source.fetch_words(3, 5) == []


@pytest.mark.unit
def test_broken_fallback_returns_empty():
    def broken():
        raise RuntimeError("no list")

    source = WordSource(location="/does/not/exist.json", fallback=broken)
    assert source.fetch_words(3, 5) == []


@pytest.mark.unit
def test_builtin_entries_are_letters_only():
    entries = get_fallback_entries()
    assert entries
    assert all(e.word.isalpha() for e in entries)
    assert {e.category for e in entries} == set(FALLBACK_WORDS)
