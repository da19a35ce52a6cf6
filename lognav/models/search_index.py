"""Incremental text index over log group names"""

from typing import NamedTuple


class IndexedRecord(NamedTuple):
    """A piece of text stored in the index under a stable key"""

    key: int
    text: str


class SearchIndex:
    """Substring index keyed by position.

    A query is split into whitespace separated terms and a record matches when
    every term is a case-insensitive substring of its text. An empty query
    matches nothing, which callers treat as "no filter".
    """

    def __init__(self) -> None:
        self._records: dict[int, IndexedRecord] = {}
        self._folded: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def insert(self, key: int, text: str) -> None:
        """Index text under key, replacing anything already stored there"""
        self._records[key] = IndexedRecord(key, text)
        self._folded[key] = text.casefold()

    def get(self, key: int) -> IndexedRecord | None:
        """Get the record stored under key"""
        return self._records.get(key)

    def search(self, query_text: str) -> set[int]:
        """Get the keys of all records matching every term of the query"""
        terms = query_text.casefold().split()
        if not terms:
            return set()
        return {
            key
            for key, text in self._folded.items()
            if all(term in text for term in terms)
        }

    def reset(self) -> None:
        """Remove all records"""
        self._records.clear()
        self._folded.clear()
