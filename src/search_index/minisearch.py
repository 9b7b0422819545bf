"""Full-text index serialized in the MiniSearch JSON format.

The static site's search widget loads the index with ``MiniSearch.loadJSON``,
so the structure produced here follows MiniSearch serialization version 2:
documents get sequential short ids, every term maps field ids to per-document
term frequencies, and field lengths count unique tokens.
"""

import unicodedata
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional

SERIALIZATION_VERSION = 2


def _is_separator(char: str) -> bool:
    return char in "\n\r" or unicodedata.category(char)[0] in ("Z", "P")


def tokenize(text: str) -> List[str]:
    """
    Split text on runs of whitespace and punctuation.

    Leading or trailing separators produce an empty token, the same way a
    JavaScript ``String.split`` on the separator pattern does.
    """
    tokens = []
    current = []
    in_separator = False

    for char in text:
        if _is_separator(char):
            if not in_separator:
                tokens.append("".join(current))
                current = []
                in_separator = True
        else:
            current.append(char)
            in_separator = False

    tokens.append("".join(current))
    return tokens


def process_term(term: str) -> Optional[str]:
    """Lowercase a token; empty tokens are not indexed."""
    return term.lower() or None


def field_to_string(value: Any) -> str:
    """Render a field value the way JavaScript ``toString`` does."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(field_to_string(item) for item in value)
    return str(value)


def _dense(values: Dict[int, Any]) -> List[Any]:
    """Turn a sparse {position: value} map into a list with None holes."""
    if not values:
        return []
    return [values.get(position) for position in range(max(values) + 1)]


class MiniSearchIndex:
    """In-memory full-text index that serializes to MiniSearch JSON."""

    def __init__(self, fields: List[str], store_fields: List[str] = None, id_field: str = "id"):
        if not fields:
            raise ValueError("MiniSearchIndex requires at least one field to index")

        self.fields = list(fields)
        self.store_fields = list(store_fields or [])
        self.id_field = id_field

        self._field_ids = {name: position for position, name in enumerate(self.fields)}
        self._document_ids: Dict[int, Any] = {}
        self._id_to_short_id: Dict[Any, int] = {}
        self._field_length: Dict[int, Dict[int, int]] = {}
        self._avg_field_length: Dict[int, float] = {}
        self._stored_fields: Dict[int, Dict[str, Any]] = {}
        self._index: Dict[str, Dict[int, Dict[int, int]]] = defaultdict(dict)
        self._document_count = 0
        self._next_id = 0

    @property
    def document_count(self) -> int:
        return self._document_count

    def add(self, document: Dict[str, Any]):
        """
        Add a single document to the index.

        Raises:
            ValueError: If the document has no id or its id was already added
        """
        doc_id = document.get(self.id_field)
        if doc_id is None:
            raise ValueError(f'Document does not have ID field "{self.id_field}"')
        if doc_id in self._id_to_short_id:
            raise ValueError(f"Duplicate document ID: {doc_id}")

        short_id = self._add_document_id(doc_id)
        self._save_stored_fields(short_id, document)

        for field_name in self.fields:
            value = document.get(field_name)
            if value is None:
                continue

            tokens = tokenize(field_to_string(value))
            field_id = self._field_ids[field_name]
            self._add_field_length(short_id, field_id, self._document_count - 1, len(set(tokens)))

            for token in tokens:
                term = process_term(token)
                if term:
                    self._add_term(field_id, short_id, term)

    def add_all(self, documents: Iterable[Dict[str, Any]]):
        """Add documents in order."""
        for document in documents:
            self.add(document)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the structure expected by ``MiniSearch.loadJSON``."""
        index = []
        for term in sorted(self._index):
            field_index = self._index[term]
            index.append([term, {field_id: dict(freqs) for field_id, freqs in sorted(field_index.items())}])

        return {
            "documentCount": self._document_count,
            "nextId": self._next_id,
            "documentIds": dict(self._document_ids),
            "fieldIds": dict(self._field_ids),
            "fieldLength": {short_id: _dense(lengths) for short_id, lengths in self._field_length.items()},
            "averageFieldLength": _dense(self._avg_field_length),
            "storedFields": dict(self._stored_fields),
            "dirtCount": 0,
            "index": index,
            "serializationVersion": SERIALIZATION_VERSION,
        }

    def _add_document_id(self, doc_id: Any) -> int:
        short_id = self._next_id
        self._id_to_short_id[doc_id] = short_id
        self._document_ids[short_id] = doc_id
        self._document_count += 1
        self._next_id += 1
        return short_id

    def _save_stored_fields(self, short_id: int, document: Dict[str, Any]):
        if not self.store_fields:
            return
        stored = self._stored_fields.setdefault(short_id, {})
        for field_name in self.store_fields:
            if field_name in document:
                stored[field_name] = document[field_name]

    def _add_field_length(self, short_id: int, field_id: int, count: int, length: int):
        self._field_length.setdefault(short_id, {})[field_id] = length
        average = self._avg_field_length.get(field_id, 0)
        self._avg_field_length[field_id] = (average * count + length) / (count + 1)

    def _add_term(self, field_id: int, short_id: int, term: str):
        freqs = self._index[term].setdefault(field_id, {})
        freqs[short_id] = freqs.get(short_id, 0) + 1
