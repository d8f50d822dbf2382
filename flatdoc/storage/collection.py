from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from uuid import uuid4
import json
import logging

from .json_store import Record, Store

logger = logging.getLogger(__name__)

Query = Union[Mapping[str, Any], Callable[[Record], bool], None]

_MISSING = object()


def _same(a: Any, b: Any) -> bool:
    # bool is an int subclass; keep True distinct from 1
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if type(a) is not type(b):
        return False
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(_same(a[k], b[k]) for k in a)
    if isinstance(a, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return a == b


def _check_query(query: Query):
    if query is not None and not callable(query) and not isinstance(query, Mapping):
        raise TypeError("query must be a mapping or callable")


def matches(record: Record, query: Query) -> bool:
    """True when ``record`` satisfies ``query``.

    A mapping query requires every key to be present in the record with an
    exactly equal value (no coercion between types). A callable is used as the
    predicate directly. ``None`` or ``{}`` matches everything.
    """
    _check_query(query)
    if query is None:
        return True
    if callable(query):
        return bool(query(record))
    return all(_same(record.get(key, _MISSING), value) for key, value in query.items())


class Collection:
    """Handle bound to one named collection of a :class:`Store`."""

    def __init__(self, store: Store, name: str, schema: Optional[Mapping[str, Any]] = None):
        self.store = store
        self.name = name
        # documents default field values; never enforced
        self.schema: Dict[str, Any] = dict(schema or {})
        store.on_connect(lambda: store.register_collection(self.name))

    def __repr__(self):
        return f"Collection({self.name!r})"

    def create(self, data: Mapping[str, Any]) -> Record:
        if not isinstance(data, Mapping):
            raise TypeError("data must be a mapping")
        with self.store.lock(self.name):
            records = self.store.read_all(self.name)
            # stored form: fresh objects, JSON key and value types
            record = json.loads(json.dumps({**data, "id": str(uuid4())}))
            records.append(record)
            self.store.write_all(self.name, records)
        logger.debug("Created %s record %s", self.name, record["id"])
        return record

    def find_one(self, query: Query = None) -> Optional[Record]:
        _check_query(query)
        for record in self.store.read_all(self.name):
            if matches(record, query):
                return record
        return None

    def find_many(self, query: Query = None) -> List[Record]:
        _check_query(query)
        return [r for r in self.store.read_all(self.name) if matches(r, query)]

    def count(self, query: Query = None) -> int:
        return len(self.find_many(query))


def model(store: Store, name: str, schema: Optional[Mapping[str, Any]] = None) -> Collection:
    return Collection(store, name, schema)
