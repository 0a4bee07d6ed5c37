from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Iterator, List, Mapping, Sequence, Tuple, TypeVar

from .errors import DuplicateKeyError, InvalidConfigurationError, NotFoundError, PositionNotFoundError

T = TypeVar("T")

_ANCHOR_KINDS = ("before", "after", "index")


@dataclass(frozen=True, slots=True)
class Position:
    """Where a batch lands in an :class:`OrderedItemCollection`.

    ``kind`` is one of ``append``, ``before``, ``after`` or ``index``; ``anchor``
    holds the referenced key (``before``/``after``) or the integer index.
    """

    kind: str = "append"
    anchor: Any = None

    @classmethod
    def parse(cls, where: Any) -> "Position":
        """Accepts ``None``, ``"first"``, ``"last"``, a Position, or a one-key
        mapping such as ``{"after": "header"}``."""
        if where is None:
            return APPEND
        if isinstance(where, Position):
            return where
        if isinstance(where, str):
            normalized = where.strip().lower()
            if normalized in ("", "last"):
                return APPEND
            if normalized == "first":
                return cls("index", 0)
            raise InvalidConfigurationError(f"unsupported position directive: {where!r}")
        if not isinstance(where, Mapping):
            raise InvalidConfigurationError(f"unsupported position directive: {where!r}")

        given = [kind for kind in _ANCHOR_KINDS if kind in where]
        unknown = set(where) - set(_ANCHOR_KINDS)
        if unknown or len(given) > 1:
            raise InvalidConfigurationError(f"position must name exactly one of before/after/index: {dict(where)!r}")
        if not given:
            return APPEND

        kind = given[0]
        anchor = where[kind]
        if anchor is None:
            raise InvalidConfigurationError(f"position {kind!r} needs an anchor")
        if kind == "index":
            if isinstance(anchor, bool) or not isinstance(anchor, int):
                raise InvalidConfigurationError(f"position index must be an integer: {anchor!r}")
        else:
            anchor = str(anchor)
        return cls(kind, anchor)

    def resolve(self, keys: Sequence[str]) -> int:
        if self.kind == "append":
            return len(keys)
        if self.kind == "index":
            index = self.anchor + len(keys) if self.anchor < 0 else self.anchor
            if not 0 <= index <= len(keys):
                raise PositionNotFoundError(self.anchor, f"position index out of range: {self.anchor}")
            return index
        try:
            offset = keys.index(self.anchor)
        except ValueError:
            raise PositionNotFoundError(self.anchor) from None
        return offset + 1 if self.kind == "after" else offset


APPEND = Position()


class OrderedItemCollection(Generic[T]):
    """Ordered mapping of unique keys to items with positional inserts.

    Adding an existing key is rejected; overwriting goes through
    :meth:`replace`. Removing an absent key raises :class:`NotFoundError`.
    """

    def __init__(self, items: Iterable[Tuple[str, T]] | None = None):
        self._keys: List[str] = []
        self._items: Dict[str, T] = {}
        if items is not None:
            self.insert_many(items)

    def insert(self, key: str, item: T, position: Any = None) -> None:
        self.insert_many([(key, item)], position)

    def insert_many(self, pairs: Iterable[Tuple[str, T]], position: Any = None) -> None:
        """Insert a batch relative to one anchor, keeping the batch order.

        All checks run before the first mutation, so a failing call leaves the
        collection as it was.
        """
        batch = [(str(key), item) for key, item in pairs]
        seen: set[str] = set()
        for key, _ in batch:
            if key in self._items or key in seen:
                raise DuplicateKeyError(key)
            seen.add(key)

        index = Position.parse(position).resolve(self._keys)
        for offset, (key, item) in enumerate(batch):
            self._keys.insert(index + offset, key)
            self._items[key] = item

    def replace(self, key: str, item: T) -> None:
        if key not in self._items:
            raise NotFoundError(key)
        self._items[key] = item

    def remove(self, key: str) -> T:
        if key not in self._items:
            raise NotFoundError(key)
        self._keys.remove(key)
        return self._items.pop(key)

    def merge(self, other: "OrderedItemCollection[T]" | Iterable[Tuple[str, T]]) -> List[str]:
        """Append entries whose keys are absent; returns the keys added."""
        pairs = other.items() if isinstance(other, OrderedItemCollection) else other
        added: List[str] = []
        for key, item in pairs:
            key = str(key)
            if key in self._items:
                continue
            self._keys.append(key)
            self._items[key] = item
            added.append(key)
        return added

    def clear(self) -> None:
        self._keys.clear()
        self._items.clear()

    def get(self, key: str, default: T | None = None) -> T | None:
        return self._items.get(key, default)

    def keys(self) -> List[str]:
        return list(self._keys)

    def values(self) -> List[T]:
        return [self._items[key] for key in self._keys]

    def items(self) -> List[Tuple[str, T]]:
        return [(key, self._items[key]) for key in self._keys]

    def index_of(self, key: str) -> int:
        try:
            return self._keys.index(key)
        except ValueError:
            raise NotFoundError(key) from None

    def __getitem__(self, key: str) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._keys!r})"
