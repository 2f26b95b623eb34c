"""Ordered query string parameters.

Unlike a mapping, ``QueryItems`` keeps every parameter in the order it
appears in the URL, duplicates included.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload
from urllib.parse import unquote


@dataclass(frozen=True, slots=True)
class QueryItem:
    """A single ``name=value`` query parameter.

    ``value`` is ``None`` when the parameter carried no ``=`` at all
    (``?flag``) and ``""`` when it carried an empty one (``?flag=``).
    """

    name: str
    value: str | None = None

    def as_tuple(self) -> tuple[str, str | None]:
        return (self.name, self.value)


class QueryItems(Sequence[QueryItem]):
    """Immutable, ordered query parameters.

    Attributes:
        _items: Parsed parameters in URL order.

    Indexing is positional. ``get`` returns the first value for a name,
    ``get_list`` returns all of them.
    """

    _items: tuple[QueryItem, ...]

    __slots__ = ("_items",)

    def __init__(self, items: tuple[QueryItem, ...] = ()) -> None:
        object.__setattr__(self, "_items", tuple(items))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryItems is immutable"
        raise AttributeError(msg)

    @overload
    def __getitem__(self, index: int) -> QueryItem: ...
    @overload
    def __getitem__(self, index: slice) -> "QueryItems": ...
    def __getitem__(self, index: int | slice) -> "QueryItem | QueryItems":
        if isinstance(index, slice):
            return QueryItems(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[QueryItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryItems):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            if len(other) != len(self._items):
                return False
            for item, o in zip(self._items, other, strict=True):
                if isinstance(o, QueryItem):
                    o = o.as_tuple()
                elif not (isinstance(o, tuple) and len(o) == 2):
                    return False
                if item.as_tuple() != o:
                    return False
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        items = ", ".join(repr(item.as_tuple()) for item in self._items)
        return f"QueryItems([{items}])"

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name*, or *default* if missing.

        A parameter present without ``=`` has no value, so *default* is
        returned for it as well. Use ``name in items.names()`` to test
        for presence.
        """
        for item in self._items:
            if item.name == name:
                return item.value if item.value is not None else default
        return default

    def get_list(self, name: str) -> list[str | None]:
        """Return every value for *name*, in URL order."""
        return [item.value for item in self._items if item.name == name]

    def names(self) -> list[str]:
        """Return parameter names in URL order, duplicates included."""
        return [item.name for item in self._items]


def parse_query(query: str) -> QueryItems:
    """Parse a raw query string (without the leading ``?``).

    Pieces are separated by ``&`` and split on the first ``=``. Names
    and values are percent-decoded; ``+`` is left as is. Empty pieces
    are skipped and anything from ``#`` on is a fragment, not query.

    Examples::

        "a=b&a=c"   -> [("a", "b"), ("a", "c")]
        "flag&x="   -> [("flag", None), ("x", "")]
    """
    query = query.partition("#")[0]
    if not query:
        return QueryItems()

    items: list[QueryItem] = []
    for piece in query.split("&"):
        if not piece:
            continue
        name, sep, value = piece.partition("=")
        items.append(QueryItem(name=unquote(name), value=unquote(value) if sep else None))
    return QueryItems(tuple(items))
