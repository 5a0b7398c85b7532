# ABOUTME: Case-insensitive HTTP header container and the header merge operation
# ABOUTME: Header names are stored lower-cased; values are always strings

from typing import Any, Dict, Iterable, Iterator, Mapping, MutableMapping, Optional, Tuple, Union

HeaderSource = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class Headers(MutableMapping[str, str]):
    """
    Mutable mapping of HTTP header names to values.

    Lookups ignore case, so ``headers["Content-Type"]`` and
    ``headers["content-type"]`` address the same entry. Iteration yields the
    lower-cased names.
    """

    def __init__(self, initial: Optional[HeaderSource] = None):
        self._items: Dict[str, str] = {}
        if initial is not None:
            self.update(initial)

    @staticmethod
    def _key(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError(f"Header names must be strings, got {type(name).__name__}")
        return name.strip().lower()

    def __getitem__(self, name: str) -> str:
        return self._items[self._key(name)]

    def __setitem__(self, name: str, value: Any) -> None:
        self._items[self._key(name)] = str(value)

    def __delitem__(self, name: str) -> None:
        del self._items[self._key(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Headers({self._items!r})"

    def copy(self) -> "Headers":
        """Return an independent copy."""
        return Headers(self._items)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._items)


def merge_headers_into(target: Headers, source: Optional[HeaderSource]) -> Headers:
    """
    Set every header of ``source`` on ``target``.

    Same-named headers are overwritten (last writer wins). Applying the same
    source twice leaves ``target`` unchanged the second time.

    Args:
        target: Headers to update in place.
        source: Headers, a mapping or an iterable of pairs. ``None`` is a no-op.

    Returns:
        Headers: ``target``, for chaining.
    """
    if source is None:
        return target
    items = source.items() if isinstance(source, Mapping) else source
    for name, value in items:
        target[name] = value
    return target
