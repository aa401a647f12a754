"""Accumulated state of a GNSS session."""

from collections.abc import Iterator, Mapping, MutableMapping

from gnss_decoder.nmea.types import FieldValue

__all__ = ["StateStore"]


class StateStore(MutableMapping[str, FieldValue]):
    """Latest value of every field decoded during a session.

    Sentences are merged key by key: a newly decoded sentence overwrites only
    the keys it produced, and keys from other sentence types persist. No
    history is kept.

    Example:
        >>> store = StateStore()
        >>> store.merge({"utc": 85120.307, "hdr": 1.0})
        >>> store.merge({"utc": 85121.0})
        >>> dict(store)
        {'utc': 85121.0, 'hdr': 1.0}
    """

    def __init__(self) -> None:
        self._values: dict[str, FieldValue] = {}

    def merge(self, fields: Mapping[str, FieldValue]) -> None:
        """Overwrite the keys present in ``fields``."""
        self._values.update(fields)

    def __getitem__(self, key: str) -> FieldValue:
        return self._values[key]

    def __setitem__(self, key: str, value: FieldValue) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"StateStore({self._values!r})"
