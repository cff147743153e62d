"""Tradesperson display-name resolution.

Names are resolved through an injected lookup and memoised per resolver
instance; there is no process-wide cache.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from equitystek.core.logging import get_logger

log = get_logger(__name__)

Key = Union[int, str]


@dataclass(frozen=True)
class Pending:
    """Name not available yet; carries a placeholder to display meanwhile."""
    person_id: Key

    @property
    def placeholder(self) -> str:
        return f"Tradesperson #{self.person_id}"


class NameResolver(Protocol):
    def resolve_name(self, person_id: Key) -> Union[str, Pending]: ...


def _pick_name(record: Mapping[str, Any]) -> Optional[str]:
    for key in ("name", "full_name", "fullName", "username"):
        value = record.get(key)
        if value:
            return str(value)
    return None


class DirectoryNameResolver:
    """NameResolver backed by a user lookup.

    The lookup returns the user record, or None while it is not available
    (not fetched yet, unknown id). Only successful resolutions are memoised.
    """

    def __init__(self, lookup: Callable[[Key], Optional[Mapping[str, Any]]]):
        self._lookup = lookup
        self._names: dict[str, str] = {}

    def resolve_name(self, person_id: Key) -> Union[str, Pending]:
        key = str(person_id)
        if key in self._names:
            return self._names[key]

        record = self._lookup(person_id)
        name = _pick_name(record) if record else None
        if name is None:
            log.debug("tradesperson_name_pending", person_id=person_id)
            return Pending(person_id)

        self._names[key] = name
        return name

    def display_name(self, person_id: Key) -> str:
        """Resolved name, or the placeholder while pending."""
        result = self.resolve_name(person_id)
        return result.placeholder if isinstance(result, Pending) else result
