"""Named and polymorphic object containers.

These back the settings sections that hold named entries (inspections,
copyright profiles, artifacts) and the polymorphic-by-name registries
(run configurations, facets).

A PolymorphicContainer maps a kind tag to a factory. Kinds are looked up
by the tag the entry class declares at registration time, never by
inspecting instances.
"""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from idea_ext.contracts.errors import DuplicateNameError, UnknownKindError

T = TypeVar("T")


class NamedContainer(Generic[T]):
    """Ordered collection of entries that are unique by name.

    Usage:
        inspections = NamedContainer(Inspection)
        inspections.create("unused", lambda i: setattr(i, "enabled", False))
        inspections.maybe_create("unused")  # returns the same entry
    """

    def __init__(self, entry_type: type[T], factory: Callable[[str], T] | None = None) -> None:
        self._entry_type = entry_type
        self._factory: Callable[[str], T] = factory if factory is not None else entry_type
        self._entries: dict[str, T] = {}

    @property
    def entry_type(self) -> type[T]:
        return self._entry_type

    def create(self, name: str, configure: Callable[[T], Any] | None = None) -> T:
        """Create a new named entry.

        Raises:
            DuplicateNameError: If an entry with this name already exists
        """
        if name in self._entries:
            raise DuplicateNameError(f"Cannot add {self._entry_type.__name__} '{name}': an entry with that name already exists")
        entry = self._factory(name)
        return self._store(name, entry, configure)

    def maybe_create(self, name: str, configure: Callable[[T], Any] | None = None) -> T:
        """Return the entry with this name, creating it if absent."""
        entry = self._entries.get(name)
        if entry is None:
            return self.create(name, configure)
        if configure is not None:
            configure(entry)
        return entry

    def _store(self, name: str, entry: T, configure: Callable[[T], Any] | None) -> T:
        self._entries[name] = entry
        if configure is not None:
            configure(entry)
        return entry

    def find_by_name(self, name: str) -> T | None:
        return self._entries.get(name)

    def get_by_name(self, name: str) -> T:
        """Return the entry with this name.

        Raises:
            KeyError: If no entry has this name
        """
        try:
            return self._entries[name]
        except KeyError:
            raise KeyError(f"{self._entry_type.__name__} with name '{name}' not found") from None

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries


class PolymorphicContainer(NamedContainer[T]):
    """Named container whose entries are created through a per-kind factory.

    Entry classes declare a ``kind`` tag (e.g. ``"application"``). A factory
    is registered for each class; ``create(name, kind)`` instantiates the
    named entry through the factory registered for that kind.
    """

    def __init__(self, base_type: type[T]) -> None:
        super().__init__(base_type, factory=self._reject_untyped)
        self._factories: dict[str, Callable[[str], T]] = {}

    @staticmethod
    def _reject_untyped(name: str) -> Any:
        raise TypeError(f"Entry '{name}' needs an explicit kind in a polymorphic container")

    def register_factory(self, entry_type: type[T], factory: Callable[[str], T]) -> None:
        """Register the factory for an entry class, keyed by its ``kind`` tag.

        Raises:
            TypeError: If entry_type is not a subtype of the container's base type
            ValueError: If a factory is already registered for the kind
        """
        if not issubclass(entry_type, self.entry_type):
            raise TypeError(f"{entry_type.__name__} is not a {self.entry_type.__name__}")
        kind: str = entry_type.kind  # type: ignore[attr-defined]
        if kind in self._factories:
            raise ValueError(f"Duplicate factory for kind '{kind}'")
        self._factories[kind] = factory

    def kinds(self) -> list[str]:
        return list(self._factories)

    def create(  # type: ignore[override]
        self,
        name: str,
        kind: str | type[T],
        configure: Callable[[T], Any] | None = None,
    ) -> T:
        """Create a named entry of the given kind.

        Args:
            name: Unique entry name
            kind: Kind tag, or an entry class whose ``kind`` tag is used
            configure: Optional callable applied to the new entry

        Raises:
            UnknownKindError: If no factory is registered for the kind
            DuplicateNameError: If an entry with this name already exists
        """
        tag = kind if isinstance(kind, str) else kind.kind  # type: ignore[attr-defined]
        factory = self._factories.get(tag)
        if factory is None:
            raise UnknownKindError(tag, self.kinds())
        if name in self:
            raise DuplicateNameError(f"Cannot add {self.entry_type.__name__} '{name}': an entry with that name already exists")
        return self._store(name, factory(name), configure)

    def maybe_create(  # type: ignore[override]
        self,
        name: str,
        kind: str | type[T],
        configure: Callable[[T], Any] | None = None,
    ) -> T:
        entry = self.find_by_name(name)
        if entry is None:
            return self.create(name, kind, configure)
        if configure is not None:
            configure(entry)
        return entry
