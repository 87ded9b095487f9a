"""Extension attachment for host objects.

Collaborators attach named, typed extensions to an ExtensionAware object
after it has been created. The container records the declared (public) type
of each extension next to its value; the declared type can be a supertype
of the runtime type, or a parameterised generic such as ``list[Facet]``.

The schema accessor differs by host API version:
- 4.5 and later: ``extensions_schema`` property (ModernExtensionContainer)
- 4.2 to 4.4: ``get_schema()`` method returning name -> type (LegacyExtensionContainer)
- older: no schema accessor at all (ExtensionContainer)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from idea_ext.contracts.errors import DuplicateNameError

HostVersion = tuple[int, ...]

MODERN_SCHEMA_VERSION: HostVersion = (4, 5)
LEGACY_SCHEMA_VERSION: HostVersion = (4, 2)


def parse_version(version: str | HostVersion) -> HostVersion:
    """Parse a dotted version string like "4.10" into a comparable tuple.

    Raises:
        ValueError: If a component is not a non-negative integer
    """
    if isinstance(version, tuple):
        return version
    parts = version.strip().split(".")
    if not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid host API version '{version}': expected dotted integers like '8.4'")
    return tuple(int(part) for part in parts)


def format_version(version: HostVersion) -> str:
    return ".".join(str(part) for part in version)


@dataclass(frozen=True)
class ExtensionSchema:
    """Name and declared type of one attached extension."""

    name: str
    public_type: Any


@dataclass(frozen=True)
class _Extension:
    value: Any
    public_type: Any


class ExtensionContainer:
    """Append-only registry of named extensions.

    Names are unique; there is no removal. Iteration order is attachment order.
    """

    def __init__(self) -> None:
        self._extensions: dict[str, _Extension] = {}

    def add(self, name: str, value: Any, public_type: Any = None) -> Any:
        """Attach an existing object under a name.

        Args:
            name: Extension name, unique within this container
            value: Extension object
            public_type: Declared type; defaults to the runtime type of value

        Returns:
            The attached value

        Raises:
            DuplicateNameError: If the name is already taken
        """
        if name in self._extensions:
            raise DuplicateNameError(f"Cannot add extension with name '{name}', as there is an extension already registered with that name.")
        declared = public_type if public_type is not None else type(value)
        self._extensions[name] = _Extension(value=value, public_type=declared)
        return value

    def create(self, name: str, extension_type: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Instantiate extension_type with the given arguments and attach it.

        The declared type is extension_type itself.
        """
        return self.add(name, extension_type(*args, **kwargs), public_type=extension_type)

    def find_by_name(self, name: str) -> Any | None:
        extension = self._extensions.get(name)
        return extension.value if extension is not None else None

    def get_by_name(self, name: str) -> Any:
        """Return the extension with this name.

        Raises:
            KeyError: If no extension has this name
        """
        try:
            return self._extensions[name].value
        except KeyError:
            raise KeyError(f"Extension with name '{name}' does not exist. Currently registered: {', '.join(self._extensions) or '(none)'}") from None

    @property
    def names(self) -> list[str]:
        return list(self._extensions)

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __len__(self) -> int:
        return len(self._extensions)


class LegacyExtensionContainer(ExtensionContainer):
    """Container shape of host API 4.2 to 4.4."""

    def get_schema(self) -> dict[str, Any]:
        return {name: extension.public_type for name, extension in self._extensions.items()}


class ModernExtensionContainer(ExtensionContainer):
    """Container shape of host API 4.5 and later."""

    @property
    def extensions_schema(self) -> list[ExtensionSchema]:
        return [ExtensionSchema(name=name, public_type=extension.public_type) for name, extension in self._extensions.items()]


def extension_container_for(api_version: HostVersion) -> ExtensionContainer:
    """Create the container shape that a host of api_version provides."""
    if api_version >= MODERN_SCHEMA_VERSION:
        return ModernExtensionContainer()
    if api_version >= LEGACY_SCHEMA_VERSION:
        return LegacyExtensionContainer()
    return ExtensionContainer()


class ExtensionAware:
    """Base for host objects that collaborators can attach extensions to."""

    def __init__(self, extensions: ExtensionContainer) -> None:
        self.extensions = extensions
