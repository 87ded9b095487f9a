"""Exception hierarchy for settings collection and rendering.

Conversion mismatches are NOT errors: an extension that cannot be turned
into a map is simply left out of the rendered document. Only conditions
that make the whole document untrustworthy are raised.
"""


class IdeaExtError(Exception):
    """Base class for all idea-ext errors."""


class SchemaUnavailableError(IdeaExtError):
    """Raised when no extension-schema accessor exists on the host.

    Fatal for the render call that hit it: a document without the
    collaborator-attached extensions would silently lose settings.

    Attributes:
        minimum_version: Oldest host API version that exposes a schema accessor
    """

    def __init__(self, minimum_version: str) -> None:
        self.minimum_version = minimum_version
        super().__init__(
            f"Can not collect extensions information in IDE settings. Please, use host API {minimum_version} or later."
        )


class SectionConfigError(IdeaExtError):
    """Raised when a settings section rejects configuration values."""


class UnknownKindError(IdeaExtError, KeyError):
    """Raised when a polymorphic container has no factory for a kind."""

    def __init__(self, kind: str, known: list[str]) -> None:
        self.kind = kind
        self.known = known
        super().__init__(f"No factory registered for kind '{kind}'. Known kinds: {', '.join(known) or '(none)'}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DuplicateNameError(IdeaExtError, ValueError):
    """Raised when a name is already taken in a container or extension registry."""
