"""Built-in run configuration and facet kinds."""

from idea_ext.plugins.hookspecs import hookimpl
from idea_ext.settings.sections import (
    Application,
    Facet,
    JUnit,
    Remote,
    RunConfiguration,
    SpringFacet,
    TestNG,
)


class BuiltinKinds:
    """Registers the kinds every idea-ext installation understands."""

    @hookimpl
    def idea_ext_get_run_configurations(self) -> list[type[RunConfiguration]]:
        return [Application, JUnit, Remote, TestNG]

    @hookimpl
    def idea_ext_get_facets(self) -> list[type[Facet]]:
        return [SpringFacet]
