"""Code style section."""

from pydantic import Field

from idea_ext.settings.sections.base import SectionConfig


class LanguageCodeStyle(SectionConfig):
    """Per-language overrides."""

    class_count_to_use_import_on_demand: int | None = Field(default=None, ge=1)
    align_parameter_descriptions: bool | None = None
    align_thrown_exception_descriptions: bool | None = None
    generate_p_on_empty_lines: bool | None = None
    keep_empty_param_tags: bool | None = None
    keep_empty_return_tags: bool | None = None
    keep_empty_throws_tags: bool | None = None
    wrap_comments_at_right_margin: bool | None = None


class CodeStyleConfig(SectionConfig):
    """Project code style (rendered under ``codeStyle``)."""

    use_same_indents: bool | None = None
    hard_wrap_at: int | None = Field(default=None, ge=1)
    keep_control_statement_in_one_line: bool | None = None
    languages: dict[str, LanguageCodeStyle] = Field(default_factory=dict)

    def language(self, name: str) -> LanguageCodeStyle:
        """Return the overrides for a language, creating them on first use."""
        style = self.languages.get(name)
        if style is None:
            style = LanguageCodeStyle()
            self.languages[name] = style
        return style
