"""Data models for parsed code fence metadata."""

from pydantic import BaseModel, Field


class Attribute(BaseModel):
    """A key/value pair parsed out of an info string.

    Quoted values keep their escape sequences verbatim. Key-only flags carry an
    empty value.
    """

    key: str
    value: str = ""


class ParseResult(BaseModel):
    """Attributes in left-to-right order plus the unparsed remainder."""

    attrs: list[Attribute] = Field(default_factory=list)
    rest: str | None = None  # None when the whole input was consumed

    def as_dict(self) -> dict[str, str]:
        """Merge attributes into a mapping, later duplicates win."""
        return {attr.key: attr.value for attr in self.attrs}
