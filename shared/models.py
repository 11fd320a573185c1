"""
Data models for the contributor list generator.

This module provides:
- Typed author records parsed from Git history
- Canonical-name resolution through the alias table
- Go string-literal rendering of a single entry
"""

from typing import Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

ENTRY_DELIMITER = "  -  "


class AuthorRecord(BaseModel):
    """One (name, email) pair, either raw from history or canonicalized."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Author display name")
    email: str = Field(default="", description="Author email, empty when unknown")

    def canonical(self, aliases: Mapping[str, str]) -> "AuthorRecord":
        """Return this record with its name replaced by the alias target, if any."""
        canonical_name = aliases.get(self.name, self.name)
        if canonical_name == self.name:
            return self
        return AuthorRecord(name=canonical_name, email=self.email)

    def sort_key(self) -> Tuple[str, str]:
        return (self.name, self.email)

    @computed_field
    @property
    def literal(self) -> str:
        """Quoted entry as it appears in the generated source."""
        if self.email:
            return f'"{self.name}{ENTRY_DELIMITER}{self.email}"'
        return f'"{self.name}"'
