"""Shared pydantic configuration for wire-compatible models."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Keep integers as integers so round-tripped editor JSON is unchanged
Number = Union[int, float]


class CamelModel(BaseModel):
    """Model whose wire names are camelCase and attribute names snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump using wire (camelCase) names, keeping only fields that were set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class CanvasModel(CamelModel):
    """Read-only canvas editor object.

    Unknown editor keys (colors, font family, rotation, ...) are retained so
    they pass through a build unchanged.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )
