"""Canvas editor models: templates, slides and elements.

These mirror the schema the canvas editor reads and writes. Templates come
from a shared catalog and may back many generations at once, so every model
here is frozen; builders derive new objects with `model_copy`.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import AliasChoices, Field, field_validator

from .base import CanvasModel, Number


class CanvasTextElement(CanvasModel):
    """Text box on a slide. The only element type that becomes a slot."""

    type: Literal["text"] = "text"
    id: str
    text: str = ""
    font_size: Number | None = None
    x: Number = 0
    y: Number = 0
    width: Number | None = None
    height: Number | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _null_text_is_empty(cls, v):
        return "" if v is None else v


class CanvasImageElement(CanvasModel):
    """Image placeholder on a slide."""

    type: Literal["image"] = "image"
    id: str
    src: str = ""
    x: Number = 0
    y: Number = 0
    width: Number | None = None
    height: Number | None = None


class CanvasShapeElement(CanvasModel):
    """Decorative shape on a slide."""

    type: Literal["shape"] = "shape"
    id: str
    x: Number = 0
    y: Number = 0
    width: Number | None = None
    height: Number | None = None


CanvasElement = Annotated[
    Union[CanvasTextElement, CanvasImageElement, CanvasShapeElement],
    Field(discriminator="type"),
]


class CanvasSlide(CanvasModel):
    """A single slide: background plus positioned elements."""

    id: str
    background_color: str | None = None
    elements: list[CanvasElement] = Field(default_factory=list)

    @property
    def text_elements(self) -> list[CanvasTextElement]:
        return [e for e in self.elements if isinstance(e, CanvasTextElement)]


class CanvasTemplate(CanvasModel):
    """Catalog template. Accepts both `slides` and the editor's `defaultSlides`."""

    id: str
    name: str = ""
    category: str = ""
    slides: list[CanvasSlide] = Field(
        default_factory=list,
        validation_alias=AliasChoices("slides", "defaultSlides"),
    )
    brand_colors: list[str] = Field(default_factory=list)
    fonts: list[str] = Field(default_factory=list)
