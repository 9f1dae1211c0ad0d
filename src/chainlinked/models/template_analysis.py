"""Slot and analysis models produced by the template analyzer."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import CamelModel, Number


class SlotType(str, Enum):
    """Kind of content a slot expects."""

    TITLE = "title"
    SUBTITLE = "subtitle"
    HEADING = "heading"
    BODY = "body"
    BULLET = "bullet"
    NUMBER = "number"
    CTA = "cta"
    AUTHOR = "author"
    CAPTION = "caption"

    @property
    def is_required(self) -> bool:
        return self in REQUIRED_SLOT_TYPES


REQUIRED_SLOT_TYPES = frozenset({SlotType.TITLE, SlotType.CTA, SlotType.HEADING})


class SlidePurpose(str, Enum):
    """Narrative role of a slide within the carousel."""

    HOOK = "hook"
    CONTENT = "content"
    DATA = "data"
    QUOTE = "quote"
    CTA = "cta"
    INTRO = "intro"
    CONCLUSION = "conclusion"


class SlotPosition(CamelModel):
    x: Number = 0
    y: Number = 0


class TemplateSlot(CamelModel):
    """A fillable text region with a computed type and character budget."""

    id: str = Field(description="Stable id: slot-{slideIndex}-{elementId}")
    slide_index: int = Field(ge=0)
    element_id: str
    type: SlotType
    max_length: int = Field(gt=0, description="Character limit for generated content")
    placeholder: str = Field(default="", description="Template text shown until filled")
    purpose: str = Field(default="", description="Human-readable role, used in prompts")
    required: bool = False
    original_font_size: Number
    position: SlotPosition = Field(default_factory=SlotPosition)


class SlideBreakdown(CamelModel):
    """Per-slide summary of the analysis."""

    index: int
    purpose: SlidePurpose
    element_count: int = 0
    text_element_count: int = 0
    has_image: bool = False
    background_color: str = "#ffffff"
    slots: list[TemplateSlot] = Field(default_factory=list)


class TemplateAnalysis(CamelModel):
    """Decomposition of a template into slide purposes and slots.

    Recomputed for each request; never cached or mutated.
    """

    template_id: str
    template_name: str = ""
    category: str = ""
    total_slides: int = 0
    slide_breakdown: list[SlideBreakdown] = Field(default_factory=list)
    slots: list[TemplateSlot] = Field(default_factory=list)
    brand_colors: list[str] = Field(default_factory=list)
    fonts: list[str] = Field(default_factory=list)
    total_slots: int = 0
    required_slots: int = 0

    def slots_for_slide(self, slide_index: int) -> list[TemplateSlot]:
        return [s for s in self.slots if s.slide_index == slide_index]
