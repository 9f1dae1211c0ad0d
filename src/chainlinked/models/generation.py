"""Generation request, content and result models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from .base import CamelModel, Number
from .canvas import CanvasSlide
from .style import StyleProfile
from .template_analysis import TemplateAnalysis

# Slot id -> generated text
ContentMap = dict[str, str]


class CarouselTone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    EDUCATIONAL = "educational"
    INSPIRATIONAL = "inspirational"
    STORYTELLING = "storytelling"
    MATCH_MY_STYLE = "match-my-style"


class CtaType(str, Enum):
    NONE = "none"
    FOLLOW = "follow"
    COMMENT = "comment"
    SHARE = "share"
    LINK = "link"
    DM = "dm"
    SAVE = "save"
    CUSTOM = "custom"


_TONE_VALUES = frozenset(t.value for t in CarouselTone)
_CTA_VALUES = frozenset(c.value for c in CtaType)


class PersonalizationContext(CamelModel):
    """Author, company and brand facts assembled outside the engine.

    Every field is optional; only present fields are rendered into prompts.
    """

    name: str | None = None
    headline: str | None = None
    industry: str | None = None
    company_name: str | None = None
    value_proposition: str | None = None
    products_and_services: str | None = None
    target_audience: str | None = None
    tone_of_voice: str | None = None
    recent_posts: list[str] = Field(default_factory=list)
    saved_ideas: list[str] = Field(default_factory=list)


class CarouselGenerationInput(CamelModel):
    """Everything needed to build the generation prompts."""

    topic: str
    audience: str | None = None
    industry: str | None = None
    key_points: list[str] = Field(default_factory=list)
    tone: CarouselTone = CarouselTone.PROFESSIONAL
    cta_type: CtaType | None = None
    custom_cta: str | None = None
    additional_context: str | None = None
    template_analysis: TemplateAnalysis
    user_context: PersonalizationContext | None = None
    style_profile: StyleProfile | None = None

    @field_validator("tone", mode="before")
    @classmethod
    def _fallback_tone(cls, v):
        # Unknown tones get the generic guidance instead of failing the request
        if isinstance(v, CarouselTone):
            return v
        if v is None or (isinstance(v, str) and v not in _TONE_VALUES):
            return CarouselTone.PROFESSIONAL
        return v

    @field_validator("cta_type", mode="before")
    @classmethod
    def _fallback_cta(cls, v):
        if isinstance(v, CtaType):
            return v
        if isinstance(v, str) and v not in _CTA_VALUES:
            return None
        return v


class GeneratedSlotContent(CamelModel):
    """Generated text for one slot."""

    slot_id: str
    content: str
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)


class ContentValidationResult(CamelModel):
    is_valid: bool
    issues: list[str] = Field(default_factory=list)


class CarouselBuildResult(CamelModel):
    """Slides ready for the canvas editor plus fill statistics."""

    slides: list[CanvasSlide]
    filled_slots: int = 0
    total_slots: int = 0
    warnings: list[str] = Field(default_factory=list)

    def slides_to_wire(self) -> list[dict[str, Any]]:
        return [s.to_wire() for s in self.slides]


class PreviewContentArea(CamelModel):
    type: str
    content: str
    x: Number = 0
    y: Number = 0
    width: Number = 400
    height: Number = 100
    font_size: Number


class SlidePreview(CamelModel):
    """Simplified slide used by the live preview before commit."""

    slide_index: int
    background_color: str
    content_areas: list[PreviewContentArea] = Field(default_factory=list)


class QualityBreakdown(CamelModel):
    length_appropriate: int
    has_hook: bool
    has_cta: bool
    content_complete: bool


class ContentQualityScore(CamelModel):
    overall: int = Field(ge=0, le=100)
    breakdown: QualityBreakdown


class CarouselGenerationResult(CamelModel):
    """Outcome of one orchestrated generation."""

    slots: list[GeneratedSlotContent] = Field(default_factory=list)
    validation: ContentValidationResult
    attempts: int = 1
    quality: ContentQualityScore
