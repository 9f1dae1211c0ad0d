"""Pydantic data models for templates, slots, style profiles and generation."""

from chainlinked.models.base import CamelModel, CanvasModel
from chainlinked.models.canvas import (
    CanvasElement,
    CanvasImageElement,
    CanvasShapeElement,
    CanvasSlide,
    CanvasTemplate,
    CanvasTextElement,
)
from chainlinked.models.generation import (
    CarouselBuildResult,
    CarouselGenerationInput,
    CarouselGenerationResult,
    CarouselTone,
    ContentMap,
    ContentQualityScore,
    ContentValidationResult,
    CtaType,
    GeneratedSlotContent,
    PersonalizationContext,
    PreviewContentArea,
    QualityBreakdown,
    SlidePreview,
)
from chainlinked.models.style import (
    EmojiUsage,
    FormattingStyle,
    StyleProfile,
    StyleRefreshState,
    VocabularyLevel,
)
from chainlinked.models.template_analysis import (
    REQUIRED_SLOT_TYPES,
    SlideBreakdown,
    SlidePurpose,
    SlotPosition,
    SlotType,
    TemplateAnalysis,
    TemplateSlot,
)

__all__ = [
    # Base models
    "CamelModel",
    "CanvasModel",
    # Canvas models
    "CanvasElement",
    "CanvasImageElement",
    "CanvasShapeElement",
    "CanvasSlide",
    "CanvasTemplate",
    "CanvasTextElement",
    # Template analysis models
    "REQUIRED_SLOT_TYPES",
    "SlideBreakdown",
    "SlidePurpose",
    "SlotPosition",
    "SlotType",
    "TemplateAnalysis",
    "TemplateSlot",
    # Style models
    "EmojiUsage",
    "FormattingStyle",
    "StyleProfile",
    "StyleRefreshState",
    "VocabularyLevel",
    # Generation models
    "CarouselBuildResult",
    "CarouselGenerationInput",
    "CarouselGenerationResult",
    "CarouselTone",
    "ContentMap",
    "ContentQualityScore",
    "ContentValidationResult",
    "CtaType",
    "GeneratedSlotContent",
    "PersonalizationContext",
    "PreviewContentArea",
    "QualityBreakdown",
    "SlidePreview",
]
