"""Template analyzer for extracting fillable content slots.

Decomposes a canvas template into slide purposes and typed, length-bounded
slots. Pure and deterministic: the same template always yields the same
slot ids in the same order.
"""

from __future__ import annotations

import re

from chainlinked.config.constants import Defaults
from chainlinked.config.logging import get_logger
from chainlinked.models import (
    CanvasImageElement,
    CanvasSlide,
    CanvasTemplate,
    CanvasTextElement,
    ContentMap,
    SlideBreakdown,
    SlidePurpose,
    SlotPosition,
    SlotType,
    TemplateAnalysis,
    TemplateSlot,
)

logger = get_logger(__name__)

_BARE_NUMBER = re.compile(r"^\d{1,2}$")
_DECORATIVE_TEXT = re.compile(r"^[\d\W]+$")
_SLIDE_NUMBER_BADGE = re.compile(r"^0?\d$")
_QUOTE_MARKS = ('"', "“", "”")
_DATA_KEYWORDS = ("%", "stats", "data")

# (min font size, slot type, max length), checked top to bottom
_CTA_BANDS = [
    (48, SlotType.CTA, 80),
    (32, SlotType.BODY, 150),
    (0, SlotType.CAPTION, 100),
]
_HOOK_BANDS = [
    (56, SlotType.TITLE, 60),
    (36, SlotType.SUBTITLE, 120),
    (0, SlotType.BODY, 200),
]
_CONTENT_BANDS = [
    (56, SlotType.HEADING, 50),
    (40, SlotType.HEADING, 80),
    (28, SlotType.BODY, 250),
    (0, SlotType.BODY, 300),
]


def analyze_template(template: CanvasTemplate) -> TemplateAnalysis:
    """Analyze a template to extract its fillable slots.

    Args:
        template: The canvas template to analyze. Never modified.

    Returns:
        TemplateAnalysis with per-slide breakdowns and the flat slot list.
        A template without slides yields an analysis with zero slots.
    """
    breakdowns: list[SlideBreakdown] = []
    all_slots: list[TemplateSlot] = []
    total = len(template.slides)
    for slide_index, slide in enumerate(template.slides):
        purpose = detect_slide_purpose(slide, slide_index, total)
        slots = extract_slots_from_slide(slide, slide_index, purpose)
        breakdowns.append(
            SlideBreakdown(
                index=slide_index,
                purpose=purpose,
                element_count=len(slide.elements),
                text_element_count=len(slide.text_elements),
                has_image=any(isinstance(e, CanvasImageElement) for e in slide.elements),
                background_color=slide.background_color or Defaults.BACKGROUND_COLOR,
                slots=slots,
            )
        )
        all_slots.extend(slots)
    analysis = TemplateAnalysis(
        template_id=template.id,
        template_name=template.name,
        category=template.category,
        total_slides=total,
        slide_breakdown=breakdowns,
        slots=all_slots,
        brand_colors=list(template.brand_colors),
        fonts=list(template.fonts),
        total_slots=len(all_slots),
        required_slots=sum(1 for s in all_slots if s.required),
    )
    logger.debug(
        f"Analyzed template {template.id}: slides={total}, "
        f"slots={analysis.total_slots}, required={analysis.required_slots}"
    )
    return analysis


def detect_slide_purpose(slide: CanvasSlide, index: int, total: int) -> SlidePurpose:
    """Detect the narrative role of a slide from its position and text.

    The first slide is always the hook and the last always the CTA; middle
    slides are classified from their text elements.
    """
    if index == 0:
        return SlidePurpose.HOOK
    if index == total - 1:
        return SlidePurpose.CTA
    texts = slide.text_elements
    # Large standalone numbers mark numbered content slides
    if any(
        (el.font_size or 0) >= 72 and _BARE_NUMBER.match(el.text.strip()) for el in texts
    ):
        return SlidePurpose.CONTENT
    if any(any(q in el.text for q in _QUOTE_MARKS) for el in texts):
        return SlidePurpose.QUOTE
    if any(any(k in el.text.lower() for k in _DATA_KEYWORDS) for el in texts):
        return SlidePurpose.DATA
    return SlidePurpose.CONTENT


def extract_slots_from_slide(
    slide: CanvasSlide, slide_index: int, purpose: SlidePurpose
) -> list[TemplateSlot]:
    """Extract slots from a slide's text elements, ordered top to bottom."""
    slots = []
    for element in slide.text_elements:
        slot = _analyze_text_element(element, slide_index, purpose)
        if slot is not None:
            slots.append(slot)
    slots.sort(key=lambda s: s.position.y)
    return slots


def is_decorative(element: CanvasTextElement) -> bool:
    """Whether a text element is decoration rather than content.

    Covers bullets, arrows and one- or two-character numerals, plus large
    slide-number badges such as "03".
    """
    text = element.text
    if len(text) <= 2 and _DECORATIVE_TEXT.match(text):
        return True
    return bool(_SLIDE_NUMBER_BADGE.match(text.strip())) and (element.font_size or 0) >= 60


def _analyze_text_element(
    element: CanvasTextElement, slide_index: int, purpose: SlidePurpose
) -> TemplateSlot | None:
    if is_decorative(element):
        return None
    font_size = element.font_size or Defaults.FONT_SIZE
    slot_type, max_length = determine_slot_type_and_length(font_size, purpose)
    return TemplateSlot(
        id=make_slot_id(slide_index, element.id),
        slide_index=slide_index,
        element_id=element.id,
        type=slot_type,
        max_length=max_length,
        placeholder=element.text,
        purpose=describe_slot_purpose(slot_type, purpose, slide_index),
        required=slot_type.is_required,
        original_font_size=font_size,
        position=SlotPosition(x=element.x, y=element.y),
    )


def make_slot_id(slide_index: int, element_id: str) -> str:
    return f"slot-{slide_index}-{element_id}"


def determine_slot_type_and_length(
    font_size: float, purpose: SlidePurpose
) -> tuple[SlotType, int]:
    """Pick the slot type and character budget for a text element.

    Args:
        font_size: The element's font size.
        purpose: The purpose of the slide the element sits on.

    Returns:
        Tuple of (slot type, max length).
    """
    if purpose is SlidePurpose.CTA:
        bands = _CTA_BANDS
    elif purpose in (SlidePurpose.HOOK, SlidePurpose.INTRO):
        bands = _HOOK_BANDS
    else:
        bands = _CONTENT_BANDS
    for min_size, slot_type, max_length in bands:
        if font_size >= min_size:
            return slot_type, max_length
    # Negative font sizes fall through every band
    _, slot_type, max_length = bands[-1]
    return slot_type, max_length


def describe_slot_purpose(slot_type: SlotType, purpose: SlidePurpose, slide_index: int) -> str:
    """Human-readable description of what a slot should say, for prompts."""
    n = slide_index + 1
    if purpose is SlidePurpose.HOOK:
        if slot_type is SlotType.TITLE:
            return f"Slide {n}: Main hook/headline that grabs attention and makes readers want to swipe"
        if slot_type is SlotType.SUBTITLE:
            return f"Slide {n}: Supporting text that adds context to the hook"
        return f"Slide {n}: Additional hook context"
    if purpose is SlidePurpose.CTA:
        if slot_type is SlotType.CTA:
            return f"Slide {n}: Final call-to-action that drives engagement (follow, like, comment, save)"
        return f"Slide {n}: Supporting CTA text"
    if purpose is SlidePurpose.CONTENT:
        if slot_type is SlotType.HEADING:
            return f"Slide {n}: Key point or insight heading"
        return f"Slide {n}: Detailed explanation or supporting content"
    if purpose is SlidePurpose.QUOTE:
        if slot_type in (SlotType.TITLE, SlotType.HEADING):
            return f"Slide {n}: Quote or key statement"
        return f"Slide {n}: Quote attribution or context"
    if purpose is SlidePurpose.DATA:
        if slot_type is SlotType.HEADING:
            return f"Slide {n}: Data point or statistic headline"
        return f"Slide {n}: Data explanation or context"
    return f"Slide {n}: {slot_type.value} content"


def get_template_structure_summary(analysis: TemplateAnalysis) -> str:
    """Format an outline of the template's slides and slots."""
    lines = [
        f"Template: {analysis.template_name} ({analysis.total_slides} slides)",
        "",
        "Slide Structure:",
    ]
    for slide in analysis.slide_breakdown:
        lines.append(f"\nSlide {slide.index + 1} ({slide.purpose.value}):")
        for slot in slide.slots:
            lines.append(f"  - {slot.type.value}: max {slot.max_length} chars")
            lines.append(f"    Purpose: {slot.purpose}")
    return "\n".join(lines)


def validate_slot_content(
    analysis: TemplateAnalysis, content: ContentMap
) -> tuple[bool, list[str]]:
    """Check that every required slot has content.

    Returns:
        Tuple of (is_valid, ids of required slots without content).
    """
    missing = [s.id for s in analysis.slots if s.required and s.id not in content]
    return not missing, missing
