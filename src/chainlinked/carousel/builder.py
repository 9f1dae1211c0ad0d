"""Carousel builder: fits generated content back into template slides.

Templates come from a shared catalog and can back several generations at
the same time. Every slide and element produced here is a new object with a
fresh id; the template passed in is never modified.
"""

from __future__ import annotations

import re
import uuid
from typing import Iterable, Mapping, Sequence, Union

from chainlinked.config.constants import Defaults
from chainlinked.config.logging import get_logger
from chainlinked.models import (
    CanvasSlide,
    CanvasTemplate,
    CanvasTextElement,
    CarouselBuildResult,
    ContentMap,
    ContentQualityScore,
    GeneratedSlotContent,
    PreviewContentArea,
    QualityBreakdown,
    SlidePreview,
    TemplateAnalysis,
)
from chainlinked.text_utils import round_half_up

logger = get_logger(__name__)

SlotContent = Union[Sequence[GeneratedSlotContent], Mapping[str, str]]

_SLOT_ID = re.compile(r"slot-(\d+)-(.+)")

# (min original font size, [(chars over, new size), ...]); first match wins
_FONT_SIZE_BANDS = [
    (72, [(50, 48), (40, 56), (25, 64)]),  # title
    (48, [(100, 32), (80, 36), (50, 42)]),  # heading
    (36, [(120, 28), (80, 32)]),  # subheading
    (28, [(250, 22), (200, 24), (150, 26)]),  # body
]


def generate_id() -> str:
    """Fresh id for a built slide or element."""
    return uuid.uuid4().hex


def to_content_map(content: SlotContent) -> ContentMap:
    if isinstance(content, Mapping):
        return dict(content)
    return {c.slot_id: c.content for c in content}


def calculate_optimal_font_size(text: str, base_font_size: float) -> float:
    """Shrink the font for longer text, bucketed by the template's original size.

    Text under 28px is never shrunk.
    """
    char_count = len(text)
    for min_size, thresholds in _FONT_SIZE_BANDS:
        if base_font_size >= min_size:
            for over, size in thresholds:
                if char_count > over:
                    return size
            return base_font_size
    return base_font_size


def build_slides_from_content(
    template: CanvasTemplate,
    analysis: TemplateAnalysis,
    content: SlotContent,
) -> CarouselBuildResult:
    """Build editor-ready slides from generated slot content.

    Args:
        template: The catalog template. Never modified.
        analysis: Analysis of the same template.
        content: Generated content as a list or a slot id mapping.

    Returns:
        CarouselBuildResult with fresh slide and element ids. Slots without
        content keep their placeholder text and add a warning.
    """
    contents = to_content_map(content)
    warnings: list[str] = []
    filled = 0
    slides = []
    for slide_index, slide in enumerate(template.slides):
        slots = {s.element_id: s for s in analysis.slots_for_slide(slide_index)}
        elements = []
        for element in slide.elements:
            new_id = generate_id()
            slot = slots.get(element.id) if isinstance(element, CanvasTextElement) else None
            if slot is None:
                elements.append(element.model_copy(update={"id": new_id}, deep=True))
                continue
            text = contents.get(slot.id)
            if not text:
                warnings.append(f"No content generated for slot: {slot.id}")
                elements.append(element.model_copy(update={"id": new_id}, deep=True))
                continue
            filled += 1
            elements.append(
                element.model_copy(
                    update={
                        "id": new_id,
                        "text": text,
                        "font_size": calculate_optimal_font_size(text, slot.original_font_size),
                    },
                    deep=True,
                )
            )
        slides.append(
            slide.model_copy(update={"id": generate_id(), "elements": elements}, deep=True)
        )
    if warnings:
        logger.warning(f"Built carousel with {len(warnings)} unfilled slot(s)")
    return CarouselBuildResult(
        slides=slides,
        filled_slots=filled,
        total_slots=analysis.total_slots,
        warnings=warnings,
    )


def parse_slot_id(slot_id: str) -> tuple[int, str] | None:
    """Split a slot id back into (slide index, element id)."""
    match = _SLOT_ID.match(slot_id)
    if not match:
        return None
    return int(match.group(1)), match.group(2)


def merge_generated_content(
    existing_slides: Sequence[CanvasSlide],
    new_content: SlotContent,
    slot_ids_to_update: Iterable[str],
) -> list[CanvasSlide]:
    """Apply regenerated content to selected slots of already built slides.

    Only text elements whose (slide index, element id) matches a listed slot
    id change. Font sizes are left as they are, so manual sizing survives a
    partial regeneration.

    Args:
        existing_slides: Slides as currently edited.
        new_content: Regenerated content; entries for unlisted slots are ignored.
        slot_ids_to_update: Slot ids to replace.

    Returns:
        New list of slides. Untouched slides and elements are returned as is.
    """
    targets = set(slot_ids_to_update)
    contents = {k: v for k, v in to_content_map(new_content).items() if k in targets and v}
    updates: dict[tuple[int, str], str] = {}
    for slot_id, text in contents.items():
        parsed = parse_slot_id(slot_id)
        if parsed is None:
            logger.warning(f"Ignoring malformed slot id: {slot_id}")
            continue
        updates[parsed] = text
    merged = []
    for slide_index, slide in enumerate(existing_slides):
        changed = False
        elements = []
        for element in slide.elements:
            text = updates.get((slide_index, element.id))
            if text is not None and isinstance(element, CanvasTextElement):
                elements.append(element.model_copy(update={"text": text}))
                changed = True
            else:
                elements.append(element)
        merged.append(slide.model_copy(update={"elements": elements}) if changed else slide)
    return merged


def generate_preview_data(
    template: CanvasTemplate,
    analysis: TemplateAnalysis,
    content: SlotContent,
) -> list[SlidePreview]:
    """Simplified per-slide content boxes for the live preview.

    Slots without generated content show their placeholder.
    """
    contents = to_content_map(content)
    previews = []
    for slide_index, slide in enumerate(template.slides):
        by_id = {e.id: e for e in slide.text_elements}
        areas = []
        for slot in analysis.slots_for_slide(slide_index):
            text = contents.get(slot.id) or slot.placeholder
            element = by_id.get(slot.element_id)
            areas.append(
                PreviewContentArea(
                    type=slot.type.value,
                    content=text,
                    x=(element.x if element else 0) or 0,
                    y=(element.y if element else 0) or 0,
                    width=(element.width if element else None) or Defaults.ELEMENT_WIDTH,
                    height=(element.height if element else None) or Defaults.ELEMENT_HEIGHT,
                    font_size=calculate_optimal_font_size(text, slot.original_font_size),
                )
            )
        previews.append(
            SlidePreview(
                slide_index=slide_index,
                background_color=slide.background_color or Defaults.BACKGROUND_COLOR,
                content_areas=areas,
            )
        )
    return previews


def _length_score(length: int, max_length: int) -> int:
    ratio = length / max_length
    if 0.5 <= ratio <= 0.9:
        return 100
    if 0.3 <= ratio <= 1.0:
        return 70
    if ratio > 1.0:
        return 30
    return 50


def score_content_quality(analysis: TemplateAnalysis, content: SlotContent) -> ContentQualityScore:
    """Score generated content from 0 to 100.

    40% average length fit (ideal is 50-90% of each slot's limit), plus 20
    points each for a filled first slide, a filled last slide, and every
    required slot being filled.
    """
    contents = {k: v for k, v in to_content_map(content).items() if v}
    scores = [
        _length_score(len(contents[s.id]), s.max_length) for s in analysis.slots if s.id in contents
    ]
    avg_length_score = sum(scores) / len(scores) if scores else 0
    last_index = analysis.total_slides - 1
    has_hook = any(s.id in contents for s in analysis.slots_for_slide(0))
    has_cta = any(s.id in contents for s in analysis.slots_for_slide(last_index))
    complete = all(s.id in contents for s in analysis.slots if s.required)
    overall = round_half_up(
        avg_length_score * 0.4 + (20 if has_hook else 0) + (20 if has_cta else 0) + (20 if complete else 0)
    )
    return ContentQualityScore(
        overall=overall,
        breakdown=QualityBreakdown(
            length_appropriate=round_half_up(avg_length_score),
            has_hook=has_hook,
            has_cta=has_cta,
            content_complete=complete,
        ),
    )
