"""Parsing and validation of model responses for carousel slots."""

from __future__ import annotations

import json
import re
from typing import Sequence

from chainlinked.config.constants import Limits
from chainlinked.config.logging import get_logger
from chainlinked.models import ContentMap, ContentValidationResult, TemplateSlot

logger = get_logger(__name__)

# Greedy: first "{" through last "}"
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def _strip_md(txt: str) -> str:
    """Strip a leading ```json / ``` fence and a trailing ``` fence."""
    txt = txt.strip()
    if txt.startswith("```json"):
        txt = txt[7:]
    elif txt.startswith("```"):
        txt = txt[3:]
    if txt.endswith("```"):
        txt = txt[:-3]
    return txt.strip()


def parse_carousel_response(raw: str, expected_slots: Sequence[TemplateSlot]) -> ContentMap | None:
    """Extract slot content from a raw model response.

    Args:
        raw: Raw response text, possibly fenced or wrapped in prose.
        expected_slots: Slots the response should fill.

    Returns:
        Mapping of slot id to text containing only string values, or None if
        no JSON object could be parsed. Missing required slots are logged but
        do not fail the parse; the caller decides whether to retry.
    """
    if not isinstance(raw, str):
        logger.warning("Carousel response is not text")
        return None
    match = _JSON_OBJECT.search(_strip_md(raw))
    if not match:
        logger.warning("No JSON object found in carousel response")
        return None
    try:
        parsed = json.loads(match.group(0))
    except (ValueError, RecursionError) as e:
        logger.warning(f"Failed to parse carousel response as JSON: {e}")
        return None
    if not isinstance(parsed, dict):
        logger.warning("Parsed carousel response is not an object")
        return None
    content = {k: v for k, v in parsed.items() if isinstance(v, str)}
    missing = [s.id for s in expected_slots if s.required and s.id not in content]
    if missing:
        logger.warning(f"Missing required slots: {missing}")
    return content


def validate_content(content: ContentMap, slots: Sequence[TemplateSlot]) -> ContentValidationResult:
    """Check generated content against slot requirements.

    Flags required slots without content, content over the slot's limit
    (with actual and limit counts), and required content shorter than five
    characters.
    """
    issues = []
    for slot in slots:
        text = content.get(slot.id)
        if not text:
            if slot.required:
                issues.append(f"Missing required content for {slot.id}")
            continue
        if len(text) > slot.max_length:
            issues.append(
                f"Content for {slot.id} exceeds limit ({len(text)}/{slot.max_length} chars)"
            )
        if slot.required and len(text) < Limits.MIN_REQUIRED_CONTENT_CHARS:
            issues.append(f"Content for {slot.id} is too short")
    return ContentValidationResult(is_valid=not issues, issues=issues)


def truncate_to_fit(text: str, max_length: int) -> str:
    """Shorten text to `max_length`, preferring a word boundary.

    Cuts to `max_length - 3` characters, backs up to the last space when that
    space lies past 70% of `max_length`, and appends "...". Text already
    within the limit is returned unchanged. Limits under 3 get a plain cut.
    """
    if len(text) <= max_length:
        return text
    if max_length < 3:
        return text[: max(max_length, 0)]
    truncated = text[: max(max_length - 3, 0)]
    last_space = truncated.rfind(" ")
    if last_space > max_length * 0.7:
        return truncated[:last_space] + "..."
    return truncated + "..."
