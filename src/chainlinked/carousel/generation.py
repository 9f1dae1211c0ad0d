"""Caller-side orchestration of one carousel generation.

No model provider is bundled. Callers pass any function that takes the
system and user prompts and returns the raw model text.
"""

from __future__ import annotations

from typing import Protocol

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from chainlinked.config.logging import get_logger
from chainlinked.config.settings import get_settings
from chainlinked.exceptions import NothingToGenerateError, ResponseParseError
from chainlinked.models import (
    CarouselGenerationInput,
    CarouselGenerationResult,
    ContentMap,
    GeneratedSlotContent,
)

from .builder import score_content_quality
from .prompt_builder import build_carousel_system_prompt, build_carousel_user_prompt
from .response import parse_carousel_response, truncate_to_fit, validate_content

logger = get_logger(__name__)


class CompletionFn(Protocol):
    """Synchronous LLM call: (system prompt, user prompt) -> raw response text."""

    def __call__(self, system_prompt: str, user_prompt: str) -> str: ...


def generate_carousel_content(
    data: CarouselGenerationInput,
    complete: CompletionFn,
    *,
    max_attempts: int | None = None,
) -> CarouselGenerationResult:
    """Generate, validate and fit slot content for a carousel.

    Args:
        data: Generation request including the template analysis.
        complete: The LLM call.
        max_attempts: Overrides `generation_max_attempts` from settings.

    Returns:
        CarouselGenerationResult with non-empty slot content truncated to
        each slot's limit, the validation of the untruncated content, the
        number of attempts used and the quality score.

    Raises:
        NothingToGenerateError: If the template has no fillable slots.
        ResponseParseError: If no attempt produced a parseable response.
    """
    analysis = data.template_analysis
    if analysis.total_slots == 0:
        raise NothingToGenerateError(
            "Template has no text slots to fill",
            f"template_id={analysis.template_id}",
        )

    settings = get_settings()
    attempts_allowed = max_attempts or settings.generation_max_attempts
    system_prompt = build_carousel_system_prompt(data)
    user_prompt = build_carousel_user_prompt(data)
    logger.info(
        f"Generating carousel content for '{data.topic[:50]}' "
        f"({analysis.total_slots} slots, up to {attempts_allowed} attempts)"
    )

    retrying = Retrying(
        stop=stop_after_attempt(attempts_allowed),
        wait=wait_exponential(
            multiplier=1,
            min=settings.generation_retry_min_wait,
            max=settings.generation_retry_max_wait,
        ),
        retry=retry_if_exception_type(ResponseParseError),
        reraise=True,
    )
    content: ContentMap = {}
    attempts = 0
    for attempt in retrying:
        with attempt:
            attempts = attempt.retry_state.attempt_number
            raw = complete(system_prompt, user_prompt)
            parsed = parse_carousel_response(raw, analysis.slots)
            if parsed is None:
                logger.warning(f"Unparseable carousel response on attempt {attempts}")
                raise ResponseParseError(
                    "Model response contained no JSON object",
                    (raw or "")[:200] if isinstance(raw, str) else repr(raw),
                    attempts=attempts,
                )
            content = parsed

    validation = validate_content(content, analysis.slots)
    if not validation.is_valid:
        logger.warning(f"Content validation issues: {validation.issues}")

    slots = []
    for slot in analysis.slots:
        text = content.get(slot.id)
        if not text:
            continue
        slots.append(
            GeneratedSlotContent(slot_id=slot.id, content=truncate_to_fit(text, slot.max_length))
        )
    quality = score_content_quality(analysis, {s.slot_id: s.content for s in slots})
    logger.info(
        f"Generated {len(slots)}/{analysis.total_slots} slots in {attempts} attempt(s), "
        f"quality {quality.overall}"
    )
    return CarouselGenerationResult(
        slots=slots,
        validation=validation,
        attempts=attempts,
        quality=quality,
    )
