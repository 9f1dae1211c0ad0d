"""Template analysis, prompt building and slide building for carousels."""

from .builder import (
    build_slides_from_content,
    calculate_optimal_font_size,
    generate_preview_data,
    merge_generated_content,
    score_content_quality,
)
from .generation import CompletionFn, generate_carousel_content
from .prompt_builder import (
    build_carousel_system_prompt,
    build_carousel_user_prompt,
)
from .response import parse_carousel_response, truncate_to_fit, validate_content
from .template_analyzer import (
    analyze_template,
    get_template_structure_summary,
    validate_slot_content,
)

__all__ = [
    # Template analysis
    "analyze_template",
    "get_template_structure_summary",
    "validate_slot_content",
    # Prompts and responses
    "build_carousel_system_prompt",
    "build_carousel_user_prompt",
    "parse_carousel_response",
    "validate_content",
    "truncate_to_fit",
    # Building
    "build_slides_from_content",
    "calculate_optimal_font_size",
    "merge_generated_content",
    "generate_preview_data",
    "score_content_quality",
    # Orchestration
    "CompletionFn",
    "generate_carousel_content",
]
