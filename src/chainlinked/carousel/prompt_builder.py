"""Prompt builders for carousel content generation.

The system prompt carries the template structure, slot budgets, tone and
personalization; the user prompt carries the topic and the exact slot list
the model must fill.
"""

from __future__ import annotations

import json

from chainlinked.config.constants import Defaults, Limits
from chainlinked.models import (
    CarouselGenerationInput,
    CarouselTone,
    CtaType,
    PersonalizationContext,
    TemplateAnalysis,
    TemplateSlot,
)
from chainlinked.style.prompt_fragment import build_style_prompt_fragment
from chainlinked.text_utils import clip, escape_text_for_prompt

TONE_GUIDANCE: dict[CarouselTone, str] = {
    CarouselTone.PROFESSIONAL: """
- Use formal but accessible language
- Include data points and statistics where relevant
- Maintain credibility with expert terminology
- Keep sentences clear and concise
- Avoid slang and casual expressions""",
    CarouselTone.CASUAL: """
- Write like you're talking to a friend
- Use conversational language and contractions
- Add personality and occasional humor
- Keep it relatable and down-to-earth
- Use "you" and "I" to create connection""",
    CarouselTone.EDUCATIONAL: """
- Break down complex concepts simply
- Use analogies and examples
- Structure content for easy learning
- Build from basic to advanced
- Include actionable takeaways""",
    CarouselTone.INSPIRATIONAL: """
- Use powerful, emotive language
- Share transformation stories
- Include motivational quotes or insights
- Create a sense of possibility
- End with an empowering message""",
    CarouselTone.STORYTELLING: """
- Create a narrative arc across slides
- Use specific details and examples
- Include conflict/challenge and resolution
- Make it personal and relatable
- Build suspense between slides""",
    CarouselTone.MATCH_MY_STYLE: """
- CRITICAL: Deeply analyze the author's writing samples below and replicate their EXACT voice
- Mirror their sentence structures, paragraph lengths, and formatting habits
- Use similar vocabulary, expressions, and rhetorical devices
- Match their level of formality, humor, and storytelling approach
- The slides should be indistinguishable from the author's own writing""",
}

CTA_TEMPLATES: dict[CtaType, str] = {
    CtaType.FOLLOW: "Follow for more insights on [topic]",
    CtaType.COMMENT: "What's your experience with this? Comment below!",
    CtaType.SHARE: "Share this with someone who needs to see it",
    CtaType.LINK: "Click the link in bio to learn more",
    CtaType.DM: 'DM me "[keyword]" for [offer]',
    CtaType.SAVE: "Save this for later reference",
}

NO_CTA_INSTRUCTION = (
    "Do NOT include a call-to-action. End the final slide with a closing insight "
    "or summary instead of asking readers to follow, comment, share, or save."
)
GENERIC_CTA_INSTRUCTION = "Create an engaging CTA that fits the content"

OUTPUT_FORMAT = """## Output Format
Return ONLY a valid JSON object with slot IDs as keys and generated content as values.
Example format:
{
  "slot-0-element1": "Your hook title here",
  "slot-0-element2": "Compelling subtitle",
  "slot-1-element3": "First key insight"
}

Do not include any explanation or markdown formatting - just the JSON object."""


def build_carousel_system_prompt(data: CarouselGenerationInput) -> str:
    """Build the system prompt for carousel generation.

    Args:
        data: Generation request including the template analysis.

    Returns:
        Complete system prompt string.
    """
    analysis = data.template_analysis
    tone_guidance = TONE_GUIDANCE.get(data.tone, TONE_GUIDANCE[CarouselTone.PROFESSIONAL])
    sections = [
        "You are an expert LinkedIn carousel content creator with years of experience "
        "crafting viral, engaging carousel posts. Your task is to generate compelling "
        "content that perfectly fills a carousel template.",
        f"""## Your Mission
Create content for a {analysis.total_slides}-slide LinkedIn carousel that will:
1. Hook readers immediately on slide 1 (stop the scroll!)
2. Deliver genuine value in the middle slides
3. End with a powerful call-to-action""",
        f"## Writing Style{tone_guidance}",
    ]
    personalization = build_personalization_block(data.user_context, data.tone)
    if personalization:
        sections.append(personalization)
    if data.style_profile is not None:
        sections.append(f"## Author Style Profile\n{build_style_prompt_fragment(data.style_profile)}")
    audience = data.audience or (data.user_context and data.user_context.target_audience)
    industry = data.industry or (data.user_context and data.user_context.industry)
    sections.append(
        f"""## Audience Context
- Target audience: {audience or Defaults.AUDIENCE}
- Industry/niche: {industry or Defaults.INDUSTRY}"""
    )
    sections.append(f"## Template Structure\n{build_structure_description(analysis)}")
    sections.append(f"## Content Slots to Fill\n{build_slot_requirements(analysis.slots)}")
    sections.append(
        """## Critical Guidelines
1. **Character Limits**: NEVER exceed the max character limit for any slot
2. **Slide Flow**: Each slide should make readers want to swipe to the next
3. **Standalone Value**: Each slide should provide value even if viewed alone
4. **No Hashtags**: Don't include hashtags in the carousel content
5. **LinkedIn Style**: Write for LinkedIn's professional audience
6. **Swipe-Worthy**: Create micro-cliffhangers between slides
7. **No Fabrication**: Only state facts about the author or company that appear above"""
    )
    sections.append(OUTPUT_FORMAT)
    return "\n\n".join(sections)


def build_personalization_block(
    ctx: PersonalizationContext | None, tone: CarouselTone
) -> str:
    """Render author, company and voice facts. Empty when nothing is known."""
    if ctx is None:
        return ""
    match_style = tone is CarouselTone.MATCH_MY_STYLE
    parts = []
    author = []
    if ctx.name:
        author.append(f"- Name: {ctx.name}")
    if ctx.headline:
        author.append(f"- Headline: {ctx.headline}")
    if ctx.industry:
        author.append(f"- Industry: {ctx.industry}")
    if author:
        parts.append("## About the Author\n" + "\n".join(author))
    company = []
    if ctx.company_name:
        company.append(f"- Company: {ctx.company_name}")
    if ctx.value_proposition:
        company.append(f"- Value proposition: {ctx.value_proposition}")
    if ctx.products_and_services:
        company.append(f"- Products and services: {ctx.products_and_services}")
    if ctx.target_audience:
        company.append(f"- Target audience: {ctx.target_audience}")
    if company:
        parts.append("## Company Context\n" + "\n".join(company))
    if ctx.tone_of_voice:
        lead = (
            "The brand voice below is mandatory; every slot must read in this voice:"
            if match_style
            else "Follow this brand voice where it fits the selected tone:"
        )
        parts.append(f"## Brand Voice\n{lead}\n{ctx.tone_of_voice}")
    posts = _context_samples(ctx.recent_posts, match_style, recent=True)
    if posts:
        lead = (
            "CRITICAL: Replicate the exact voice, structure, and style of these posts:"
            if match_style
            else "Reference these recent posts for style context:"
        )
        parts.append(f"## Author's Recent Posts\n{lead}\n{_numbered_quotes(posts)}")
    ideas = _context_samples(ctx.saved_ideas, match_style, recent=False)
    if ideas:
        parts.append(
            "## Content Preferences (Posts the author found interesting)\n"
            + _numbered_quotes(ideas)
        )
    return "\n\n".join(parts)


def build_structure_description(analysis: TemplateAnalysis) -> str:
    """Describe each slide's purpose and layout for the model."""
    lines = [
        f'Template: "{analysis.template_name}" with {analysis.total_slides} slides',
        "",
    ]
    for slide in analysis.slide_breakdown:
        lines.append(f"Slide {slide.index + 1} ({slide.purpose.value.capitalize()}):")
        lines.append(f"  - Background: {slide.background_color}")
        lines.append(f"  - Text elements: {slide.text_element_count}")
        if slide.has_image:
            lines.append("  - Has image placeholder")
        lines.append("")
    return "\n".join(lines)


def build_slot_requirements(slots: list[TemplateSlot]) -> str:
    """List every slot with its budget and purpose."""
    lines = []
    for slot in slots:
        required = " [REQUIRED]" if slot.required else ""
        example = clip(slot.placeholder, Limits.PLACEHOLDER_PREVIEW_CHARS)
        lines.append(f"- {slot.id}{required}")
        lines.append(f"  Type: {slot.type.value}")
        lines.append(f"  Max characters: {slot.max_length}")
        lines.append(f"  Purpose: {slot.purpose}")
        lines.append(f'  Example/placeholder: "{escape_text_for_prompt(example)}"')
        lines.append("")
    return "\n".join(lines)


def build_cta_instruction(cta_type: CtaType | None, custom_cta: str | None) -> str:
    if cta_type is None:
        return GENERIC_CTA_INSTRUCTION
    if cta_type is CtaType.NONE:
        return NO_CTA_INSTRUCTION
    if cta_type is CtaType.CUSTOM:
        if custom_cta and custom_cta.strip():
            return f'Use this CTA approach: "{escape_text_for_prompt(custom_cta.strip())}"'
        return GENERIC_CTA_INSTRUCTION
    template = CTA_TEMPLATES.get(cta_type)
    if template is None:
        return GENERIC_CTA_INSTRUCTION
    return f"CTA style: {template}"


def build_carousel_user_prompt(data: CarouselGenerationInput) -> str:
    """Build the user prompt for carousel generation.

    Args:
        data: Generation request including the template analysis.

    Returns:
        Complete user prompt string.
    """
    analysis = data.template_analysis
    if data.key_points:
        key_points = "\n".join(f"{i}. {p}" for i, p in enumerate(data.key_points, 1))
    else:
        key_points = "None specified - generate based on topic"
    slot_list = [
        {
            "id": s.id,
            "type": s.type.value,
            "maxLength": s.max_length,
            "slide": s.slide_index + 1,
        }
        for s in analysis.slots
    ]
    sections = [
        f"Generate content for a LinkedIn carousel about:\n\n**Topic**: {data.topic}",
        f"**Key Points to Cover**:\n{key_points}",
        f"**Call-to-Action**:\n{build_cta_instruction(data.cta_type, data.custom_cta)}",
        f"**Slots to Fill** ({analysis.total_slots} total):\n{json.dumps(slot_list, indent=2)}",
    ]
    if data.additional_context and data.additional_context.strip():
        sections.append(f"**Additional Context**:\n{data.additional_context.strip()}")
    final_slide = (
        "- Final slide should close with a memorable takeaway"
        if data.cta_type is CtaType.NONE
        else "- Final slide should drive maximum engagement"
    )
    sections.append(
        f"""Remember:
- Slide 1 must STOP THE SCROLL - make it impossible to ignore
- Each middle slide should deliver on the hook's promise
{final_slide}
- Stay within character limits for each slot
- Return ONLY the JSON object with slot content"""
    )
    return "\n\n".join(sections)


def _context_samples(samples: list[str], match_style: bool, recent: bool) -> list[str]:
    if match_style:
        limit = Limits.MAX_RECENT_POSTS_MATCH_STYLE if recent else Limits.MAX_SAVED_IDEAS_MATCH_STYLE
        chars = Limits.CONTEXT_SAMPLE_CHARS_MATCH_STYLE
    else:
        limit = Limits.MAX_RECENT_POSTS if recent else Limits.MAX_SAVED_IDEAS
        chars = Limits.CONTEXT_SAMPLE_CHARS
    kept = [s for s in samples if s and len(s) > Limits.CONTEXT_SAMPLE_MIN_CHARS]
    return [clip(s, chars) for s in kept[:limit]]


def _numbered_quotes(items: list[str]) -> str:
    return "\n".join(f'{i}. "{item}"' for i, item in enumerate(items, 1))
