"""Turn a style profile into prompt instructions."""

from __future__ import annotations

from chainlinked.models import EmojiUsage, StyleProfile, VocabularyLevel

HOOK_DESCRIPTIONS = {
    "question-based": "question-based hooks",
    "personal-opening": "personal/first-person openers",
    "number-leading": "number-leading hooks",
    "direct-statement": "direct statement openers",
    "contrarian-opener": "contrarian/provocative openers",
    "quote-opener": "quote-based hooks",
    "short-punchy": "short, punchy one-liners",
    "narrative": "narrative-style openings",
}

CTA_DESCRIPTIONS = {
    "question-cta": "engaging questions",
    "opinion-seeking": "opinion-seeking prompts (agree/disagree?)",
    "engagement-ask": "engagement requests (share/comment)",
    "save-prompt": "save/bookmark prompts",
    "follow-cta": "follow/connect invitations",
    "link-cta": "link/resource references",
}

VOCABULARY_DESCRIPTIONS = {
    VocabularyLevel.SIMPLE: "simple, everyday language",
    VocabularyLevel.MODERATE: "accessible professional language",
    VocabularyLevel.ADVANCED: "sophisticated vocabulary",
    VocabularyLevel.TECHNICAL: "technical/industry-specific terminology",
}


def sentence_length_label(avg_words: int) -> str:
    if avg_words <= 10:
        return "short"
    if avg_words <= 15:
        return "moderate-length"
    return "longer"


def build_style_prompt_fragment(profile: StyleProfile) -> str:
    """Build the style block injected into generation prompts.

    Args:
        profile: The author's style profile.

    Returns:
        Instruction lines headed by "WRITING STYLE REQUIREMENTS:".
    """
    fmt = profile.formatting_style
    lines = ["WRITING STYLE REQUIREMENTS:"]
    lines.append(f"- Write in a {profile.tone} tone")
    lines.append(
        f"- Keep sentences {sentence_length_label(profile.avg_sentence_length)} "
        f"(avg {profile.avg_sentence_length} words)"
    )
    if profile.hook_patterns:
        hooks = ", ".join(HOOK_DESCRIPTIONS.get(h, h) for h in profile.hook_patterns)
        lines.append(f"- Open with {hooks}")
    if profile.cta_patterns:
        ctas = ", ".join(CTA_DESCRIPTIONS.get(c, c) for c in profile.cta_patterns)
        lines.append(f"- End with {ctas}")
    if fmt.uses_line_breaks:
        lines.append(f"- Use line breaks between every {fmt.avg_paragraph_length} sentences")
    if fmt.uses_bullet_points:
        lines.append("- Use bullet points for key points")
    if fmt.uses_numbered_lists:
        lines.append("- Use numbered lists for sequential items")
    if fmt.uses_bold_text:
        lines.append("- Use **bold** for emphasis on key phrases")
    if profile.emoji_usage in (EmojiUsage.MODERATE, EmojiUsage.HEAVY):
        lines.append(f"- Include emojis ({profile.emoji_usage.value} usage)")
    elif profile.emoji_usage is EmojiUsage.MINIMAL:
        lines.append("- Use emojis sparingly (1-2 per post)")
    else:
        lines.append("- Avoid emojis")
    if fmt.uses_hashtags:
        lines.append(f"- Include {fmt.hashtag_count} hashtags at the end")
    lines.append(f"- Use {VOCABULARY_DESCRIPTIONS[profile.vocabulary_level]}")
    if profile.signature_phrases:
        phrases = ", ".join(f'"{p}"' for p in profile.signature_phrases[:5])
        lines.append(f"- Where natural, reuse signature phrases: {phrases}")
    if profile.content_themes:
        lines.append(f"- Recurring themes: {', '.join(profile.content_themes)}")
    return "\n".join(lines)
