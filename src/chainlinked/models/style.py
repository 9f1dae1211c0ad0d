"""Writing style profile models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .base import CamelModel


class VocabularyLevel(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    ADVANCED = "advanced"
    TECHNICAL = "technical"


class EmojiUsage(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    HEAVY = "heavy"


class FormattingStyle(CamelModel):
    """Formatting habits observed across posts."""

    uses_line_breaks: bool = True
    avg_paragraph_length: int = 2
    uses_bullet_points: bool = False
    uses_numbered_lists: bool = False
    uses_bold_text: bool = False
    uses_emoji: bool = False
    uses_hashtags: bool = False
    hashtag_count: int = 0


class StyleProfile(CamelModel):
    """Statistical fingerprint of an author's writing.

    Defaults are the profile returned when there is nothing to analyze.
    """

    avg_sentence_length: int = Field(default=12, description="Average words per sentence")
    vocabulary_level: VocabularyLevel = VocabularyLevel.MODERATE
    tone: str = Field(default="professional", description="Top one or two tone buckets")
    formatting_style: FormattingStyle = Field(default_factory=FormattingStyle)
    hook_patterns: list[str] = Field(default_factory=list)
    emoji_usage: EmojiUsage = EmojiUsage.NONE
    cta_patterns: list[str] = Field(default_factory=list)
    signature_phrases: list[str] = Field(default_factory=list)
    content_themes: list[str] = Field(default_factory=list)


class StyleRefreshState(BaseModel):
    """Bookkeeping stored next to a profile; read to decide on a refresh.

    Field names match the storage columns.
    """

    posts_analyzed_count: int = Field(default=0, ge=0)
    last_refreshed_at: datetime
