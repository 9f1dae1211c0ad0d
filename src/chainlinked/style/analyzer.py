"""Writing style analyzer.

Computes a statistical voice fingerprint from an author's own posts and the
posts they saved. Own posts count twice as much as saved posts in every
aggregate except signature-phrase mining, which only looks at own posts so
that repeated n-grams are not double counted.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Sequence

from chainlinked.config.logging import get_logger
from chainlinked.models import EmojiUsage, FormattingStyle, StyleProfile, VocabularyLevel
from chainlinked.text_utils import round_half_up

logger = get_logger(__name__)

OWN_POST_WEIGHT = 2
SAVED_POST_WEIGHT = 1

# (post text, weight)
WeightedPosts = Sequence[tuple[str, int]]

_EMOJI = re.compile(
    "[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF\u2600-\u26FF\u2700-\u27BF\uFE00-\uFE0F"
    "\U0001F900-\U0001F9FF\U0001FA00-\U0001FA6F\U0001FA70-\U0001FAFF]"
)
_HASHTAG = re.compile(r"#\w+")
_SENTENCE_END = re.compile(r"[.!?]+")
_NEWLINES = re.compile(r"\n+")
_PARAGRAPH_BREAK = re.compile(r"\n\n+")
_BULLET_LINE = re.compile(r"^\s*[-•→]\s", re.M)
_NUMBERED_LINE = re.compile(r"^\s*\d+[.)]\s", re.M)
_BOLD = re.compile(r"\*\*[^*]+\*\*")

# Bucket order breaks ties between equal scores
_TONE_BUCKETS = (
    "professional",
    "conversational",
    "motivational",
    "analytical",
    "humorous",
    "educational",
)
_TONE_SIGNALS = [
    ("analytical", re.compile(r"\b(data|research|study|percent|statistics)\b", re.I), 3),
    ("conversational", re.compile(r"\b(you|your|we|our|let's)\b", re.I), 2),
    ("educational", re.compile(r"\b(lesson|tip|framework|step|guide)\b", re.I), 2),
    ("motivational", re.compile(r"\b(hustle|grind|dream|achieve|success|growth)\b", re.I), 2),
    ("humorous", re.compile(r"\b(lol|haha|funny|joke)\b|\U0001F602", re.I), 3),
    ("professional", re.compile(r"\b(strategy|implement|optimize|roi|kpi)\b", re.I), 2),
]

_PERSONAL_OPENING = re.compile(r"^(I |My |We )", re.I)
_NUMBER_LEADING = re.compile(r"^\d+")
_DIRECT_STATEMENT = re.compile(r"^(Here|This|The|Why|How|What)", re.I)
_CONTRARIAN = re.compile(r"^(Unpopular|Hot take|Controversial|Bold)", re.I)

_CTA_RULES = [
    ("opinion-seeking", re.compile(r"(agree|disagree|thoughts|think)")),
    ("engagement-ask", re.compile(r"(share|repost|tag|comment)")),
    ("save-prompt", re.compile(r"(save|bookmark)")),
    ("follow-cta", re.compile(r"(follow|connect|dm)")),
    ("link-cta", re.compile(r"(link|bio|check out)")),
]

_GENERIC_PHRASE_START = re.compile(r"^(the |a |an |is |in |on |at |to |for |and |or |but )")

THEME_KEYWORDS: dict[str, list[str]] = {
    "leadership": ["leader", "leadership", "team", "manage", "culture"],
    "sales": ["sales", "revenue", "pipeline", "deal", "prospect", "close"],
    "marketing": ["marketing", "brand", "content", "audience", "campaign"],
    "technology": ["tech", "software", "AI", "automation", "digital"],
    "entrepreneurship": ["startup", "founder", "entrepreneur", "build", "launch"],
    "productivity": ["productivity", "time", "focus", "habits", "routine"],
    "career": ["career", "job", "hire", "interview", "promotion"],
    "growth": ["growth", "scale", "metrics", "KPI", "OKR"],
}
_THEME_PATTERNS = {
    theme: [re.compile(rf"\b{re.escape(kw.lower())}\b") for kw in keywords]
    for theme, keywords in THEME_KEYWORDS.items()
}


def default_style_profile() -> StyleProfile:
    """Profile returned when there are no posts to analyze."""
    return StyleProfile(
        avg_sentence_length=12,
        vocabulary_level=VocabularyLevel.MODERATE,
        tone="professional",
        formatting_style=FormattingStyle(uses_line_breaks=True, avg_paragraph_length=2),
        emoji_usage=EmojiUsage.NONE,
    )


def analyze_writing_style(own_posts: Sequence[str], saved_posts: Sequence[str]) -> StyleProfile:
    """Analyze writing style from an author's own and saved posts.

    Args:
        own_posts: Post texts written by the author (weighted 2x).
        saved_posts: Post texts the author saved or wishlisted (weighted 1x).

    Returns:
        StyleProfile. Empty or blank-only input gives the default profile.
    """
    posts: list[tuple[str, int]] = [
        (t, OWN_POST_WEIGHT) for t in own_posts if t and t.strip()
    ] + [(t, SAVED_POST_WEIGHT) for t in saved_posts if t and t.strip()]
    if not posts:
        return default_style_profile()
    total_weight = sum(w for _, w in posts)

    def share(predicate) -> float:
        return sum(w for t, w in posts if predicate(t)) / total_weight

    emoji_ratio = sum(w * count_emojis(t) for t, w in posts) / total_weight
    emoji_usage = _emoji_bucket(emoji_ratio)
    hashtag_total = sum(w * len(_HASHTAG.findall(t)) for t, w in posts)
    hashtag_count = round_half_up(hashtag_total / total_weight) if hashtag_total else 0

    profile = StyleProfile(
        avg_sentence_length=_avg_sentence_length(posts),
        vocabulary_level=detect_vocabulary_level(posts),
        tone=detect_tone(t for t, _ in posts),
        formatting_style=FormattingStyle(
            uses_line_breaks=share(lambda t: "\n" in t) > 0.5,
            avg_paragraph_length=_avg_paragraph_length(posts),
            uses_bullet_points=share(lambda t: bool(_BULLET_LINE.search(t))) > 0.2,
            uses_numbered_lists=share(lambda t: bool(_NUMBERED_LINE.search(t))) > 0.2,
            uses_bold_text=share(lambda t: bool(_BOLD.search(t))) > 0.2,
            uses_emoji=emoji_usage is not EmojiUsage.NONE,
            uses_hashtags=hashtag_count > 0,
            hashtag_count=hashtag_count,
        ),
        hook_patterns=_top_patterns(posts, detect_hook_pattern, 3),
        emoji_usage=emoji_usage,
        cta_patterns=_top_patterns(posts, detect_cta_pattern, 3),
        signature_phrases=find_signature_phrases(own_posts),
        content_themes=detect_content_themes(posts),
    )
    logger.debug(
        f"Style analyzed: own={len(own_posts)}, saved={len(saved_posts)}, "
        f"tone={profile.tone}, vocabulary={profile.vocabulary_level.value}"
    )
    return profile


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, treating line breaks as sentence ends."""
    parts = _SENTENCE_END.split(_NEWLINES.sub(". ", text))
    return [s.strip() for s in parts if len(s.strip()) > 3]


def count_emojis(text: str) -> int:
    return len(_EMOJI.findall(text))


def detect_hook_pattern(text: str) -> str | None:
    """Classify the opening line of a post."""
    first_line = text.split("\n")[0].strip()
    if not first_line:
        return None
    if first_line.endswith("?"):
        return "question-based"
    if _PERSONAL_OPENING.match(first_line):
        return "personal-opening"
    if _NUMBER_LEADING.match(first_line):
        return "number-leading"
    if _DIRECT_STATEMENT.match(first_line):
        return "direct-statement"
    if _CONTRARIAN.match(first_line):
        return "contrarian-opener"
    if first_line.startswith('"'):
        return "quote-opener"
    if len(first_line) < 50:
        return "short-punchy"
    return "narrative"


def detect_cta_pattern(text: str) -> str | None:
    """Classify the closing call-to-action from the last three non-empty lines."""
    lines = [ln for ln in text.split("\n") if ln.strip()]
    ending = " ".join(lines[-3:]).lower()
    if ending.endswith("?"):
        return "question-cta"
    for name, pattern in _CTA_RULES:
        if pattern.search(ending):
            return name
    return None


def detect_vocabulary_level(posts: WeightedPosts) -> VocabularyLevel:
    """Classify vocabulary from average word length and the share of long words."""
    word_total = 0
    char_total = 0
    long_total = 0
    for text, weight in posts:
        words = [w for w in text.lower().split() if len(w) > 2]
        word_total += weight * len(words)
        char_total += weight * sum(len(w) for w in words)
        long_total += weight * sum(1 for w in words if len(w) > 8)
    if not word_total:
        return VocabularyLevel.SIMPLE
    avg_word_length = char_total / word_total
    long_ratio = long_total / word_total
    if avg_word_length > 6.5 or long_ratio > 0.2:
        return VocabularyLevel.TECHNICAL
    if avg_word_length > 5.5 or long_ratio > 0.12:
        return VocabularyLevel.ADVANCED
    if avg_word_length > 4.5:
        return VocabularyLevel.MODERATE
    return VocabularyLevel.SIMPLE


def detect_tone(texts: Iterable[str]) -> str:
    """Score keyword buckets and join the top one or two non-zero buckets."""
    combined = " ".join(texts).lower()
    scores = dict.fromkeys(_TONE_BUCKETS, 0)
    for bucket, pattern, weight in _TONE_SIGNALS:
        if pattern.search(combined):
            scores[bucket] += weight
    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    top = [name for name, score in ranked if score > 0][:2]
    if not top:
        return "professional"
    return ", ".join(top)


def find_signature_phrases(texts: Sequence[str], min_occurrences: int = 2) -> list[str]:
    """Find recurring 2-4 word phrases, most frequent first (max 10)."""
    counts: Counter[str] = Counter()
    for text in texts:
        words = (text or "").lower().split()
        for size in range(2, 5):
            for i in range(len(words) - size + 1):
                phrase = " ".join(words[i : i + size])
                if _GENERIC_PHRASE_START.match(phrase) or len(phrase) < 6:
                    continue
                counts[phrase] += 1
    return [p for p, c in counts.most_common() if c >= min_occurrences][:10]


def detect_content_themes(posts: WeightedPosts) -> list[str]:
    """Rank the fixed theme vocabularies by keyword hits (top 5, non-zero)."""
    counts: Counter[str] = Counter()
    for theme, patterns in _THEME_PATTERNS.items():
        hits = sum(
            weight * len(p.findall(text.lower())) for text, weight in posts for p in patterns
        )
        if hits:
            counts[theme] = hits
    return [theme for theme, _ in counts.most_common(5)]


def _avg_sentence_length(posts: WeightedPosts) -> int:
    sentence_total = 0
    word_total = 0
    for text, weight in posts:
        sentences = split_sentences(text)
        sentence_total += weight * len(sentences)
        word_total += weight * sum(len(s.split()) for s in sentences)
    if not sentence_total:
        return 12
    return round_half_up(word_total / sentence_total)


def _avg_paragraph_length(posts: WeightedPosts) -> int:
    paragraph_total = 0
    line_total = 0
    for text, weight in posts:
        paragraphs = [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]
        paragraph_total += weight * len(paragraphs)
        line_total += weight * sum(len(p.split("\n")) for p in paragraphs)
    if not paragraph_total:
        return 2
    return round_half_up(line_total / paragraph_total)


def _emoji_bucket(per_post: float) -> EmojiUsage:
    if per_post == 0:
        return EmojiUsage.NONE
    if per_post < 1:
        return EmojiUsage.MINIMAL
    if per_post < 3:
        return EmojiUsage.MODERATE
    return EmojiUsage.HEAVY


def _top_patterns(posts: WeightedPosts, classify, limit: int) -> list[str]:
    # Counter keeps first-seen order for equal counts
    counts: Counter[str] = Counter()
    for text, weight in posts:
        pattern = classify(text)
        if pattern is not None:
            counts[pattern] += weight
    return [p for p, _ in counts.most_common(limit)]
