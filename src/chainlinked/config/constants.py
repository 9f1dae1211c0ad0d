"""Centralized constants for the carousel engine."""


# Canvas fallbacks used when a template element omits a value
class Defaults:
    FONT_SIZE = 32
    ELEMENT_WIDTH = 400
    ELEMENT_HEIGHT = 100
    BACKGROUND_COLOR = "#ffffff"
    AUDIENCE = "LinkedIn professionals"
    INDUSTRY = "general business and professional development"


# Prompt and content limits
class Limits:
    PLACEHOLDER_PREVIEW_CHARS = 50
    MIN_REQUIRED_CONTENT_CHARS = 5
    CONTEXT_SAMPLE_MIN_CHARS = 20
    CONTEXT_SAMPLE_CHARS = 200
    CONTEXT_SAMPLE_CHARS_MATCH_STYLE = 400
    MAX_RECENT_POSTS = 5
    MAX_RECENT_POSTS_MATCH_STYLE = 15
    MAX_SAVED_IDEAS = 5
    MAX_SAVED_IDEAS_MATCH_STYLE = 10
