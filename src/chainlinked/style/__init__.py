"""Writing style analysis: profile computation, prompt fragment, refresh policy."""

from chainlinked.style.analyzer import analyze_writing_style, default_style_profile
from chainlinked.style.prompt_fragment import build_style_prompt_fragment
from chainlinked.style.refresh import should_refresh_style, snapshot_refresh_state

__all__ = [
    "analyze_writing_style",
    "default_style_profile",
    "build_style_prompt_fragment",
    "should_refresh_style",
    "snapshot_refresh_state",
]
