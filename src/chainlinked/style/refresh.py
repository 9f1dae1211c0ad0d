"""Decide when a stored style profile is stale."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from chainlinked.config.settings import get_settings
from chainlinked.models import StyleRefreshState

_SECONDS_PER_DAY = 60 * 60 * 24


def should_refresh_style(
    state: StyleRefreshState,
    current_post_count: int,
    now: datetime | None = None,
) -> bool:
    """Whether a profile should be recomputed.

    True when the post count grew by more than the configured fraction
    (default 20%) since the profile was computed, or when the profile is
    older than the configured age (default 7 days). A profile computed from
    zero posts always counts as fully grown.

    Args:
        state: Count and timestamp stored with the profile.
        current_post_count: The author's current number of posts.
        now: Reference time, defaults to the current UTC time.
    """
    settings = get_settings()
    analyzed = state.posts_analyzed_count
    growth = (current_post_count - analyzed) / analyzed if analyzed > 0 else 1.0
    if growth > settings.style_refresh_post_growth:
        return True
    now = now or datetime.now(timezone.utc)
    age_days = (_as_utc(now) - _as_utc(state.last_refreshed_at)).total_seconds() / _SECONDS_PER_DAY
    return age_days > settings.style_refresh_max_age_days


def snapshot_refresh_state(
    own_posts: Sequence[str], now: datetime | None = None
) -> StyleRefreshState:
    """Bookkeeping a caller stores alongside a freshly computed profile."""
    analyzed = sum(1 for p in own_posts if p and p.strip())
    return StyleRefreshState(
        posts_analyzed_count=analyzed,
        last_refreshed_at=now or datetime.now(timezone.utc),
    )


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from storage are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
