"""
Share Quota - Per-owner limits derived from the store listing.

There is no counter to keep in sync: every create recomputes the owner's
counts from a fresh listing. Two concurrent creates can both pass, so the
limits are a soft cap.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from chatshare.config.errors import ForbiddenError, TooManyRequestsError

from .models import ObjectInfo, QuotaState

__all__ = ["compute_quota", "enforce_quota"]


def compute_quota(
    listing: Iterable[ObjectInfo],
    now: datetime,
    window: timedelta = timedelta(hours=24),
) -> QuotaState:
    """
    Count an owner's objects in total and within the trailing window.

    Args:
        listing: Objects under the owner's prefix
        now: Reference time (timezone-aware)
        window: Length of the rate window

    Returns:
        QuotaState with total and recent counts
    """
    total = 0
    recent = 0
    for info in listing:
        total += 1
        if now - info.uploaded < window:
            recent += 1
    return QuotaState(total=total, recent=recent)


def enforce_quota(state: QuotaState, total_limit: int, window_limit: int) -> None:
    """
    Reject a create that would exceed either limit.

    Counts are taken before the write, so an owner already holding
    ``total_limit`` objects (or ``window_limit`` recent ones) is refused.

    Raises:
        ForbiddenError: Total share limit reached
        TooManyRequestsError: Too many shares within the window
    """
    if state.total >= total_limit:
        raise ForbiddenError(
            "Exceeded total share limit",
            {"total": state.total, "limit": total_limit},
        )
    if state.recent >= window_limit:
        raise TooManyRequestsError(
            "Too many shares in a 24-hour period",
            {"recent": state.recent, "limit": window_limit},
        )
