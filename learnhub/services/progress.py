"""
Cosmetic search progress.

The value is driven by a fixed-interval timer only; it knows nothing about
the real network calls. It climbs to a ceiling and waits there until the
caller reports completion.
"""
from __future__ import annotations

TICK_MS = 300
STEP = 10
CEILING = 90
COMPLETE = 100
RESET_DELAY_MS = 500


def advance(progress: int) -> int:
    """One timer tick."""
    if progress >= CEILING:
        return CEILING
    return min(CEILING, progress + STEP)


def progress_at(elapsed_ms: float) -> int:
    if elapsed_ms <= 0:
        return 0
    return min(CEILING, STEP * int(elapsed_ms // TICK_MS))


def displayed_progress(*, searching: bool, elapsed_ms: float, finished_ms_ago: float | None = None) -> int:
    """
    Value to show for a search that is running (`searching=True`) or that
    finished `finished_ms_ago` ms ago. Completion pins the bar at 100 until
    the reset delay passes, then it drops back to 0.
    """
    if searching:
        return progress_at(elapsed_ms)
    if finished_ms_ago is not None and finished_ms_ago < RESET_DELAY_MS:
        return COMPLETE
    return 0
