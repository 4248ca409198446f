"""
Build Metrics
=============
Pure timing derivations over a build's three lifecycle timestamps.

Queue and build durations are expressed in 15-second ticks using
`(whole_seconds + 15) / 15`, where both the seconds conversion and the
division truncate toward zero. This is not round-half-up:
0-14s is one tick, 15-29s is two, and small negative spans still count as
zero rather than minus one.

Ordering of the timestamps is not validated; malformed upstream data yields
zero or negative values without any error.
"""
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from app.core.constants import TICK_SECONDS

if TYPE_CHECKING:
    from app.models.build import Build


def _whole_seconds(delta: timedelta) -> int:
    return int(delta.total_seconds())


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def ticks_between(start: datetime, end: datetime) -> int:
    """Number of biased 15-second ticks from start to end."""
    return _truncating_div(_whole_seconds(end - start) + TICK_SECONDS, TICK_SECONDS)


def queue_duration(build: "Build") -> int:
    """Ticks spent waiting between creation and start."""
    return ticks_between(build.created_at, build.started_at)


def build_duration(build: "Build") -> int:
    """Ticks spent building between start and finish."""
    return ticks_between(build.started_at, build.finished_at)


def total_duration(build: "Build") -> timedelta:
    """Raw elapsed time between creation and finish."""
    return build.finished_at - build.created_at
