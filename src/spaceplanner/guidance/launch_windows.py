"""
===============================================================================
SPACE MISSION PLANNER - Launch Window Projection
===============================================================================
Upcoming launch windows from a body's synodic cycle.

Windows repeat every synodic period starting at the body's reference epoch:

    cycle     = synodic_days * 86400                        [s]
    elapsed   = start - epoch                               [s]
    k0        = 0 if elapsed <= 0 else floor(elapsed / cycle)
    launch_i  = epoch + (k0 + i) * cycle,   i = 0 .. count-1
    arrival_i = launch_i + transit_days * 86400

A start date before the epoch clamps to the epoch cycle. The window whose
cycle contains the start date is the first one listed, even if its launch
date is already behind the start date.

Transit time is the body's typical cruise, or the gravity-assist cruise when
the mission flies a multi-flyby route to a gravity-assist candidate.
===============================================================================
"""

import datetime
import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

from spaceplanner.core.catalog import Body
from spaceplanner.core.constants import DEFAULT_WINDOW_COUNT, SECONDS_PER_DAY
from spaceplanner.core.dates import format_date, parse_date
from spaceplanner.guidance.strategy import Strategy

logger = logging.getLogger(__name__)


# =============================================================================
# Data structures
# =============================================================================

@dataclass(frozen=True)
class LaunchWindow:
    """One launch opportunity and its estimated arrival."""
    number: int
    launch: datetime.datetime
    arrival: datetime.datetime

    @property
    def transit_days(self) -> float:
        return (self.arrival - self.launch).total_seconds() / SECONDS_PER_DAY

    def as_dict(self) -> dict:
        return {
            "number": self.number,
            "launch": format_date(self.launch),
            "arrival": format_date(self.arrival),
        }


class LaunchWindowSequence:
    """
    Lazy, finite, restartable sequence of launch windows.

    Nothing is computed until iteration; every ``iter()`` starts again from
    the first window.
    """

    def __init__(
        self,
        epoch: datetime.datetime,
        cycle_seconds: float,
        first_cycle: int,
        transit_days: float,
        count: int,
    ):
        self.epoch = epoch
        self.cycle_seconds = cycle_seconds
        self.first_cycle = first_cycle
        self.transit_days = transit_days
        self.count = count

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[LaunchWindow]:
        transit = datetime.timedelta(seconds=self.transit_days * SECONDS_PER_DAY)
        for i in range(self.count):
            offset = (self.first_cycle + i) * self.cycle_seconds
            launch = self.epoch + datetime.timedelta(seconds=offset)
            yield LaunchWindow(number=i + 1, launch=launch, arrival=launch + transit)

    def __repr__(self) -> str:
        return (f"LaunchWindowSequence(epoch={format_date(self.epoch)}, "
                f"first_cycle={self.first_cycle}, count={self.count})")


# =============================================================================
# Projector
# =============================================================================

class WindowProjector:
    """
    Projects launch windows for a body from a requested start date.

    Typical usage:
        windows = WindowProjector().project(mars, "2026-06-01")
        for w in windows:
            print(w.number, format_date(w.launch), format_date(w.arrival))
    """

    def transit_days(self, body: Body, strategy: Optional[Strategy] = None) -> float:
        """Cruise duration (days) for the active strategy."""
        if strategy is Strategy.GRAVITY_ASSIST and body.gravity_assist_candidate:
            return body.gravity_assist_transit_days
        return body.typical_transit_days

    def project(
        self,
        body: Body,
        start_date,
        count: int = DEFAULT_WINDOW_COUNT,
        strategy: Optional[Strategy] = None,
    ) -> LaunchWindowSequence:
        """
        Next `count` launch windows at or after the cycle containing start_date.

        Args:
            body: Destination
            start_date: YYYY-MM-DD string (or date/datetime)
            count: Number of windows
            strategy: Active mission strategy, selects the transit time

        Returns:
            LaunchWindowSequence of `count` windows

        Raises:
            DateParseError: If start_date or the body's epoch is malformed
        """
        if count < 0:
            raise ValueError(f"Window count must be non-negative, got {count}")

        start = parse_date(start_date)
        epoch = parse_date(body.epoch_date)

        cycle_seconds = body.synodic_days * SECONDS_PER_DAY
        elapsed = (start - epoch).total_seconds()
        first_cycle = 0 if elapsed <= 0 else int(math.floor(elapsed / cycle_seconds))

        transit = self.transit_days(body, strategy)
        logger.debug(
            "%s: start=%s epoch=%s elapsed=%.0f s -> cycle %d, transit %.0f days",
            body.name, format_date(start), format_date(epoch), elapsed, first_cycle, transit,
        )
        return LaunchWindowSequence(epoch, cycle_seconds, first_cycle, transit, count)
