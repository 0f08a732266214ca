"""
===============================================================================
SPACE MISSION PLANNER - Tanker Planner
===============================================================================
Number of orbital refuelling (tanker) missions needed to close a delta-V
shortage.

Each tanker flight tops the vehicle off in LEO and is credited with a fixed
delta-V gain taken from the rocket's catalog entry:

    tankers = ceil(shortage / dv_per_tanker)

Vehicles with no per-tanker gain cannot be refuelled and always get zero
tankers, as does any non-positive shortage.
===============================================================================
"""

import logging
import math

from spaceplanner.core.catalog import Rocket

logger = logging.getLogger(__name__)


class TankerPlanner:
    """
    Stateless tanker-count calculator.

    Typical usage:
        tankers = TankerPlanner().plan(rocket, shortage_km_s=7.0)
    """

    def plan(self, rocket: Rocket, shortage_km_s: float) -> int:
        """
        Tankers needed to cover a delta-V shortage.

        Args:
            rocket: Vehicle being refuelled
            shortage_km_s: Required minus available delta-V (km/s)

        Returns:
            Number of tanker missions (>= 0)
        """
        per_tanker = rocket.refuel_dv_per_tanker
        if per_tanker <= 0.0 or shortage_km_s <= 0.0:
            return 0

        needed = max(0, math.ceil(shortage_km_s / per_tanker))
        logger.debug(
            "%s: shortage %.3f km/s at %.2f km/s per tanker -> %d tanker(s)",
            rocket.name, shortage_km_s, per_tanker, needed,
        )
        return needed

    def refuelled_capability(self, rocket: Rocket, capability: float, tankers: int) -> float:
        """Capability after `tankers` refuelling missions (km/s)."""
        return capability + tankers * rocket.refuel_dv_per_tanker
