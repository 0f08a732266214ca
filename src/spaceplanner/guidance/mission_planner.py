"""
===============================================================================
SPACE MISSION PLANNER - Feasibility Planner
===============================================================================
Decides how (and whether) a rocket can reach a destination with a payload.

Delta-V budget:
    required = Earth ascent (9.30) + body transfer + body capture   [km/s]
    margin   = capability(rocket, payload) - required

Strategy selection when the direct margin is negative, first match wins:
    1. Gravity-assist candidate body  -> GRAVITY_ASSIST, +4.5 km/s (VEEGA)
    2. Refuelable rocket              -> ORBITAL_REFUEL, tankers close the gap
    3. Shortfall smaller than 1.5     -> KICK_STAGE, +2.0 km/s solid motor
    4. Otherwise                      -> INFEASIBLE

When the direct margin is already non-negative the mission is DIRECT, except
for a perigee-kick capable rocket carrying at most 1500 kg to a perigee-kick
target: that mission is labelled OBERTH_PERIGEE_KICK and credited +6.5 km/s.
The bonus is narrative there (the mission already closes without it) and is
kept on purpose.

Final verdict:
    final_capability = capability + bonus      (refuel: + tankers * dv_tanker)
    final_margin     = final_capability - required
    success          = final_margin >= 0 and strategy != INFEASIBLE
===============================================================================
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple, Union

from spaceplanner.core.catalog import Body, Catalog, Rocket
from spaceplanner.core.constants import (
    DEFAULT_WINDOW_COUNT,
    EARTH_ASCENT_COST,
    GRAVITY_ASSIST_BONUS,
    KICK_STAGE_BONUS,
    KICK_STAGE_MAX_SHORTFALL,
    PERIGEE_KICK_BONUS,
    PERIGEE_KICK_MAX_PAYLOAD,
    TANK_USAGE_FEASIBLE,
    TANK_USAGE_INFEASIBLE,
)
from spaceplanner.dynamics.launch_vehicle import CapabilityCalculator
from spaceplanner.guidance.launch_windows import LaunchWindow, WindowProjector
from spaceplanner.guidance.maneuver_planner import TankerPlanner
from spaceplanner.guidance.strategy import Strategy

logger = logging.getLogger(__name__)


# =============================================================================
# STRATEGY NOTES
# =============================================================================

NOTE_DIRECT = "None"
NOTE_PERIGEE_KICK = "Oberth/Kick-perigee method for low-mass Mars mission"
NOTE_GRAVITY_ASSIST = "Alternate route: VEEGA gravity assist (~7 year flight)"
NOTE_REFUEL_ASSUMPTION = "Assumption: LEO refueling by tanker missions"
NOTE_REFUEL_TANKERS = "LEO refueling: estimated {n} tanker(s) required"
NOTE_KICK_STAGE = "Assumption: Added 'Star 48' solid kick stage"
NOTE_INFEASIBLE = "No feasible profile found with current assumptions"


# =============================================================================
# RESULT
# =============================================================================

@dataclass(frozen=True)
class MissionResult:
    """
    Outcome of one mission evaluation. All delta-V figures in km/s.

    Launch windows and alternative rockets are only filled in by the
    MissionPlanner facade; FeasibilityPlanner leaves them empty.
    """
    rocket: Rocket
    body: Body
    payload_kg: float
    strategy: Strategy
    note: str
    capability: float
    required: float
    bonus: float
    final_capability: float
    final_margin: float
    tankers_needed: int
    success: bool
    start_date: Optional[str] = None
    windows: Tuple[LaunchWindow, ...] = ()
    alternatives: Tuple[Tuple[Rocket, float], ...] = ()

    @property
    def base_margin(self) -> float:
        return self.capability - self.required

    @property
    def delta_v_breakdown(self) -> Tuple[float, float, float]:
        """(Earth ascent, transfer, capture) in km/s."""
        return EARTH_ASCENT_COST, self.body.dv_transfer, self.body.dv_capture

    @property
    def tank_usage_pct(self) -> float:
        """Illustrative propellant usage shown in summaries."""
        return TANK_USAGE_FEASIBLE if self.success else TANK_USAGE_INFEASIBLE

    @property
    def status(self) -> str:
        if not self.success:
            return "NOT FEASIBLE WITH CURRENT ASSUMPTIONS"
        if self.strategy.is_alternate:
            return "ALTERNATE PROFILE FEASIBLE"
        return "DIRECT MISSION FEASIBLE"


# =============================================================================
# FEASIBILITY PLANNER
# =============================================================================

def required_delta_v(body: Body) -> float:
    """Total delta-V budget (km/s) from the pad to capture at the body."""
    return EARTH_ASCENT_COST + body.dv_transfer + body.dv_capture


class FeasibilityPlanner:
    """
    Chooses a strategy and produces a feasibility verdict.

    The planner holds no per-mission state: evaluating the same inputs twice
    gives equal results.

    Args:
        catalog: Catalog scanned for alternative rockets
        calculator: Capability model (default CapabilityCalculator)
        tanker_planner: Refuelling model (default TankerPlanner)
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        calculator: Optional[CapabilityCalculator] = None,
        tanker_planner: Optional[TankerPlanner] = None,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.calculator = calculator or CapabilityCalculator()
        self.tanker_planner = tanker_planner or TankerPlanner()

    def select_strategy(
        self,
        rocket: Rocket,
        body: Body,
        payload_kg: float,
        base_margin: float,
    ) -> Tuple[Strategy, float, str]:
        """
        Pick the mission profile for a given direct margin.

        Returns:
            (strategy, fixed bonus delta-V in km/s, note). Orbital refuel
            returns a zero bonus; its gain depends on the tanker count.
        """
        if base_margin < 0:
            if body.gravity_assist_candidate:
                return Strategy.GRAVITY_ASSIST, GRAVITY_ASSIST_BONUS, NOTE_GRAVITY_ASSIST
            if rocket.supports_orbital_refuel:
                return Strategy.ORBITAL_REFUEL, 0.0, NOTE_REFUEL_ASSUMPTION
            if base_margin > -KICK_STAGE_MAX_SHORTFALL:
                return Strategy.KICK_STAGE, KICK_STAGE_BONUS, NOTE_KICK_STAGE
            return Strategy.INFEASIBLE, 0.0, NOTE_INFEASIBLE

        if (rocket.supports_perigee_kick and body.perigee_kick_target
                and payload_kg <= PERIGEE_KICK_MAX_PAYLOAD):
            return Strategy.OBERTH_PERIGEE_KICK, PERIGEE_KICK_BONUS, NOTE_PERIGEE_KICK
        return Strategy.DIRECT, 0.0, NOTE_DIRECT

    def evaluate(self, rocket: Rocket, body: Body, payload_kg: float) -> MissionResult:
        """
        Evaluate a mission and return its feasibility verdict.

        Args:
            rocket: Launch vehicle
            body: Destination
            payload_kg: Payload mass (kg)

        Returns:
            MissionResult without launch windows or alternatives
        """
        required = required_delta_v(body)
        capability = self.calculator.capability(rocket, payload_kg)
        base_margin = capability - required

        strategy, bonus, note = self.select_strategy(rocket, body, payload_kg, base_margin)

        tankers = 0
        if strategy is Strategy.ORBITAL_REFUEL:
            tankers = self.tanker_planner.plan(rocket, required - capability)
            final_capability = self.tanker_planner.refuelled_capability(rocket, capability, tankers)
            bonus = final_capability - capability
            if tankers > 0:
                note = NOTE_REFUEL_TANKERS.format(n=tankers)
        else:
            final_capability = capability + bonus

        final_margin = final_capability - required
        success = final_margin >= 0 and strategy is not Strategy.INFEASIBLE

        logger.info(
            "%s -> %s, payload %.0f kg: required %.2f, capability %.2f, "
            "strategy %s, final margin %+.2f km/s (%s)",
            rocket.name, body.name, payload_kg, required, capability,
            strategy.label, final_margin, "feasible" if success else "not feasible",
        )

        return MissionResult(
            rocket=rocket,
            body=body,
            payload_kg=payload_kg,
            strategy=strategy,
            note=note,
            capability=capability,
            required=required,
            bonus=bonus,
            final_capability=final_capability,
            final_margin=final_margin,
            tankers_needed=tankers,
            success=success,
        )

    def suggest_alternatives(
        self,
        rocket: Rocket,
        payload_kg: float,
        required: float,
    ) -> Tuple[Tuple[Rocket, float], ...]:
        """
        Other catalog rockets whose direct capability covers `required`.

        Returns:
            Tuple of (rocket, capability km/s) in catalog order
        """
        suggestions = []
        for alt in self.catalog.rockets:
            if alt.name == rocket.name:
                continue
            alt_capability = self.calculator.capability(alt, payload_kg)
            if alt_capability - required >= 0:
                suggestions.append((alt, alt_capability))
        return tuple(suggestions)


# =============================================================================
# FACADE
# =============================================================================

RocketRef = Union[Rocket, int, str]
BodyRef = Union[Body, int, str]


class MissionPlanner:
    """
    Entry point combining the catalog, feasibility planner and launch windows.

    Rockets and bodies may be referenced by catalog entry, 1-based menu index
    or exact name.

    Typical usage:
        planner = MissionPlanner()
        result = planner.evaluate(1, "Mars", payload_kg=100000.0,
                                  start_date="2026-01-01")
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        window_count: int = DEFAULT_WINDOW_COUNT,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.window_count = window_count
        self.feasibility = FeasibilityPlanner(self.catalog)
        self.projector = WindowProjector()

    def list_rockets(self) -> Sequence[Rocket]:
        return self.catalog.rockets

    def list_bodies(self) -> Sequence[Body]:
        return self.catalog.bodies

    def resolve_rocket(self, ref: RocketRef) -> Rocket:
        if isinstance(ref, Rocket):
            return ref
        if isinstance(ref, int):
            return self.catalog.rocket(ref)
        return self.catalog.find_rocket(ref)

    def resolve_body(self, ref: BodyRef) -> Body:
        if isinstance(ref, Body):
            return ref
        if isinstance(ref, int):
            return self.catalog.body(ref)
        return self.catalog.find_body(ref)

    def evaluate(
        self,
        rocket_ref: RocketRef,
        body_ref: BodyRef,
        payload_kg: float,
        start_date: str,
    ) -> MissionResult:
        """
        Full mission evaluation: verdict, launch windows and, for missions
        that do not close, alternative rockets.

        Raises:
            InvalidSelection: If an index is outside the catalog
            KeyError: If a name is not in the catalog
            DateParseError: If start_date or the body epoch is malformed
        """
        rocket = self.resolve_rocket(rocket_ref)
        body = self.resolve_body(body_ref)

        result = self.feasibility.evaluate(rocket, body, payload_kg)
        windows = self.projector.project(
            body, start_date, count=self.window_count, strategy=result.strategy,
        )

        alternatives = ()
        if not result.success:
            alternatives = self.feasibility.suggest_alternatives(
                rocket, payload_kg, result.required,
            )
            logger.debug("%d alternative rocket(s) found", len(alternatives))

        return replace(
            result,
            start_date=start_date,
            windows=tuple(windows),
            alternatives=alternatives,
        )
