"""
===============================================================================
SPACE MISSION PLANNER - Rocket and Destination Catalog
===============================================================================
Static reference data for the launch vehicles and target bodies the planner
can evaluate.

Strategy triggers are explicit capability flags set when the catalog is
built (orbital refuelling, perigee kicks, gravity-assist candidates), so the
planner never inspects display names.

The catalog is an immutable value built once at process start and passed by
reference into the planner. Test code builds its own catalogs from the same
dataclasses or from a config dictionary shaped like the YAML ``catalog:``
section:

    catalog:
      rockets:
        - name: "SpaceX's Starship"
          wet_mass_kg: 5000000.0
          dry_mass_kg: 200000.0
          isp_s: 350.0
          payload_leo_kg: 150000.0
          staging_factor: 1.4
          refuel_dv_per_tanker_km_s: 5.5
          supports_orbital_refuel: true
      bodies:
        - name: "Mars"
          dv_transfer_km_s: 3.80
          dv_capture_km_s: 2.10
          synodic_days: 780.0
          epoch_date: "2025-01-16"
          typical_transit_days: 210.0
          perigee_kick_target: true
===============================================================================
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pandas as pd

from spaceplanner.core.constants import GRAVITY_ASSIST_TRANSIT_DAYS
from spaceplanner.core.dates import parse_date
from spaceplanner.core.exceptions import InvalidSelection

logger = logging.getLogger(__name__)


# =============================================================================
# CATALOG ENTRIES
# =============================================================================

@dataclass(frozen=True)
class Rocket:
    """
    Launch vehicle reduced to the quantities the rocket equation needs.

    Attributes:
        name: Display name
        wet_mass_kg: Fully fuelled vehicle mass (kg)
        dry_mass_kg: Vehicle mass without propellant (kg)
        isp_s: Average specific impulse over the ascent (s)
        payload_leo_kg: Maximum practical payload to LEO (kg)
        staging_factor: Empirical multi-stage performance multiplier (>= 1)
        refuel_dv_per_tanker: Delta-V gained per tanker mission (km/s), 0 if
            the vehicle cannot be refuelled in orbit
        supports_orbital_refuel: Planner may schedule tanker missions
        supports_perigee_kick: Planner may use Oberth perigee kicks
    """
    name: str
    wet_mass_kg: float
    dry_mass_kg: float
    isp_s: float
    payload_leo_kg: float
    staging_factor: float = 1.0
    refuel_dv_per_tanker: float = 0.0
    supports_orbital_refuel: bool = False
    supports_perigee_kick: bool = False

    @property
    def is_degenerate(self) -> bool:
        """True when the mass figures cannot describe a flyable vehicle."""
        return self.dry_mass_kg >= self.wet_mass_kg or self.payload_leo_kg < 0


@dataclass(frozen=True)
class Body:
    """
    Destination with fixed delta-V costs and a synodic launch cycle.

    Attributes:
        name: Display name
        dv_transfer: Transfer delta-V from Earth departure (km/s)
        dv_capture: Capture / braking delta-V at arrival (km/s)
        synodic_days: Days between successive launch windows (> 0)
        epoch_date: Reference launch window, YYYY-MM-DD
        typical_transit_days: Typical one-way cruise duration (days)
        gravity_assist_candidate: Planner may route via planetary flybys
        perigee_kick_target: Perigee-kick missions may target this body
        gravity_assist_transit_days: Cruise duration of the flyby route (days)
    """
    name: str
    dv_transfer: float
    dv_capture: float
    synodic_days: float
    epoch_date: str
    typical_transit_days: float
    gravity_assist_candidate: bool = False
    perigee_kick_target: bool = False
    gravity_assist_transit_days: float = GRAVITY_ASSIST_TRANSIT_DAYS


# =============================================================================
# DEFAULT CATALOG DATA
# =============================================================================

DEFAULT_ROCKETS: Tuple[Rocket, ...] = (
    Rocket("SpaceX's Starship", 5000000.0, 200000.0, 350.0, 150000.0, 1.4, 5.5,
           supports_orbital_refuel=True),
    Rocket("NASA's SLS", 2600000.0, 110000.0, 400.0, 95000.0, 1.5, 0.0),
    Rocket("Blue Origin's New Glenn", 1700000.0, 100000.0, 340.0, 45000.0, 1.4, 0.0),
    Rocket("ISRO's Mangalyaan 1 (PSLV)", 320000.0, 42000.0, 275.0, 1750.0, 1.2, 0.0,
           supports_perigee_kick=True),
)

DEFAULT_BODIES: Tuple[Body, ...] = (
    Body("Moon", 3.12, 2.80, 29.5, "2025-01-13", 3.0),
    Body("Mars", 3.80, 2.10, 780.0, "2025-01-16", 210.0,
         perigee_kick_target=True),
    Body("Titan (Saturn)", 7.30, 3.00, 378.1, "2025-09-21", 1000.0,
         gravity_assist_candidate=True),
)


# =============================================================================
# CATALOG
# =============================================================================

class Catalog:
    """
    Read-only collection of rockets and bodies.

    Menu selections are 1-based, matching what the user sees on screen.

    Args:
        rockets: Rocket entries (defaults to DEFAULT_ROCKETS)
        bodies: Body entries (defaults to DEFAULT_BODIES)

    Raises:
        ValueError: If a body has a non-positive synodic period
        DateParseError: If a body epoch is not a YYYY-MM-DD date
    """

    def __init__(
        self,
        rockets: Optional[Sequence[Rocket]] = None,
        bodies: Optional[Sequence[Body]] = None,
    ):
        self._rockets = tuple(DEFAULT_ROCKETS if rockets is None else rockets)
        self._bodies = tuple(DEFAULT_BODIES if bodies is None else bodies)

        for rocket in self._rockets:
            if rocket.is_degenerate:
                logger.warning(
                    "Rocket '%s' has degenerate masses (wet=%.0f kg, dry=%.0f kg); "
                    "its capability evaluates to zero",
                    rocket.name, rocket.wet_mass_kg, rocket.dry_mass_kg,
                )
        for body in self._bodies:
            if body.synodic_days <= 0:
                raise ValueError(
                    f"Body '{body.name}' needs a positive synodic period, "
                    f"got {body.synodic_days}"
                )
            parse_date(body.epoch_date)

    @property
    def rockets(self) -> Tuple[Rocket, ...]:
        return self._rockets

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return self._bodies

    def rocket(self, index: int) -> Rocket:
        """Return the rocket for a 1-based menu index."""
        if not 1 <= index <= len(self._rockets):
            raise InvalidSelection("rocket", index, len(self._rockets))
        return self._rockets[index - 1]

    def body(self, index: int) -> Body:
        """Return the body for a 1-based menu index."""
        if not 1 <= index <= len(self._bodies):
            raise InvalidSelection("body", index, len(self._bodies))
        return self._bodies[index - 1]

    def find_rocket(self, name: str) -> Rocket:
        for rocket in self._rockets:
            if rocket.name == name:
                return rocket
        raise KeyError(f"Unknown rocket: {name}")

    def find_body(self, name: str) -> Body:
        for body in self._bodies:
            if body.name == name:
                return body
        raise KeyError(f"Unknown body: {name}")

    def to_frame(self) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """
        Tabular view of the catalog.

        Returns:
            (rockets_df, bodies_df) indexed from 1 like the menus
        """
        rockets_df = pd.DataFrame(
            [{
                'Rocket': r.name,
                'Wet mass (kg)': r.wet_mass_kg,
                'Dry mass (kg)': r.dry_mass_kg,
                'Payload LEO (kg)': r.payload_leo_kg,
                'Isp (s)': r.isp_s,
                'Staging': r.staging_factor,
                'Tanker DV (km/s)': r.refuel_dv_per_tanker,
            } for r in self._rockets]
        )
        bodies_df = pd.DataFrame(
            [{
                'Destination': b.name,
                'DV transfer (km/s)': b.dv_transfer,
                'DV capture (km/s)': b.dv_capture,
                'Synodic (days)': b.synodic_days,
                'Epoch': b.epoch_date,
                'Transit (days)': b.typical_transit_days,
            } for b in self._bodies]
        )
        rockets_df.index = rockets_df.index + 1
        bodies_df.index = bodies_df.index + 1
        return rockets_df, bodies_df

    # -------------------------------------------------------------------------
    # Construction from configuration
    # -------------------------------------------------------------------------

    @classmethod
    def from_config(cls, config: Optional[dict]) -> "Catalog":
        """
        Build a catalog from the ``catalog`` section of the planner config.

        Missing ``rockets`` or ``bodies`` lists fall back to the defaults, so a
        config may override only one half of the catalog.
        """
        config = config or {}
        rockets_cfg = config.get('rockets')
        bodies_cfg = config.get('bodies')

        rockets = None
        if rockets_cfg:
            rockets = [
                Rocket(
                    name=r_cfg['name'],
                    wet_mass_kg=float(r_cfg['wet_mass_kg']),
                    dry_mass_kg=float(r_cfg['dry_mass_kg']),
                    isp_s=float(r_cfg['isp_s']),
                    payload_leo_kg=float(r_cfg.get('payload_leo_kg', 0.0)),
                    staging_factor=float(r_cfg.get('staging_factor', 1.0)),
                    refuel_dv_per_tanker=float(r_cfg.get('refuel_dv_per_tanker_km_s', 0.0)),
                    supports_orbital_refuel=bool(r_cfg.get('supports_orbital_refuel', False)),
                    supports_perigee_kick=bool(r_cfg.get('supports_perigee_kick', False)),
                )
                for r_cfg in rockets_cfg
            ]

        bodies = None
        if bodies_cfg:
            bodies = [
                Body(
                    name=b_cfg['name'],
                    dv_transfer=float(b_cfg['dv_transfer_km_s']),
                    dv_capture=float(b_cfg['dv_capture_km_s']),
                    synodic_days=float(b_cfg['synodic_days']),
                    epoch_date=str(b_cfg['epoch_date']),
                    typical_transit_days=float(b_cfg.get('typical_transit_days', 0.0)),
                    gravity_assist_candidate=bool(b_cfg.get('gravity_assist_candidate', False)),
                    perigee_kick_target=bool(b_cfg.get('perigee_kick_target', False)),
                    gravity_assist_transit_days=float(
                        b_cfg.get('gravity_assist_transit_days', GRAVITY_ASSIST_TRANSIT_DAYS)),
                )
                for b_cfg in bodies_cfg
            ]

        catalog = cls(rockets, bodies)
        logger.info(
            "Catalog ready: %d rockets, %d bodies",
            len(catalog.rockets), len(catalog.bodies),
        )
        return catalog
