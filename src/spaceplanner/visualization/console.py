"""
===============================================================================
SPACE MISSION PLANNER - Terminal Rendering
===============================================================================
Human-readable rendering of the catalog and of mission results:

  - Help text and catalog listing
  - Mission header, status, illustrative tank usage
  - Delta-V budget breakdown with margin
  - Refuelling plan and alternative rockets
  - Mission chronology (strategy-specific)
  - Launch window table

ANSI colors may not work on every terminal; ConsoleRenderer(color=False)
renders plain text.
===============================================================================
"""

import sys
from typing import Optional, TextIO

import pandas as pd

from spaceplanner.core.catalog import Catalog
from spaceplanner.core.dates import format_date
from spaceplanner.dynamics.launch_vehicle import capability_curve
from spaceplanner.guidance.mission_planner import MissionResult
from spaceplanner.guidance.strategy import Strategy

# ANSI escape codes
CYAN = "\033[1;36m"
GREEN = "\033[1;32m"
RED = "\033[1;31m"
YELLOW = "\033[1;33m"
MAGENTA = "\033[1;35m"
RESET = "\033[0m"

SEPARATOR = "+" + "-" * 80 + "+"

# (regime, time tag, event) rows of the mission chronology
CHRONOLOGY_ASCENT = [
    ("Pre-Launch", "T- 00:00:10", "Final Systems Checkout"),
    ("Atmospheric Ascent", "T+ 00:01:00", "Max-Q / Stack Separation"),
    ("LEO Insertion", "T+ 00:08:30", "Circularize / Prepare for Ops"),
]
CHRONOLOGY_DEPARTURE = {
    Strategy.ORBITAL_REFUEL: [
        ("Orbital Rendezvous", "T+ 12h - 48h", "Tanker Docking & Fuel Transfer"),
        ("Departure Burn", "T+ 1-2d", "Full Injection to Interplanetary Trajectory"),
    ],
    Strategy.KICK_STAGE: [
        ("Kick Stage Ignition", "T+ 01:00:00", "Final Impulsive Injection"),
    ],
    Strategy.GRAVITY_ASSIST: [
        ("Gravity Assist Phase", "Years", "Multiple flybys (VEEGA/EGA approximation)"),
    ],
    Strategy.OBERTH_PERIGEE_KICK: [
        ("Oberth Kicks", "Days-Weeks", "Perigee burns to increase injection energy"),
    ],
}
CHRONOLOGY_DIRECT = [
    ("Trans Injection", "T+ 1-3d", "Escape / Trans-Target Burn"),
]
CHRONOLOGY_ARRIVAL = [
    ("Interplanetary Cruise", "Months-Years", "Mid-course Corrections & Trajectory Maintenance"),
    ("Approach & Capture", "Arr - Days", "Terminal Descent & Insertion Ops"),
    ("Landing/Arrival", "Arrival", "Surface contact / Orbit achieved"),
]

HELP_TEXT = """
Space Mission Planner Help
 - This tool estimates whether a selected rocket can perform a mission to a chosen body
 - It uses simplified delta-v budgets and empirical staging factors for capability
 - Strategies considered: direct, Oberth/perigee kicks, gravity-assist, LEO refueling, kick-stage
 - For serious mission design use dedicated astrodynamics tools and high-fidelity models
"""


class ConsoleRenderer:
    """
    Writes planner output to a text stream.

    Args:
        stream: Destination (default sys.stdout)
        color: Emit ANSI color codes
    """

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    # -------------------------------------------------------------------------
    # Low-level helpers
    # -------------------------------------------------------------------------

    def paint(self, text: str, code: str) -> str:
        return f"{code}{text}{RESET}" if self.color else text

    def write(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def separator(self) -> None:
        self.write(self.paint(SEPARATOR, CYAN))

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def help(self) -> None:
        self.write(HELP_TEXT)

    def catalog(self, catalog: Catalog) -> None:
        """Detailed rocket and destination listing."""
        self.write("\nAvailable Rockets:")
        for idx, r in enumerate(catalog.rockets, start=1):
            empty, loaded = capability_curve(r, [0.0, r.payload_leo_kg])
            self.write(f" {idx}) {r.name}")
            self.write(f"    Wet mass:   {r.wet_mass_kg:.0f} kg | Dry mass: {r.dry_mass_kg:.0f} kg"
                       f" | Payload LEO: {r.payload_leo_kg:.0f} kg")
            self.write(f"    Isp_avg:    {r.isp_s:.1f} s   | Staging factor: {r.staging_factor:.2f}"
                       f" | Tanker DV/mission: {r.refuel_dv_per_tanker:.2f} km/s")
            self.write(f"    Capability: {empty:.2f} km/s empty"
                       f" | {loaded:.2f} km/s at max payload")

        self.write("\nAvailable Destinations:")
        for idx, b in enumerate(catalog.bodies, start=1):
            self.write(f" {idx}) {b.name}")
            self.write(f"    DV transfer: {b.dv_transfer:.2f} km/s | DV capture: {b.dv_capture:.2f} km/s"
                       f" | Synodic: {b.synodic_days:.1f} days")
            self.write(f"    Epoch: {b.epoch_date} | Typical transit: {b.typical_transit_days:.0f} days")
        self.write()

    def catalog_table(self, catalog: Catalog) -> None:
        """Compact tabular listing via pandas."""
        rockets_df, bodies_df = catalog.to_frame()
        with pd.option_context('display.width', 160, 'display.max_columns', None):
            self.write(rockets_df.to_string())
            self.write()
            self.write(bodies_df.to_string())

    def menu(self, title: str, names) -> None:
        self.write(f"\n{title}")
        for idx, name in enumerate(names, start=1):
            self.write(f" {idx}) {name}")

    # -------------------------------------------------------------------------
    # Mission result
    # -------------------------------------------------------------------------

    def mission(self, result: MissionResult) -> None:
        """Full mission summary in the order a user reads it."""
        self.write("\n")
        self.header(result)
        self.status(result)
        self.write(f"\n TANK USAGE (approx): {result.tank_usage_pct:.1f} %")
        self.delta_v_breakdown(result)

        if result.strategy is Strategy.ORBITAL_REFUEL and result.tankers_needed > 0:
            self.write(self.paint(
                f"\n Refueling Plan: Estimated tankers required: {result.tankers_needed} "
                f"(each adds ~{result.rocket.refuel_dv_per_tanker:.1f} km/s)", YELLOW))

        if not result.success:
            self.suggestions(result)
        else:
            self.chronology(result)

        self.windows(result)

    def header(self, result: MissionResult) -> None:
        self.separator()
        self.write(" MISSION SUMMARY")
        self.separator()
        self.write(f" Rocket:  {result.rocket.name}")
        self.write(f" Target:  {result.body.name}")
        self.write(f" Launch date (start): {result.start_date or '----'}")
        self.write(f" Payload mass: {result.payload_kg:.0f} kg")
        self.separator()

    def status(self, result: MissionResult) -> None:
        if result.success:
            code = YELLOW if result.strategy.is_alternate else GREEN
            self.write(self.paint(f" STATUS:   [ {result.status} ]", code))
            if result.note:
                self.write(self.paint(f" METHOD:   {result.note}", MAGENTA))
        else:
            self.write(self.paint(f" STATUS:   [ {result.status} ]", RED))
            self.write(self.paint(
                " RECOMMENDATION: Reduce payload or select a different launcher / strategy", RED))

    def delta_v_breakdown(self, result: MissionResult) -> None:
        ascent, transfer, capture = result.delta_v_breakdown
        self.write("\n" + self.paint(" Delta-V Budget Breakdown (km/s):", MAGENTA))
        self.write(f"  - Earth ascent (LEO):      {ascent:.2f}")
        self.write(f"  - Transfer DV (to target): {transfer:.2f}")
        self.write(f"  - Capture DV (arrival):    {capture:.2f}")
        self.write("  ---------------------------------")
        self.write(f"  - Total required:          {result.required:.2f} km/s")
        self.write(f"  - Rocket base capability:  {result.capability:.2f} km/s")
        self.write(f"  - Final mission capability:{result.final_capability:.2f} km/s")
        if result.final_margin >= 0:
            self.write(self.paint(f"  - Margin: +{result.final_margin:.2f} km/s [FEASIBLE]", GREEN))
        else:
            self.write(self.paint(f"  - Margin: {result.final_margin:.2f} km/s [INSUFFICIENT]", RED))

    def suggestions(self, result: MissionResult) -> None:
        self.write("\n Suggestions:")
        if not result.alternatives:
            self.write("  - No other catalog rocket closes this mission directly")
        for rocket, capability in result.alternatives:
            self.write(f"  - Use {rocket.name} (cap {capability:.2f} km/s) could enable mission")

    def chronology(self, result: MissionResult) -> None:
        rows = (CHRONOLOGY_ASCENT
                + CHRONOLOGY_DEPARTURE.get(result.strategy, CHRONOLOGY_DIRECT)
                + CHRONOLOGY_ARRIVAL)

        self.write("\n" + self.paint(" Mission Chronology & Notes:", CYAN))
        self.separator()
        self.write(f" | {'FLIGHT REGIME':<24} | {'T-MINUS/PLUS':<15} | {'ASTRODYNAMIC EVENT':<34} |")
        self.separator()
        for regime, tag, event in rows:
            self.write(f" | {regime:<24} | {tag:<15} | {event:<34} |")
        self.separator()

        if result.note:
            self.write(f"\n Notes: {result.note}")

    def windows(self, result: MissionResult) -> None:
        self.write("\n" + self.paint(
            f" NEXT {len(result.windows)} LAUNCH WINDOWS (estimated):", CYAN))
        self.write(f" # | {'LAUNCH DATE':<15} | {'ARRIVAL (Est)':<15}")
        self.write("-" * 40)
        for window in result.windows:
            self.write(f" {window.number} | {format_date(window.launch):<15} | "
                       f"{format_date(window.arrival):<15}")
