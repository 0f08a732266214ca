"""
===============================================================================
SPACE MISSION PLANNER - Physical Constants and Planner Assumptions
===============================================================================
Central repository for the constants used by the capability, feasibility and
launch-window calculations.

Delta-V values are in km/s, masses in kg, specific impulse in seconds and
durations in days unless the name says otherwise. The strategy bonuses are
empirical assumptions of the planner, not derived quantities.
===============================================================================
"""

# =============================================================================
# FUNDAMENTAL CONSTANTS
# =============================================================================
G0 = 9.80665                          # Standard gravity (m/s^2)
SECONDS_PER_DAY = 86400.0             # s
M_PER_KM = 1000.0

# =============================================================================
# DELTA-V BUDGET
# =============================================================================
# Approximate delta-V from the pad to escape from LEO, including losses
EARTH_ASCENT_COST = 9.30              # km/s

# =============================================================================
# STRATEGY ASSUMPTIONS
# =============================================================================
GRAVITY_ASSIST_BONUS = 4.5            # km/s gained via multi-flyby (VEEGA)
GRAVITY_ASSIST_TRANSIT_DAYS = 2555.0  # ~7 years of flybys and cruise
PERIGEE_KICK_BONUS = 6.5              # km/s from repeated Oberth perigee burns
PERIGEE_KICK_MAX_PAYLOAD = 1500.0     # kg
KICK_STAGE_BONUS = 2.0                # km/s from a 'Star 48' class solid motor
KICK_STAGE_MAX_SHORTFALL = 1.5        # km/s; larger deficits are not closed

# =============================================================================
# PLANNER DEFAULTS
# =============================================================================
DEFAULT_START_DATE = "2025-01-01"
DEFAULT_PAYLOAD_KG = 0.0
DEFAULT_WINDOW_COUNT = 5
DATE_FORMAT = "%Y-%m-%d"

# Illustrative tank usage shown in mission summaries (%)
TANK_USAGE_FEASIBLE = 85.0
TANK_USAGE_INFEASIBLE = 40.0
