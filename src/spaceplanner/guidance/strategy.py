"""
Mission strategy tags.

Exactly one strategy is assigned to every evaluated mission.
"""

from enum import Enum


class Strategy(Enum):
    """
    Closed set of mission profiles the feasibility planner can pick.

    The value is the label shown to users.
    """
    DIRECT = "Direct"
    OBERTH_PERIGEE_KICK = "Oberth perigee kick"
    GRAVITY_ASSIST = "Gravity assist"
    ORBITAL_REFUEL = "Orbital refuel"
    KICK_STAGE = "Kick stage"
    INFEASIBLE = "Infeasible"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_alternate(self) -> bool:
        """True for profiles other than a plain direct launch."""
        return self not in (Strategy.DIRECT, Strategy.INFEASIBLE)
