"""
===============================================================================
SPACE MISSION PLANNER - Guidance Package
===============================================================================
Mission-level decision logic.

Modules:
    mission_planner  : Strategy selection, feasibility verdict and the
                       planner facade combining feasibility and windows
    maneuver_planner : Tanker-count planning for orbital refuelling
    launch_windows   : Synodic launch-window projection
===============================================================================
"""
