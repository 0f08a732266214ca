"""
===============================================================================
SPACE MISSION PLANNER - Dynamics Module
===============================================================================
Vehicle performance models.

Submodules:
    launch_vehicle -- Rocket-equation delta-V capability with staging factor
===============================================================================
"""
