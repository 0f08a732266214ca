"""
===============================================================================
SPACE MISSION PLANNER - Core Package
===============================================================================
Shared building blocks used by every other subpackage.

Submodules:
    constants  -- Physical constants and planner assumptions
    exceptions -- Planner error kinds
    catalog    -- Rocket and destination reference data
===============================================================================
"""
