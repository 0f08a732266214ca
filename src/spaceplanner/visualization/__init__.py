"""
===============================================================================
SPACE MISSION PLANNER - Visualization Package
===============================================================================
Presentation of catalog data and mission results.

Modules:
    console : Terminal rendering (summary, budget, chronology, windows)
    plots   : Capability-vs-payload and delta-V budget charts (matplotlib)
===============================================================================
"""
