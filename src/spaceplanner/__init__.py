"""
===============================================================================
SPACE MISSION PLANNER
===============================================================================
Estimates whether a chosen rocket can reach a chosen celestial body using
simplified astrodynamics: rocket-equation delta-V with empirical staging
factors, fixed per-body transfer/capture costs, and synodic launch-window
cycles.

Subpackages:
    core          -- Constants, exceptions, rocket/body catalog
    dynamics      -- Launch vehicle delta-V capability
    guidance      -- Feasibility planning, tanker planning, launch windows
    database      -- Plain-text mission report persistence
    visualization -- Terminal rendering of catalog and mission results

This is an educational tool. For real mission design use high-fidelity
astrodynamics software.
===============================================================================
"""

__version__ = "1.0.0"
