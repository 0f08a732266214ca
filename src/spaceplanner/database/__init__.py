"""
===============================================================================
SPACE MISSION PLANNER - Database Module
===============================================================================
Plain-text persistence of mission results.

Submodules:
    report_writer -- ReportWriter for timestamped mission summary files
===============================================================================
"""
