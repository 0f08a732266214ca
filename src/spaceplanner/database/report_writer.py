"""
===============================================================================
SPACE MISSION PLANNER - Mission Report Writer
===============================================================================
Writes a human-readable summary of a MissionResult to
``<output_dir>/mission_<YYYYMMDD>_<HHMM>.txt``.

Failures to create or write the file are raised as PersistenceFailure. The
caller reports them as a warning; the already computed result is unaffected.

Usage:
    from spaceplanner.database.report_writer import ReportWriter

    writer = ReportWriter("reports")
    path = writer.save(result)
===============================================================================
"""

import datetime
import logging
from pathlib import Path
from typing import List, Optional, Union

from spaceplanner.core.exceptions import PersistenceFailure
from spaceplanner.guidance.mission_planner import MissionResult

logger = logging.getLogger(__name__)

FILENAME_PATTERN = "mission_%Y%m%d_%H%M.txt"


class ReportWriter:
    """Plain-text mission report persistence.

    Parameters
    ----------
    output_dir : str or Path
        Directory receiving the report files. Created on first save.
    """

    def __init__(self, output_dir: Union[str, Path] = ".") -> None:
        self.output_dir = Path(output_dir)

    def report_path(self, now: datetime.datetime) -> Path:
        """Destination file for a report generated at `now`."""
        return self.output_dir / now.strftime(FILENAME_PATTERN)

    def render(self, result: MissionResult, now: datetime.datetime) -> str:
        """Report body as text."""
        ascent, transfer, capture = result.delta_v_breakdown
        lines: List[str] = [
            "Mission planner output",
            f"Generated: {now.strftime('%a %b %d %H:%M:%S %Y')}",
            "",
            f"Rocket: {result.rocket.name}",
            f"Target: {result.body.name}",
            f"Launch date: {result.start_date or '----'}",
            f"Payload: {result.payload_kg:.0f} kg",
            f"Strategy: {result.strategy.label}",
            f"Status: {result.status}",
            "",
            "DV breakdown (km/s):",
            f"  Earth ascent: {ascent:.2f}",
            f"  Transfer:     {transfer:.2f}",
            f"  Capture:      {capture:.2f}",
            f"  Total req:    {result.required:.2f}",
            f"  Rocket base capability: {result.capability:.2f}",
            f"  Final capability:       {result.final_capability:.2f}",
            f"  Margin:                 {result.final_margin:.2f}",
            "",
        ]
        if result.tankers_needed > 0:
            lines.append(f"Recommended tankers: {result.tankers_needed}")
        if result.note:
            lines.append(f"Notes: {result.note}")
        if result.windows:
            lines.append("")
            lines.append("Launch windows (launch -> arrival):")
            for window in result.windows:
                lines.append("  {number}: {launch} -> {arrival}".format(**window.as_dict()))
        return "\n".join(lines) + "\n"

    def save(self, result: MissionResult, now: Optional[datetime.datetime] = None) -> Path:
        """
        Write the report and return its path.

        Raises:
            PersistenceFailure: If the directory or file cannot be written
        """
        now = now or datetime.datetime.now()
        path = self.report_path(now)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(self.render(result, now), encoding="utf-8")
        except OSError as e:
            raise PersistenceFailure(f"Could not write mission report {path}: {e}") from e

        logger.info("Mission report saved to %s", path)
        return path
