#!/usr/bin/env python3
"""
===============================================================================
SPACE MISSION PLANNER - MAIN ENTRY POINT
===============================================================================
Interactive mission feasibility calculator.

USAGE:
    spaceplanner                                   # Interactive menu
    spaceplanner --list                            # Print the catalog
    spaceplanner --table                           # Catalog as compact tables
    spaceplanner --rocket 1 --body 2 --payload 100000 --date 2026-01-01
    spaceplanner --rocket 4 --body 2 --payload 1000 --save
    spaceplanner --config config/planner_config.yaml

OUTPUTS:
    mission_<YYYYMMDD>_<HHMM>.txt  - Mission summary (on request)
    <plot-dir>/*.png               - Capability and delta-V budget charts

DEPENDENCIES:
    numpy, pandas, matplotlib, pyyaml
    Install: pip install -e .
===============================================================================
"""

import argparse
import copy
import logging
import math
import sys
from pathlib import Path
from typing import Callable, List, Optional

import yaml

from spaceplanner.core.catalog import Catalog
from spaceplanner.core.constants import (
    DEFAULT_PAYLOAD_KG,
    DEFAULT_START_DATE,
    DEFAULT_WINDOW_COUNT,
)
from spaceplanner.core.dates import parse_date
from spaceplanner.core.exceptions import DateParseError, InvalidSelection, PersistenceFailure
from spaceplanner.database.report_writer import ReportWriter
from spaceplanner.guidance.mission_planner import MissionPlanner, MissionResult
from spaceplanner.visualization.console import GREEN, RED, ConsoleRenderer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

DEFAULT_CONFIG = {
    'planner': {
        'default_start_date': DEFAULT_START_DATE,
        'default_payload_kg': DEFAULT_PAYLOAD_KG,
        'window_count': DEFAULT_WINDOW_COUNT,
    },
    'output': {
        'report_dir': '.',
        'plot_dir': None,
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
    'catalog': {},
}


# ---------------------------------------------------------------------------
# Configuration and logging
# ---------------------------------------------------------------------------

def _merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into a copy of *base*."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load planner configuration from a YAML file over the built-in defaults.

    Args:
        config_path: Path to YAML config. None returns the defaults.

    Returns:
        Dictionary of planner configuration parameters

    Raises:
        FileNotFoundError: If config_path does not exist
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}
    return _merge(DEFAULT_CONFIG, config)


def setup_logging(level: str = 'WARNING', log_file: Optional[str] = None) -> None:
    """Configure root logging once for the process."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a'))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


# ---------------------------------------------------------------------------
# Interactive session
# ---------------------------------------------------------------------------

class InteractiveSession:
    """
    Text menu driving the planner: list catalog, plan mission, quit.

    Input and output are injectable so the session can be scripted.

    Args:
        planner: MissionPlanner to evaluate missions with
        renderer: ConsoleRenderer for all output
        writer: ReportWriter used when the user asks to save
        input_fn: Prompt function (default builtin input)
        default_start_date: Date used when the user gives none or a bad one
        default_payload_kg: Payload used when the user gives none
    """

    def __init__(
        self,
        planner: MissionPlanner,
        renderer: ConsoleRenderer,
        writer: ReportWriter,
        input_fn: Callable[[str], str] = input,
        default_start_date: str = DEFAULT_START_DATE,
        default_payload_kg: float = DEFAULT_PAYLOAD_KG,
    ):
        self.planner = planner
        self.renderer = renderer
        self.writer = writer
        self.input_fn = input_fn
        self.default_start_date = default_start_date
        self.default_payload_kg = default_payload_kg

    def ask(self, prompt: str) -> str:
        """Prompt for a line; end of input reads as an empty answer."""
        try:
            return self.input_fn(prompt).strip()
        except EOFError:
            return ''

    def ask_index(self, title: str, names) -> int:
        self.renderer.menu(title, names)
        answer = self.ask("Selection > ")
        try:
            return int(answer)
        except ValueError:
            return 1

    def ask_start_date(self) -> str:
        answer = self.ask(f"\nStart Date (YYYY-MM-DD) [default: {self.default_start_date}]: ")
        if len(answer) < 8:
            return self.default_start_date
        try:
            parse_date(answer)
        except DateParseError as e:
            logger.warning("%s; using %s", e, self.default_start_date)
            self.renderer.write(f" {e}. Using {self.default_start_date}.")
            return self.default_start_date
        return answer

    def ask_payload(self) -> float:
        answer = self.ask("Payload Mass (kg) [enter numeric value]: ")
        try:
            payload = float(answer)
        except ValueError:
            return self.default_payload_kg
        if not math.isfinite(payload):
            logger.warning("Non-finite payload '%s'; using %s kg", answer, self.default_payload_kg)
            return self.default_payload_kg
        return max(payload, 0.0)

    def plan_mission(self) -> MissionResult:
        catalog = self.planner.catalog

        rocket_index = self.ask_index("Select Rocket:", [r.name for r in catalog.rockets])
        rocket = select_or_first(catalog.rocket, rocket_index, self.renderer)

        body_index = self.ask_index("Select Destination:", [b.name for b in catalog.bodies])
        body = select_or_first(catalog.body, body_index, self.renderer)

        start_date = self.ask_start_date()
        payload = self.ask_payload()

        result = self.planner.evaluate(rocket, body, payload, start_date)
        self.renderer.mission(result)

        if self.ask("\n Save mission summary to file? (y/N): ").lower().startswith('y'):
            save_report(self.writer, result, self.renderer)
        return result

    def run(self) -> None:
        self.renderer.write("\n--- SPACE MISSION PLANNER ---")
        self.renderer.help()

        while True:
            self.renderer.write("\nMain Menu:")
            self.renderer.write(" 1) List available rockets & targets")
            self.renderer.write(" 2) Plan a new mission")
            self.renderer.write(" 3) Quit")
            try:
                answer = self.input_fn("Selection > ").strip()
            except EOFError:
                answer = '3'

            if answer == '1':
                self.renderer.catalog(self.planner.catalog)
            elif answer == '2':
                self.plan_mission()
            elif answer == '3':
                self.renderer.write("\nExiting. Safe travels!")
                break
            else:
                self.renderer.write("\nInvalid selection. Try again.")


def select_or_first(lookup, index: int, renderer: ConsoleRenderer):
    """Catalog entry for a 1-based menu index; out-of-range indices fall back to entry 1."""
    try:
        return lookup(index)
    except InvalidSelection as e:
        logger.warning("%s; defaulting to 1", e)
        renderer.write(renderer.paint(f" {e}. Using 1.", RED))
        return lookup(1)


def save_report(writer: ReportWriter, result: MissionResult,
                renderer: ConsoleRenderer) -> Optional[Path]:
    """Save a report, turning persistence failures into a user warning."""
    try:
        path = writer.save(result)
    except PersistenceFailure as e:
        logger.warning("%s", e)
        renderer.write(renderer.paint(" Failed to save mission summary to file.", RED))
        return None
    renderer.write(renderer.paint(f" Saved mission summary to {path}.", GREEN))
    return path


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Space mission feasibility planner',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  spaceplanner                                    Interactive menu
  spaceplanner --list                             Print the catalog
  spaceplanner --table                            Catalog as compact tables
  spaceplanner --rocket 1 --body 3 --payload 140000
  spaceplanner --rocket 4 --body 2 --payload 1000 --save
        """
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to planner config YAML')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (overrides config)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable ANSI colors')
    parser.add_argument('--list', action='store_true',
                        help='List rockets and destinations, then exit')
    parser.add_argument('--table', action='store_true',
                        help='List the catalog as compact tables, then exit')
    parser.add_argument('--rocket', type=int, default=None,
                        help='Rocket menu index (one-shot mode)')
    parser.add_argument('--body', type=int, default=None,
                        help='Destination menu index (one-shot mode)')
    parser.add_argument('--date', type=str, default=None,
                        help='Start date YYYY-MM-DD')
    parser.add_argument('--payload', type=float, default=None,
                        help='Payload mass in kg')
    parser.add_argument('--save', action='store_true',
                        help='Save the mission summary to a text file')
    parser.add_argument('--plot-dir', type=str, default=None,
                        help='Write capability and delta-V budget charts here')
    return parser


def run_once(args, config: dict, planner: MissionPlanner, renderer: ConsoleRenderer,
             writer: ReportWriter) -> int:
    """Evaluate a single mission from command-line arguments."""
    planner_cfg = config['planner']
    start_date = args.date or planner_cfg['default_start_date']
    payload = args.payload if args.payload is not None else planner_cfg['default_payload_kg']
    payload = float(payload)
    if not math.isfinite(payload):
        logger.error("Non-finite payload: %s", payload)
        renderer.write(f" Error: payload must be a finite number of kg, got {payload}")
        return 2

    rocket = select_or_first(planner.catalog.rocket, args.rocket, renderer)
    body = select_or_first(planner.catalog.body, args.body if args.body is not None else 1, renderer)

    try:
        result = planner.evaluate(rocket, body, max(payload, 0.0), start_date)
    except DateParseError as e:
        logger.error("%s", e)
        renderer.write(f" Error: {e}")
        return 2

    renderer.mission(result)

    if args.save:
        save_report(writer, result, renderer)

    plot_dir = args.plot_dir or config['output'].get('plot_dir')
    if plot_dir:
        from spaceplanner.visualization.plots import plot_capability_curves, plot_delta_v_budget

        plot_capability_curves(planner.catalog, str(Path(plot_dir) / 'capability_vs_payload.png'),
                               body=result.body)
        plot_delta_v_budget(result, str(Path(plot_dir) / 'delta_v_budget.png'))
        logger.info("Plots written to %s", plot_dir)

    return 0 if result.success else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point. Parses command line arguments and runs the listing,
    a one-shot evaluation, or the interactive menu.
    """
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    setup_logging(args.log_level or config['logging']['level'], config['logging'].get('file'))

    renderer = ConsoleRenderer(color=not args.no_color)
    try:
        catalog = Catalog.from_config(config.get('catalog'))
    except ValueError as e:
        logger.error("Invalid catalog configuration: %s", e)
        renderer.write(f" Error: invalid catalog configuration: {e}")
        return 2
    planner = MissionPlanner(catalog, window_count=int(config['planner']['window_count']))
    writer = ReportWriter(config['output']['report_dir'])

    if args.table:
        renderer.catalog_table(catalog)
        return 0
    if args.list:
        renderer.catalog(catalog)
        return 0

    if args.rocket is not None:
        return run_once(args, config, planner, renderer, writer)

    session = InteractiveSession(
        planner, renderer, writer,
        default_start_date=str(config['planner']['default_start_date']),
        default_payload_kg=float(config['planner']['default_payload_kg']),
    )
    try:
        session.run()
    except KeyboardInterrupt:
        renderer.write("\nExiting. Safe travels!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
