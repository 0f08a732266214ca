"""
===============================================================================
SPACE MISSION PLANNER - Command Line Test Suite
===============================================================================
Tests for the scripted interactive session (menu navigation, input fallbacks,
saving reports, persistence warnings) and for the argparse entry point in
listing and one-shot modes.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io
import logging

import pytest

from spaceplanner.core.catalog import Catalog
from spaceplanner.database.report_writer import ReportWriter
from spaceplanner.guidance.mission_planner import MissionPlanner
from spaceplanner.guidance.strategy import Strategy
from spaceplanner.main import InteractiveSession, build_parser, main
from spaceplanner.visualization.console import ConsoleRenderer


# =============================================================================
# Helpers
# =============================================================================

def scripted(answers):
    """Input function replaying `answers`, then signalling end of input."""
    it = iter(answers)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def make_session(answers, report_dir, **kwargs):
    stream = io.StringIO()
    session = InteractiveSession(
        MissionPlanner(Catalog()),
        ConsoleRenderer(stream, color=False),
        ReportWriter(report_dir),
        input_fn=scripted(answers),
        **kwargs
    )
    return session, stream


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# =============================================================================
# Interactive session
# =============================================================================

class TestInteractiveSession:

    def test_plan_mission(self, tmp_path):
        session, stream = make_session(['1', '2', '2026-01-01', '100000', 'n'], tmp_path)
        result = session.plan_mission()
        assert result.rocket.name == "SpaceX's Starship"
        assert result.body.name == "Mars"
        assert result.start_date == "2026-01-01"
        assert result.strategy is Strategy.ORBITAL_REFUEL
        assert "MISSION SUMMARY" in stream.getvalue()
        assert list(tmp_path.iterdir()) == []

    def test_out_of_range_indices_fall_back_to_first_entry(self, tmp_path):
        session, stream = make_session(['9', '0', '', '', 'n'], tmp_path)
        result = session.plan_mission()
        assert result.rocket.name == "SpaceX's Starship"
        assert result.body.name == "Moon"
        assert "Invalid rocket selection 9. Valid: 1-4. Using 1." in stream.getvalue()

    def test_non_numeric_index_falls_back(self, tmp_path):
        session, _ = make_session(['abc', 'x', '', '', ''], tmp_path)
        result = session.plan_mission()
        assert result.rocket.name == "SpaceX's Starship"

    def test_short_date_uses_default(self, tmp_path):
        session, _ = make_session(['1', '2', '2025', '0', 'n'], tmp_path)
        assert session.plan_mission().start_date == "2025-01-01"

    def test_malformed_date_uses_default(self, tmp_path):
        session, stream = make_session(['1', '2', '2025-99-99', '0', 'n'], tmp_path)
        assert session.plan_mission().start_date == "2025-01-01"
        assert "Invalid date '2025-99-99'" in stream.getvalue()

    @pytest.mark.parametrize("answer", ['heavy', '-500', '', 'nan', 'inf', '-inf'])
    def test_bad_payload_becomes_zero(self, tmp_path, answer):
        session, _ = make_session(['1', '2', '', answer, 'n'], tmp_path)
        assert session.plan_mission().payload_kg == 0.0

    @pytest.mark.parametrize("answer", ['nan', 'NaN', 'inf', '-Infinity'])
    def test_non_finite_payload_uses_default(self, tmp_path, answer):
        session, stream = make_session(['4', '2', '', answer, 'n'], tmp_path,
                                       default_payload_kg=500.0)
        result = session.plan_mission()
        assert result.payload_kg == 500.0
        assert result.capability > 0.0
        assert "Payload mass: 500 kg" in stream.getvalue()

    def test_save_report(self, tmp_path):
        session, stream = make_session(['2', '1', '2025-03-01', '0', 'y'], tmp_path)
        session.plan_mission()
        reports = list(tmp_path.glob("mission_*.txt"))
        assert len(reports) == 1
        assert "Rocket: NASA's SLS" in reports[0].read_text()
        assert "Saved mission summary" in stream.getvalue()

    def test_save_failure_is_a_warning(self, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("")
        session, stream = make_session(['1', '2', '', '0', 'Y'], blocker)
        result = session.plan_mission()
        assert result.success
        assert "Failed to save mission summary to file." in stream.getvalue()

    def test_menu_loop(self, tmp_path):
        answers = ['1', '7', '2', '4', '2', '', '1000', 'n', '3']
        session, stream = make_session(answers, tmp_path)
        session.run()
        text = stream.getvalue()
        assert "Available Rockets:" in text
        assert "Invalid selection. Try again." in text
        assert "NOT FEASIBLE WITH CURRENT ASSUMPTIONS" in text
        assert text.rstrip().endswith("Exiting. Safe travels!")

    def test_end_of_input_quits(self, tmp_path):
        session, stream = make_session([], tmp_path)
        session.run()
        assert "Exiting. Safe travels!" in stream.getvalue()


# =============================================================================
# Entry point
# =============================================================================

class TestMain:

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.rocket is None
        assert not args.save

    def test_list(self, capsys):
        assert main(['--list', '--no-color']) == 0
        assert "Available Destinations:" in capsys.readouterr().out

    def test_one_shot_feasible(self, capsys):
        code = main(['--rocket', '1', '--body', '2', '--payload', '100000',
                     '--date', '2026-01-01', '--no-color'])
        assert code == 0
        assert "ALTERNATE PROFILE FEASIBLE" in capsys.readouterr().out

    def test_one_shot_infeasible(self, capsys):
        code = main(['--rocket', '4', '--body', '2', '--payload', '1000', '--no-color'])
        assert code == 1
        assert "Suggestions:" in capsys.readouterr().out

    def test_table(self, capsys):
        assert main(['--table', '--no-color']) == 0
        out = capsys.readouterr().out
        assert "Payload LEO (kg)" in out
        assert "Titan (Saturn)" in out

    def test_one_shot_bad_index_falls_back(self, capsys):
        assert main(['--rocket', '12', '--body', '9', '--no-color']) == 0
        out = capsys.readouterr().out
        assert "Invalid rocket selection 12. Valid: 1-4. Using 1." in out
        assert "Invalid body selection 9. Valid: 1-3. Using 1." in out
        assert "Rocket:  SpaceX's Starship" in out
        assert "Target:  Moon" in out

    def test_one_shot_bad_date(self, capsys):
        assert main(['--rocket', '1', '--date', '2025-02-31', '--no-color']) == 2

    @pytest.mark.parametrize("payload", ['nan', 'inf'])
    def test_one_shot_non_finite_payload(self, capsys, payload):
        assert main(['--rocket', '4', '--body', '2', '--payload', payload, '--no-color']) == 2
        out = capsys.readouterr().out
        assert "payload must be a finite number" in out
        assert "MISSION SUMMARY" not in out

    def test_malformed_catalog_epoch(self, tmp_path, capsys):
        config = tmp_path / "planner.yaml"
        config.write_text(
            "catalog:\n"
            "  bodies:\n"
            "    - name: Broken\n"
            "      dv_transfer_km_s: 1.0\n"
            "      dv_capture_km_s: 1.0\n"
            "      synodic_days: 100.0\n"
            "      epoch_date: someday\n"
            "      typical_transit_days: 10.0\n"
        )
        assert main(['--config', str(config), '--rocket', '1', '--no-color']) == 2
        assert "Invalid date 'someday'" in capsys.readouterr().out

    def test_one_shot_save_with_config(self, tmp_path, capsys):
        config = tmp_path / "planner.yaml"
        config.write_text(f"output:\n  report_dir: '{tmp_path / 'out'}'\n")
        code = main(['--config', str(config), '--rocket', '2', '--body', '1',
                     '--save', '--no-color'])
        assert code == 0
        assert len(list((tmp_path / 'out').glob("mission_*.txt"))) == 1

    def test_one_shot_plots(self, tmp_path, capsys):
        code = main(['--rocket', '1', '--body', '3', '--payload', '140000',
                     '--plot-dir', str(tmp_path), '--no-color'])
        assert code == 1
        assert (tmp_path / 'capability_vs_payload.png').exists()
        assert (tmp_path / 'delta_v_budget.png').exists()
