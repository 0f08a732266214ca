"""
===============================================================================
SPACE MISSION PLANNER - Catalog and Configuration Test Suite
===============================================================================
Tests for the rocket/body catalog (menu selection, lookup, tabular view,
validation) and for YAML configuration loading and catalog construction from
configuration.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import dataclasses
import logging

import pytest

from spaceplanner.core.catalog import DEFAULT_BODIES, DEFAULT_ROCKETS, Body, Catalog, Rocket
from spaceplanner.core.exceptions import DateParseError, InvalidSelection
from spaceplanner.main import DEFAULT_CONFIG, load_config

CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', '..', 'config', 'planner_config.yaml')


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def catalog():
    return Catalog()


# =============================================================================
# Catalog
# =============================================================================

class TestCatalog:

    def test_default_contents(self, catalog):
        assert [r.name for r in catalog.rockets] == [
            "SpaceX's Starship", "NASA's SLS", "Blue Origin's New Glenn",
            "ISRO's Mangalyaan 1 (PSLV)",
        ]
        assert [b.name for b in catalog.bodies] == ["Moon", "Mars", "Titan (Saturn)"]

    def test_strategy_flags(self, catalog):
        assert [r.supports_orbital_refuel for r in catalog.rockets] == [True, False, False, False]
        assert [r.supports_perigee_kick for r in catalog.rockets] == [False, False, False, True]
        assert [b.gravity_assist_candidate for b in catalog.bodies] == [False, False, True]
        assert [b.perigee_kick_target for b in catalog.bodies] == [False, True, False]

    def test_menu_selection_is_one_based(self, catalog):
        assert catalog.rocket(1) is catalog.rockets[0]
        assert catalog.body(3) is catalog.bodies[2]

    @pytest.mark.parametrize("index", [0, -1, 5, 100])
    def test_rocket_index_out_of_range(self, catalog, index):
        with pytest.raises(InvalidSelection) as exc:
            catalog.rocket(index)
        assert exc.value.kind == "rocket"
        assert exc.value.size == 4

    def test_body_index_out_of_range(self, catalog):
        with pytest.raises(IndexError):
            catalog.body(4)

    def test_find_by_name(self, catalog):
        assert catalog.find_body("Mars").synodic_days == 780.0
        with pytest.raises(KeyError):
            catalog.find_rocket("Saturn V")

    def test_entries_are_immutable(self, catalog):
        with pytest.raises(dataclasses.FrozenInstanceError):
            catalog.rockets[0].wet_mass_kg = 1.0
        assert isinstance(catalog.rockets, tuple)

    def test_catalogs_are_independent(self):
        custom = Catalog(rockets=[Rocket("Tiny", 1000.0, 100.0, 250.0, 10.0)])
        assert len(custom.rockets) == 1
        assert custom.bodies == DEFAULT_BODIES
        assert Catalog().rockets == DEFAULT_ROCKETS

    def test_degenerate_rocket_is_logged_not_rejected(self, caplog):
        with caplog.at_level(logging.WARNING, logger="spaceplanner.core.catalog"):
            custom = Catalog(rockets=[Rocket("Inverted", 100.0, 200.0, 300.0, 10.0)])
        assert len(custom.rockets) == 1
        assert "degenerate" in caplog.text

    def test_non_positive_synodic_period_rejected(self):
        with pytest.raises(ValueError):
            Catalog(bodies=[Body("Static", 1.0, 1.0, 0.0, "2025-01-01", 10.0)])

    @pytest.mark.parametrize("epoch", ["someday", "2025-13-01", "16/01/2025", ""])
    def test_malformed_epoch_rejected(self, epoch):
        with pytest.raises(DateParseError):
            Catalog(bodies=[Body("Broken", 1.0, 1.0, 100.0, epoch, 10.0)])

    def test_malformed_epoch_in_config(self):
        with pytest.raises(ValueError):
            Catalog.from_config({'bodies': [{
                'name': 'Broken',
                'dv_transfer_km_s': 1.0,
                'dv_capture_km_s': 1.0,
                'synodic_days': 100.0,
                'epoch_date': 'someday',
            }]})

    def test_to_frame(self, catalog):
        rockets_df, bodies_df = catalog.to_frame()
        assert rockets_df.shape == (4, 7)
        assert bodies_df.shape == (3, 6)
        assert list(rockets_df.index) == [1, 2, 3, 4]
        assert rockets_df.loc[4, 'Rocket'] == "ISRO's Mangalyaan 1 (PSLV)"
        assert bodies_df.loc[2, 'Synodic (days)'] == 780.0


# =============================================================================
# Configuration
# =============================================================================

class TestConfig:

    def test_defaults_without_file(self):
        config = load_config(None)
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.yaml"))

    def test_partial_override_merges(self, tmp_path):
        path = tmp_path / "planner.yaml"
        path.write_text("planner:\n  window_count: 8\nlogging:\n  level: DEBUG\n")
        config = load_config(str(path))
        assert config['planner']['window_count'] == 8
        assert config['planner']['default_start_date'] == "2025-01-01"
        assert config['logging']['level'] == "DEBUG"
        assert config['output']['report_dir'] == "."

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_shipped_config_reproduces_default_catalog(self):
        config = load_config(CONFIG_PATH)
        catalog = Catalog.from_config(config['catalog'])
        assert catalog.rockets == DEFAULT_ROCKETS
        assert catalog.bodies == DEFAULT_BODIES

    def test_empty_catalog_section_uses_defaults(self):
        catalog = Catalog.from_config({})
        assert catalog.rockets == DEFAULT_ROCKETS
        assert Catalog.from_config(None).bodies == DEFAULT_BODIES

    def test_custom_rockets_only(self):
        catalog = Catalog.from_config({
            'rockets': [{
                'name': 'Falcon Heavy',
                'wet_mass_kg': 1420000,
                'dry_mass_kg': 90000,
                'isp_s': 311,
                'payload_leo_kg': 63800,
                'staging_factor': 1.35,
            }],
        })
        rocket = catalog.rocket(1)
        assert rocket.name == 'Falcon Heavy'
        assert rocket.wet_mass_kg == 1420000.0
        assert rocket.refuel_dv_per_tanker == 0.0
        assert not rocket.supports_orbital_refuel
        assert catalog.bodies == DEFAULT_BODIES

    def test_unquoted_yaml_date_becomes_string(self, tmp_path):
        path = tmp_path / "bodies.yaml"
        path.write_text(
            "catalog:\n"
            "  bodies:\n"
            "    - name: Venus\n"
            "      dv_transfer_km_s: 3.5\n"
            "      dv_capture_km_s: 3.0\n"
            "      synodic_days: 583.9\n"
            "      epoch_date: 2025-10-01\n"
            "      typical_transit_days: 150\n"
        )
        catalog = Catalog.from_config(load_config(str(path))['catalog'])
        assert catalog.body(1).epoch_date == "2025-10-01"
