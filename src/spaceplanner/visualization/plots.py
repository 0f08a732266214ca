"""
Plotting utilities for mission results.
Capability-versus-payload curves for the catalog and a delta-V budget chart
for a single evaluated mission. Figures are written to disk with the
non-interactive Agg backend.
"""

import os

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for saving
import matplotlib.pyplot as plt

from spaceplanner.core.catalog import Body, Catalog
from spaceplanner.dynamics.launch_vehicle import capability_curve
from spaceplanner.guidance.mission_planner import MissionResult, required_delta_v


PALETTE = ['#2E86AB', '#F18F01', '#2E7D32', '#C73E1D', '#7B1FA2', '#00838F']
COLOR_REQUIRED = '#C73E1D'
COLOR_BONUS = '#F18F01'
COLOR_BASE = '#2E86AB'


def _save(fig, filepath, dpi=150):
    """Save *fig* to *filepath*, creating directories as needed."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(filepath, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    return filepath


def plot_capability_curves(catalog: Catalog, filepath: str, body: Body = None,
                           num_points: int = 200):
    """Capability (km/s) against payload (kg) for every catalog rocket.

    Each curve runs from zero payload to the rocket's LEO payload limit. When
    *body* is given its total delta-V requirement is drawn as a horizontal
    line, so the crossing point is the largest directly feasible payload.
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    for idx, rocket in enumerate(catalog.rockets):
        payloads = np.linspace(0.0, max(rocket.payload_leo_kg, 0.0), num_points)
        ax.plot(payloads / 1000.0, capability_curve(rocket, payloads),
                color=PALETTE[idx % len(PALETTE)], label=rocket.name)

    if body is not None:
        ax.axhline(required_delta_v(body), color=COLOR_REQUIRED, linestyle='--',
                   label=f'Required: {body.name}')

    ax.set_xscale('symlog', linthresh=1.0)
    ax.set_xlabel('Payload (t)')
    ax.set_ylabel('Delta-V capability (km/s)')
    ax.set_title('Launch Vehicle Capability vs Payload')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')
    return _save(fig, filepath)


def plot_delta_v_budget(result: MissionResult, filepath: str):
    """Stacked requirement against base capability plus strategy bonus."""
    ascent, transfer, capture = result.delta_v_breakdown
    fig, ax = plt.subplots(figsize=(7, 6))

    ax.bar('Required', ascent, color='#546E7A', label='Earth ascent')
    ax.bar('Required', transfer, bottom=ascent, color='#90A4AE', label='Transfer')
    ax.bar('Required', capture, bottom=ascent + transfer, color='#CFD8DC', label='Capture')

    ax.bar('Available', result.capability, color=COLOR_BASE, label='Base capability')
    if result.bonus > 0:
        ax.bar('Available', result.bonus, bottom=result.capability, color=COLOR_BONUS,
               label=f'{result.strategy.label} bonus')

    ax.axhline(result.required, color=COLOR_REQUIRED, linestyle='--', linewidth=1.0)
    ax.set_ylabel('Delta-V (km/s)')
    ax.set_title(f'{result.rocket.name} to {result.body.name}\n'
                 f'margin {result.final_margin:+.2f} km/s')
    ax.legend(loc='upper right', fontsize=9)
    return _save(fig, filepath)
