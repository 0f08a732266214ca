"""
===============================================================================
Launch Vehicle Capability Model
===============================================================================
Delta-V a catalog rocket can deliver for a given payload mass.

Model:
    - Payload above the practical LEO payload cannot be lifted: capability 0
    - m0 = wet mass + payload, mf = dry mass + payload
    - Degenerate masses (mf <= 0 or m0 <= mf): capability 0
    - dv = Isp * g0 * ln(m0 / mf), converted to km/s
    - dv is then multiplied by the empirical staging factor, which stands in
      for the gain of dropping spent stages that a single-stage rocket
      equation does not capture

Capability is a pure function of the rocket entry and payload. A zero result
means "physically cannot fly" and is a valid outcome, not an error.
===============================================================================
"""

import logging

import numpy as np

from spaceplanner.core.catalog import Rocket
from spaceplanner.core.constants import G0, M_PER_KM

logger = logging.getLogger(__name__)


def rocket_capability(rocket: Rocket, payload_kg: float) -> float:
    """
    Delta-V capability of a rocket carrying a payload.

    Args:
        rocket: Catalog rocket
        payload_kg: Payload mass (kg)

    Returns:
        Achievable delta-V (km/s), 0.0 when the payload is too heavy or the
        mass figures are degenerate
    """
    if payload_kg > rocket.payload_leo_kg:
        logger.debug(
            "%s: payload %.0f kg exceeds LEO capacity %.0f kg",
            rocket.name, payload_kg, rocket.payload_leo_kg,
        )
        return 0.0

    m0 = rocket.wet_mass_kg + payload_kg
    mf = rocket.dry_mass_kg + payload_kg
    if mf <= 0 or m0 <= mf:
        logger.debug("%s: degenerate masses m0=%.0f kg, mf=%.0f kg", rocket.name, m0, mf)
        return 0.0

    dv = rocket.isp_s * G0 * np.log(m0 / mf) / M_PER_KM
    dv *= rocket.staging_factor

    logger.debug("%s: payload=%.0f kg -> capability %.3f km/s", rocket.name, payload_kg, dv)
    return float(dv)


def capability_curve(rocket: Rocket, payloads_kg) -> np.ndarray:
    """
    Capability over an array of payload masses.

    Args:
        rocket: Catalog rocket
        payloads_kg: Array-like of payload masses (kg)

    Returns:
        Array of delta-V capabilities (km/s), same shape as payloads_kg
    """
    payloads = np.asarray(payloads_kg, dtype=float)
    m0 = rocket.wet_mass_kg + payloads
    mf = rocket.dry_mass_kg + payloads

    valid = (payloads <= rocket.payload_leo_kg) & (mf > 0) & (m0 > mf)
    ratio = np.where(valid, m0 / np.where(mf > 0, mf, 1.0), 1.0)
    dv = rocket.isp_s * G0 * np.log(ratio) / M_PER_KM * rocket.staging_factor
    return np.where(valid, dv, 0.0)


class CapabilityCalculator:
    """
    Stateless wrapper used by the planners.

    Typical usage:
        calc = CapabilityCalculator()
        dv = calc.capability(rocket, payload_kg=1000.0)
    """

    def capability(self, rocket: Rocket, payload_kg: float) -> float:
        """Delta-V capability (km/s); see rocket_capability."""
        return rocket_capability(rocket, payload_kg)
