# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Full water/steam states from pairs of independent variables
"""
from __future__ import annotations
import logging
from dataclasses import replace

from .backward import refine_temperature, refine_region3_temperature
from .config import SolverSettings, DEFAULT_SETTINGS
from .constants import (PRESSURE_CRIT, PRESSURE_Tp, PRESSURE_REGION2A_MAX,
                        ENTROPY_REGION2BC, TEMPERATURE_MIN, TEMPERATURE_MAX,
                        TEMPERATURE_Tp)
from .equations import (region1, region2, b23_temperature, b2bc_pressure,
                        saturation_pressure)
from .errors import OutOfDomainError
from .region3 import solve_region3
from .regions import check_pressure, select_region
from .saturation import saturation_by_pressure, saturation_by_temperature
from .state import Region, PropertyKind, ThermodynamicState

logger = logging.getLogger(__name__)

def properties_from_pressure_temperature(pressure: float, temperature: float,
                                         settings: SolverSettings = DEFAULT_SETTINGS) -> ThermodynamicState:
    """
    State of water at a pressure and temperature.

    Parameters
    ----------
    pressure : float
        pressure in MPa, in (0, 100]
    temperature : float
        temperature in K, in [273.15, 1073.15]
    settings : SolverSettings
        used only if the state falls in region 3

    Returns
    -------
    ThermodynamicState
        single-phase state tagged with its region
    """
    region = select_region(pressure, temperature)
    if region == Region.R1:
        return region1(pressure, temperature)
    if region == Region.R2:
        return region2(pressure, temperature)
    return solve_region3(pressure, temperature, settings)

def properties_from_pressure_enthalpy(pressure: float, enthalpy: float,
                                      settings: SolverSettings = DEFAULT_SETTINGS) -> ThermodynamicState:
    """
    State of water at a pressure (MPa) and specific enthalpy (kJ/kg);
    subcooled, saturated or superheated as the enthalpy dictates
    """
    return _resolve(pressure, PropertyKind.ENTHALPY, enthalpy, settings)

def properties_from_pressure_entropy(pressure: float, entropy: float,
                                     settings: SolverSettings = DEFAULT_SETTINGS) -> ThermodynamicState:
    """
    State of water at a pressure (MPa) and specific entropy (kJ/kg-K);
    subcooled, saturated or superheated as the entropy dictates
    """
    return _resolve(pressure, PropertyKind.ENTROPY, entropy, settings)

def properties_from_pressure_quality(pressure: float, quality: float,
                                     settings: SolverSettings = DEFAULT_SETTINGS) -> ThermodynamicState:
    """
    Saturated mixture at a pressure (MPa) and vapor quality
    """
    _check_quality(quality, 'properties_from_pressure_quality')
    return saturation_by_pressure(pressure, settings).mixture(quality)

def properties_from_temperature_quality(temperature: float, quality: float,
                                        settings: SolverSettings = DEFAULT_SETTINGS) -> ThermodynamicState:
    """
    Saturated mixture at a temperature (K) and vapor quality
    """
    _check_quality(quality, 'properties_from_temperature_quality')
    return saturation_by_temperature(temperature, settings).mixture(quality)

def valid_range_for(pressure: float, kind: PropertyKind) -> tuple[float, float]:
    """
    Smallest and largest admissible value of ``kind`` at a pressure.

    Temperature is bounded by the formulation's fixed limits; enthalpy and
    entropy by their values at those limits.

    Parameters
    ----------
    pressure : float
        pressure in MPa
    kind : PropertyKind
        the quantity whose range is wanted

    Returns
    -------
    tuple[float, float]
        (minimum, maximum)
    """
    kind = PropertyKind(kind)
    check_pressure(pressure, 'valid_range_for')
    if kind == PropertyKind.TEMPERATURE:
        return TEMPERATURE_MIN, TEMPERATURE_MAX
    low = properties_from_pressure_temperature(pressure, TEMPERATURE_MIN)
    high = properties_from_pressure_temperature(pressure, TEMPERATURE_MAX)
    return getattr(low, kind.value), getattr(high, kind.value)

def _check_quality(quality: float, caller: str):
    if not 0.0 <= quality <= 1.0:
        raise OutOfDomainError(f'{caller}: quality must be in [0, 1], got x={quality}')

def _region2_subregion(pressure: float, kind: PropertyKind, value: float) -> Region:
    if pressure <= PRESSURE_REGION2A_MAX:
        return Region.R2A
    if kind == PropertyKind.ENTHALPY:
        return Region.R2B if b2bc_pressure(value) > pressure else Region.R2C
    return Region.R2B if value >= ENTROPY_REGION2BC else Region.R2C

def _resolve(pressure: float, kind: PropertyKind, value: float, settings: SolverSettings) -> ThermodynamicState:
    """
    Shared branch logic of the pressure-enthalpy and pressure-entropy
    resolvers.

    Below the critical pressure a target between the saturated liquid and
    vapor values is a mixture.  Otherwise the target is compared with a
    lower limit (the saturated liquid, or above 16.5291643 MPa the region 2
    side of the B23 boundary).  Below it the state lies in region 1 or
    region 3; above it the state is superheated and lies in one of the
    region 2 sub-regions.
    """
    caller = f'properties_from_pressure_{kind.value.split("_")[-1]}'
    check_pressure(pressure, caller)
    low, high = valid_range_for(pressure, kind)
    if not low <= value <= high:
        raise OutOfDomainError(f'{caller}: {kind.value}={value} is outside [{low:.6f}, {high:.6f}] at P={pressure} MPa.')

    pair = None
    limit = None
    if saturation_pressure(TEMPERATURE_MIN) <= pressure < PRESSURE_CRIT:
        pair = saturation_by_pressure(pressure, settings)
        limit = getattr(pair.saturated_liquid, kind.value)
    if pressure > PRESSURE_Tp:
        limit = getattr(region2(pressure, b23_temperature(pressure)), kind.value)
    logger.debug(f'{caller}: P={pressure:.6f}, {kind.value}={value:.6f}, lower limit {limit}')

    if pair is not None:
        liquid = getattr(pair.saturated_liquid, kind.value)
        gas = getattr(pair.saturated_gas, kind.value)
        if liquid <= value <= gas:
            return pair.mixture(pair.quality_from(kind, value))

    if limit is not None and value < limit:
        if pressure <= PRESSURE_Tp or value < getattr(properties_from_pressure_temperature(pressure, TEMPERATURE_Tp, settings), kind.value):
            temperature = refine_temperature(Region.R1, kind, pressure, value)
            return region1(pressure, temperature)
        temperature, converged = refine_region3_temperature(pressure, kind, value, settings)
        state = solve_region3(pressure, temperature, settings)
        if not converged:
            state = replace(state, converged=False)
        return state

    subregion = _region2_subregion(pressure, kind, value)
    temperature = refine_temperature(subregion, kind, pressure, value)
    return replace(region2(pressure, temperature), region=subregion)
