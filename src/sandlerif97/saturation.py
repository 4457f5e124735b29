# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Saturated liquid and vapor along the IF97 saturation curve (region 4)
"""
from __future__ import annotations
import logging
from dataclasses import replace

from .config import SolverSettings, DEFAULT_SETTINGS
from .constants import TEMPERATURE_Tp
from .equations import region1, region2, saturation_pressure, saturation_temperature
from .region3 import solve_region3
from .state import Phase, SaturationPair

logger = logging.getLogger(__name__)

def saturation_by_pressure(pressure: float, settings: SolverSettings = DEFAULT_SETTINGS) -> SaturationPair:
    """
    Saturated liquid and saturated vapor at a pressure.

    The vapor always comes from region 2.  The liquid comes from region 1
    up to 623.15 K and from region 3 between 623.15 K and the critical
    point.

    Parameters
    ----------
    pressure : float
        saturation pressure in MPa, between the triple-point value and
        22.064 MPa
    settings : SolverSettings
        passed to the region-3 solver for the liquid above 623.15 K

    Returns
    -------
    SaturationPair
        liquid (quality 0) and vapor (quality 1) at the common pressure
        and temperature
    """
    temperature = saturation_temperature(pressure)
    return _pair(pressure, temperature, settings)

def saturation_by_temperature(temperature: float, settings: SolverSettings = DEFAULT_SETTINGS) -> SaturationPair:
    """
    Saturated liquid and saturated vapor at a temperature between
    273.15 K and the critical temperature; see :func:`saturation_by_pressure`
    """
    pressure = saturation_pressure(temperature)
    return _pair(pressure, temperature, settings)

def _pair(pressure: float, temperature: float, settings: SolverSettings) -> SaturationPair:
    gas = region2(pressure, temperature)
    if temperature <= TEMPERATURE_Tp:
        liquid = region1(pressure, temperature)
    else:
        liquid = solve_region3(pressure, temperature, settings)
    liquid = replace(liquid, pressure=pressure, temperature=temperature, phase=Phase.LIQUID, quality=0.0)
    gas = replace(gas, pressure=pressure, temperature=temperature, phase=Phase.GAS, quality=1.0)
    pair = SaturationPair(pressure=pressure, temperature=temperature,
                          saturated_liquid=liquid, saturated_gas=gas)
    logger.debug(f'saturation: P={pressure:.8f}, T={temperature:.8f}, regions {pair.region}')
    return pair
