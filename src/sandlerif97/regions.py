# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Assignment of a (pressure, temperature) pair to an IF97 region
"""
import logging

from .constants import (PRESSURE_MAX, TEMPERATURE_MIN, TEMPERATURE_MAX,
                        TEMPERATURE_Tp, TEMPERATURE_REGION3_MAX)
from .equations import b23_pressure, saturation_pressure
from .errors import OutOfDomainError
from .state import Region

logger = logging.getLogger(__name__)

def check_pressure(pressure: float, caller: str = 'check_pressure'):
    """
    Raise OutOfDomainError unless 0 < pressure <= 100 MPa
    """
    if not 0 < pressure <= PRESSURE_MAX:
        raise OutOfDomainError(f'{caller}: P={pressure} MPa is outside (0, {PRESSURE_MAX}] MPa.')

def check_temperature(temperature: float, caller: str = 'check_temperature'):
    """
    Raise OutOfDomainError unless 273.15 K <= temperature <= 1073.15 K
    """
    if not TEMPERATURE_MIN <= temperature <= TEMPERATURE_MAX:
        raise OutOfDomainError(f'{caller}: T={temperature} K is outside [{TEMPERATURE_MIN}, {TEMPERATURE_MAX}] K.')

def boundary_pressure(temperature: float) -> float:
    """
    Pressure (MPa) separating region 2 from region 1 (saturation curve,
    below 623.15 K) or from region 3 (B23 curve, at and above 623.15 K)
    """
    if temperature >= TEMPERATURE_Tp:
        return b23_pressure(temperature)
    return saturation_pressure(temperature)

def select_region(pressure: float, temperature: float) -> Region:
    """
    Determine the IF97 region of a state.

    Parameters
    ----------
    pressure : float
        pressure in MPa
    temperature : float
        temperature in K

    Returns
    -------
    Region
        Region.R1, Region.R2 or Region.R3

    Raises
    ------
    OutOfDomainError
        if the pair lies outside regions 1-3
    """
    check_pressure(pressure, 'select_region')
    check_temperature(temperature, 'select_region')
    boundary = boundary_pressure(temperature)
    region = None
    if temperature <= TEMPERATURE_Tp:
        if boundary <= pressure:
            region = Region.R1
        if pressure <= boundary:
            region = Region.R2
    if TEMPERATURE_Tp <= temperature <= TEMPERATURE_REGION3_MAX:
        if pressure <= boundary:
            region = Region.R2
        else:
            region = Region.R3
    if temperature > TEMPERATURE_REGION3_MAX:
        region = Region.R2
    logger.debug(f'select_region: P={pressure:.6f}, T={temperature:.6f}, boundary P={boundary:.6f} -> region {region}')
    return region
