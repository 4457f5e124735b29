# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Refinement of the IF97 backward equations T(p, h) and T(p, s).

The backward correlations reproduce the forward equations only to within
a few millikelvin.  The routines here use them as starting estimates and
correct them with secant steps on the forward equations.
"""
from __future__ import annotations
import logging

from . import equations as eq
from .config import SolverSettings, DEFAULT_SETTINGS
from .constants import TEMPERATURE_Tp
from .errors import ConvergenceError
from .region3 import solve_region3
from .state import Region, PropertyKind

logger = logging.getLogger(__name__)

_BACKWARD = {
    (Region.R1, PropertyKind.ENTHALPY): (eq.backward_ph_region1, eq.region1),
    (Region.R1, PropertyKind.ENTROPY): (eq.backward_ps_region1, eq.region1),
    (Region.R2A, PropertyKind.ENTHALPY): (eq.backward_ph_region2a, eq.region2),
    (Region.R2A, PropertyKind.ENTROPY): (eq.backward_ps_region2a, eq.region2),
    (Region.R2B, PropertyKind.ENTHALPY): (eq.backward_ph_region2b, eq.region2),
    (Region.R2B, PropertyKind.ENTROPY): (eq.backward_ps_region2b, eq.region2),
    (Region.R2C, PropertyKind.ENTHALPY): (eq.backward_ph_region2c, eq.region2),
    (Region.R2C, PropertyKind.ENTROPY): (eq.backward_ps_region2c, eq.region2),
}
""" (region, property) -> (backward correlation, forward equation) """

def linear_test_point(x: float, point1: tuple[float, float], point2: tuple[float, float]) -> float:
    """
    Evaluate at ``x`` the straight line through two (x, y) points.  If the
    points share the same x the line is taken as flat through ``point1``.
    """
    slope = 0.0
    if point1[0] != point2[0]:
        slope = (point1[1] - point2[1]) / (point1[0] - point2[0])
    return x * slope + point1[1] - slope * point1[0]

def generate_point(forward, kind: PropertyKind, pressure: float, temperature: float) -> tuple[float, float]:
    """
    (property value, temperature) pair from a forward evaluation
    """
    return getattr(forward(pressure, temperature), kind.value), temperature

def refine_temperature(region: Region, kind: PropertyKind, pressure: float, value: float) -> float:
    """
    Temperature at which the forward equation of ``region`` returns
    ``value`` of ``kind`` at ``pressure``.

    The backward correlation supplies a first point; a second point comes
    from feeding the forward value at that estimate back into the
    correlation.  Two secant passes through these points follow.

    Parameters
    ----------
    region : Region
        one of Region.R1, Region.R2A, Region.R2B, Region.R2C
    kind : PropertyKind
        PropertyKind.ENTHALPY or PropertyKind.ENTROPY
    pressure : float
        pressure in MPa
    value : float
        target specific enthalpy (kJ/kg) or entropy (kJ/kg-K)

    Returns
    -------
    float
        temperature in K
    """
    try:
        backward, forward = _BACKWARD[(region, kind)]
    except KeyError:
        raise ValueError(f'refine_temperature: no backward equation for region {region} and {kind.value}')
    pointA = generate_point(forward, kind, pressure, backward(pressure, value))
    pointB = generate_point(forward, kind, pressure, backward(pressure, pointA[0]))
    temperature = linear_test_point(value, pointA, pointB)
    pointA = generate_point(forward, kind, pressure, temperature)
    temperature = linear_test_point(value, pointA, pointB)
    logger.debug(f'refine_temperature: region {region}, P={pressure:.6f}, {kind.value}={value:.6f} -> T={temperature:.8f}')
    return temperature

def refine_region3_temperature(pressure: float, kind: PropertyKind, value: float,
                               settings: SolverSettings = DEFAULT_SETTINGS) -> tuple[float, bool]:
    """
    Temperature of the region-3 state at ``pressure`` whose ``kind``
    property equals ``value``.  Region 3 has no backward correlation, so the
    secant starts from the region 1/3 boundary (623.15 K) and the region
    2/3 boundary and proceeds on region-3 evaluations.

    Parameters
    ----------
    pressure : float
        pressure in MPa
    kind : PropertyKind
        PropertyKind.ENTHALPY or PropertyKind.ENTROPY
    value : float
        target specific enthalpy (kJ/kg) or entropy (kJ/kg-K)
    settings : SolverSettings
        tolerance and iteration cap on the temperature step

    Returns
    -------
    tuple[float, bool]
        temperature in K and whether the step tolerance was met
    """
    def region3(p, T):
        return solve_region3(p, T, settings)
    temperature = TEMPERATURE_Tp
    pointA = generate_point(eq.region1, kind, pressure, temperature)
    pointB = generate_point(eq.region2, kind, pressure, eq.b23_temperature(pressure))
    temperatureB = linear_test_point(value, pointA, pointB)
    i = 0
    while abs(temperature - temperatureB) > settings.temperature_tolerance and i < settings.region3_maxiter:
        i += 1
        pointA = pointB
        pointB = generate_point(region3, kind, pressure, temperatureB)
        temperature = temperatureB
        temperatureB = linear_test_point(value, pointA, pointB)
        if settings.logiter: logger.debug(f'refine_region3_temperature: Iter {i}: T {temperatureB:.10f}')
    converged = abs(temperature - temperatureB) <= settings.temperature_tolerance
    if not converged:
        message = f'refine_region3_temperature: Reached {i} iterations without convergence at P={pressure}, {kind.value}={value}'
        if settings.strict:
            raise ConvergenceError(message, estimate=temperatureB)
        logger.warning(message)
    return temperatureB, converged
