# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Region 3 at a given pressure and temperature.

The region-3 equation is explicit in density and temperature, so a state at
(pressure, temperature) is found by solving p(rho, T) = pressure for rho.
"""
from __future__ import annotations
import logging
from dataclasses import replace

from .config import SolverSettings, DEFAULT_SETTINGS
from .constants import TEMPERATURE_Tp
from .equations import region1, region2, region3_density, b23_temperature
from .errors import ConvergenceError
from .state import ThermodynamicState

logger = logging.getLogger(__name__)

def density_bracket(pressure: float) -> tuple[float, float]:
    """
    Densities (kg/m3) of the region 1/3 boundary (623.15 K) and of the
    region 2/3 boundary at the given pressure (MPa); every region-3 state
    at this pressure lies between them
    """
    return region1(pressure, TEMPERATURE_Tp).density, region2(pressure, b23_temperature(pressure)).density

def solve_region3(pressure: float, temperature: float, settings: SolverSettings = DEFAULT_SETTINGS) -> ThermodynamicState:
    """
    Region 3 properties at a pressure and temperature.

    A few bisection steps on density narrow the bracket from
    :func:`density_bracket`, then secant steps on (density, pressure) run
    until the pressure residual meets ``settings.pressure_tolerance``, the
    iteration cap is reached, or the two latest test pressures coincide.

    Parameters
    ----------
    pressure : float
        pressure in MPa
    temperature : float
        temperature in K
    settings : SolverSettings
        tolerances and iteration caps

    Returns
    -------
    ThermodynamicState
        state at the converged density, carrying the requested pressure;
        ``converged`` is False if the residual is above tolerance when the
        iterations stop
    """
    rho_a, rho_b = density_bracket(pressure)
    state = region3_density(rho_a, temperature)
    p_a = state.pressure
    p_b = region3_density(rho_b, temperature).pressure
    logger.debug(f'solve_region3: P={pressure:.6f}, T={temperature:.6f}, bracket rho [{rho_b:.6f}, {rho_a:.6f}]')

    for i in range(settings.bisection_steps):
        rho_new = (rho_a + rho_b) / 2
        state = region3_density(rho_new, temperature)
        if pressure > state.pressure:
            rho_b, p_b = rho_new, state.pressure
        else:
            rho_a, p_a = rho_new, state.pressure
        if settings.logiter: logger.debug(f'solve_region3: bisection {i}: rho {rho_new:.8f}, P {state.pressure:.8f}')

    i = 0
    while (abs(state.pressure - pressure) > settings.pressure_tolerance
           and i < settings.maxiter and p_a != p_b):
        i += 1
        slope = (rho_a - rho_b) / (p_a - p_b)
        rho_new = rho_a + (pressure - p_a) * slope
        state = region3_density(rho_new, temperature)
        rho_b, p_b = rho_a, p_a
        rho_a, p_a = rho_new, state.pressure
        if settings.logiter: logger.debug(f'solve_region3: secant {i}: rho {rho_new:.10f}, P {state.pressure:.12f}')

    residual = abs(state.pressure - pressure)
    if not residual <= settings.pressure_tolerance:
        message = f'solve_region3: Reached {i} iterations without convergence at P={pressure}, T={temperature}; residual {residual:.4e}'
        if settings.strict:
            raise ConvergenceError(message, estimate=state.density)
        logger.warning(message)
        return replace(state, pressure=pressure, converged=False)
    return replace(state, pressure=pressure)
