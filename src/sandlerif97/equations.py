# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Forward and backward equations of IAPWS-IF97 for regions 1 through 4 and the
boundary curves between them.  Every function here is a closed-form
evaluation; the iterative solvers built on top of them live in
:mod:`sandlerif97.region3` and :mod:`sandlerif97.backward`.
"""
from __future__ import annotations
import logging
import numpy as np

from . import coefficients as c
from .constants import R, DENSITY_CRIT, TEMPERATURE_CRIT, TEMPERATURE_MIN, PRESSURE_CRIT
from .errors import OutOfDomainError
from .state import ThermodynamicState, Phase, Region

logger = logging.getLogger(__name__)

# reducing pressures (MPa) and temperatures (K) of the Gibbs formulations
_REGION1_PSTAR, _REGION1_TSTAR = 16.53, 1386.0
_REGION2_PSTAR, _REGION2_TSTAR = 1.0, 540.0

def _gibbs_region1(pi: float, tau: float):
    """
    Dimensionless Gibbs free energy of region 1 and its derivatives
    (gamma, gamma_pi, gamma_pipi, gamma_tau, gamma_tautau, gamma_pitau)
    """
    I, J, n = c.REGION1_I, c.REGION1_J, c.REGION1_N
    a = 7.1 - pi
    b = tau - 1.222
    aI, bJ = a**I, b**J
    aI1, bJ1 = a**(I - 1), b**(J - 1)
    g = np.sum(n * aI * bJ)
    g_p = np.sum(-n * I * aI1 * bJ)
    g_pp = np.sum(n * I * (I - 1) * a**(I - 2) * bJ)
    g_t = np.sum(n * aI * J * bJ1)
    g_tt = np.sum(n * aI * J * (J - 1) * b**(J - 2))
    g_pt = np.sum(-n * I * aI1 * J * bJ1)
    return g, g_p, g_pp, g_t, g_tt, g_pt

def region1(pressure: float, temperature: float) -> ThermodynamicState:
    """
    Region 1 (compressed liquid) properties from pressure and temperature.

    Parameters
    ----------
    pressure : float
        pressure in MPa
    temperature : float
        temperature in K

    Returns
    -------
    ThermodynamicState
        liquid state tagged region 1
    """
    pi = pressure / _REGION1_PSTAR
    tau = _REGION1_TSTAR / temperature
    g, g_p, g_pp, g_t, g_tt, g_pt = _gibbs_region1(pi, tau)
    RT = R * temperature
    w2 = RT * 1000 * g_p**2 / ((g_p - tau * g_pt)**2 / (tau**2 * g_tt) - g_pp)
    return ThermodynamicState(
        pressure=pressure,
        temperature=temperature,
        specific_volume=pi * g_p * RT / pressure / 1000,
        specific_enthalpy=tau * g_t * RT,
        specific_entropy=(tau * g_t - g) * R,
        internal_energy=(tau * g_t - pi * g_p) * RT,
        isobaric_heat_capacity=-tau**2 * g_tt * R,
        isochoric_heat_capacity=(-tau**2 * g_tt + (g_p - tau * g_pt)**2 / g_pp) * R,
        speed_of_sound=float(np.sqrt(w2)),
        phase=Phase.LIQUID,
        region=Region.R1,
    )

def _gibbs_region2(pi: float, tau: float):
    """
    Ideal-gas plus residual parts of the region-2 Gibbs free energy;
    returns (gamma, gamma_tau, gamma_tautau) of the sum and
    (gammar_pi, gammar_pipi, gammar_pitau) of the residual part
    """
    J0, n0 = c.REGION2_J0, c.REGION2_N0
    g0 = np.log(pi) + np.sum(n0 * tau**J0)
    g0_t = np.sum(n0 * J0 * tau**(J0 - 1))
    g0_tt = np.sum(n0 * J0 * (J0 - 1) * tau**(J0 - 2))

    I, J, n = c.REGION2_I, c.REGION2_J, c.REGION2_N
    b = tau - 0.5
    pI, bJ = pi**I, b**J
    pI1, bJ1 = pi**(I - 1), b**(J - 1)
    gr = np.sum(n * pI * bJ)
    gr_p = np.sum(n * I * pI1 * bJ)
    gr_pp = np.sum(n * I * (I - 1) * pi**(I - 2) * bJ)
    gr_t = np.sum(n * pI * J * bJ1)
    gr_tt = np.sum(n * pI * J * (J - 1) * b**(J - 2))
    gr_pt = np.sum(n * I * pI1 * J * bJ1)
    return g0 + gr, g0_t + gr_t, g0_tt + gr_tt, gr_p, gr_pp, gr_pt

def region2(pressure: float, temperature: float) -> ThermodynamicState:
    """
    Region 2 (superheated vapor) properties from pressure and temperature.

    Parameters
    ----------
    pressure : float
        pressure in MPa
    temperature : float
        temperature in K

    Returns
    -------
    ThermodynamicState
        gas state tagged region 2
    """
    pi = pressure / _REGION2_PSTAR
    tau = _REGION2_TSTAR / temperature
    g, g_t, g_tt, gr_p, gr_pp, gr_pt = _gibbs_region2(pi, tau)
    RT = R * temperature
    # ideal-gas part contributes 1/pi to gamma_pi
    g_p = 1.0 / pi + gr_p
    x = 1 + pi * gr_p - tau * pi * gr_pt
    w2 = RT * 1000 * (1 + 2 * pi * gr_p + pi**2 * gr_p**2) / ((1 - pi**2 * gr_pp) + x**2 / (tau**2 * g_tt))
    return ThermodynamicState(
        pressure=pressure,
        temperature=temperature,
        specific_volume=pi * g_p * RT / pressure / 1000,
        specific_enthalpy=tau * g_t * RT,
        specific_entropy=(tau * g_t - g) * R,
        internal_energy=(tau * g_t - pi * g_p) * RT,
        isobaric_heat_capacity=-tau**2 * g_tt * R,
        isochoric_heat_capacity=(-tau**2 * g_tt - x**2 / (1 - pi**2 * gr_pp)) * R,
        speed_of_sound=float(np.sqrt(w2)),
        phase=Phase.GAS,
        region=Region.R2,
    )

def _helmholtz_region3(delta: float, tau: float):
    """
    Dimensionless Helmholtz free energy of region 3 and its derivatives
    (phi, phi_delta, phi_deltadelta, phi_tau, phi_tautau, phi_deltatau)
    """
    I, J, n = c.REGION3_I, c.REGION3_J, c.REGION3_N
    n1 = c.REGION3_N1
    dI, tJ = delta**I, tau**J
    dI1, tJ1 = delta**(I - 1), tau**(J - 1)
    f = n1 * np.log(delta) + np.sum(n * dI * tJ)
    f_d = n1 / delta + np.sum(n * I * dI1 * tJ)
    f_dd = -n1 / delta**2 + np.sum(n * I * (I - 1) * delta**(I - 2) * tJ)
    f_t = np.sum(n * dI * J * tJ1)
    f_tt = np.sum(n * dI * J * (J - 1) * tau**(J - 2))
    f_dt = np.sum(n * I * dI1 * J * tJ1)
    return f, f_d, f_dd, f_t, f_tt, f_dt

def region3_density(density: float, temperature: float) -> ThermodynamicState:
    """
    Region 3 properties from density and temperature, the natural
    variables of the region-3 Helmholtz formulation.

    Parameters
    ----------
    density : float
        density in kg/m3
    temperature : float
        temperature in K

    Returns
    -------
    ThermodynamicState
        state tagged region 3 whose pressure is computed from (density, temperature)
    """
    delta = density / DENSITY_CRIT
    tau = TEMPERATURE_CRIT / temperature
    f, f_d, f_dd, f_t, f_tt, f_dt = _helmholtz_region3(delta, tau)
    RT = R * temperature
    x = delta * f_d - delta * tau * f_dt
    y = 2 * delta * f_d + delta**2 * f_dd
    w2 = RT * 1000 * (y - x**2 / (tau**2 * f_tt))
    return ThermodynamicState(
        pressure=delta * f_d * density * RT / 1000,
        temperature=temperature,
        specific_volume=1.0 / density,
        specific_enthalpy=(tau * f_t + delta * f_d) * RT,
        specific_entropy=(tau * f_t - f) * R,
        internal_energy=tau * f_t * RT,
        isobaric_heat_capacity=(-tau**2 * f_tt + x**2 / y) * R,
        isochoric_heat_capacity=-tau**2 * f_tt * R,
        speed_of_sound=float(np.sqrt(w2)),
        phase=Phase.LIQUID,
        region=Region.R3,
    )

def saturation_pressure(temperature: float) -> float:
    """
    Region 4: saturation pressure (MPa) at a temperature (K) between
    273.15 K and the critical temperature
    """
    if not TEMPERATURE_MIN <= temperature <= TEMPERATURE_CRIT:
        raise OutOfDomainError(f'saturation_pressure: T={temperature} K is outside [{TEMPERATURE_MIN}, {TEMPERATURE_CRIT}] K.')
    n = c.REGION4_N
    theta = temperature + n[8] / (temperature - n[9])
    A = theta**2 + n[0] * theta + n[1]
    B = n[2] * theta**2 + n[3] * theta + n[4]
    C = n[5] * theta**2 + n[6] * theta + n[7]
    return (2 * C / (-B + np.sqrt(B**2 - 4 * A * C)))**4

def saturation_temperature(pressure: float) -> float:
    """
    Region 4 inverse: saturation temperature (K) at a pressure (MPa) between
    the saturation pressure at 273.15 K and the critical pressure
    """
    if not saturation_pressure(TEMPERATURE_MIN) <= pressure <= PRESSURE_CRIT:
        raise OutOfDomainError(f'saturation_temperature: P={pressure} MPa is not on the saturation curve.')
    n = c.REGION4_N
    beta = pressure**0.25
    E = beta**2 + n[2] * beta + n[5]
    F = n[0] * beta**2 + n[3] * beta + n[6]
    G = n[1] * beta**2 + n[4] * beta + n[7]
    D = 2 * G / (-F - np.sqrt(F**2 - 4 * E * G))
    return (n[9] + D - np.sqrt((n[9] + D)**2 - 4 * (n[8] + n[9] * D))) / 2

def b23_pressure(temperature: float) -> float:
    """
    Pressure (MPa) on the region 2/3 boundary at a temperature (K)
    """
    n = c.B23_N
    return n[0] + n[1] * temperature + n[2] * temperature**2

def b23_temperature(pressure: float) -> float:
    """
    Temperature (K) on the region 2/3 boundary at a pressure (MPa)
    """
    n = c.B23_N
    return n[3] + np.sqrt((pressure - n[4]) / n[2])

def b2bc_pressure(specific_enthalpy: float) -> float:
    """
    Pressure (MPa) on the line separating backward sub-regions 2b and 2c
    at a specific enthalpy (kJ/kg)
    """
    n = c.B2BC_N
    return n[0] + n[1] * specific_enthalpy + n[2] * specific_enthalpy**2

def b2bc_enthalpy(pressure: float) -> float:
    """
    Specific enthalpy (kJ/kg) on the 2b/2c line at a pressure (MPa)
    """
    n = c.B2BC_N
    return n[3] + np.sqrt((pressure - n[4]) / n[2])

def _series(I, J, n, x, y) -> float:
    return float(np.sum(n * x**I * y**J))

def backward_ph_region1(pressure: float, specific_enthalpy: float) -> float:
    """ T(p, h) in region 1, K """
    return _series(c.BACKWARD_PH1_I, c.BACKWARD_PH1_J, c.BACKWARD_PH1_N,
                   pressure, specific_enthalpy / 2500 + 1)

def backward_ps_region1(pressure: float, specific_entropy: float) -> float:
    """ T(p, s) in region 1, K """
    return _series(c.BACKWARD_PS1_I, c.BACKWARD_PS1_J, c.BACKWARD_PS1_N,
                   pressure, specific_entropy + 2)

def backward_ph_region2a(pressure: float, specific_enthalpy: float) -> float:
    """ T(p, h) in sub-region 2a, K """
    return _series(c.BACKWARD_PH2A_I, c.BACKWARD_PH2A_J, c.BACKWARD_PH2A_N,
                   pressure, specific_enthalpy / 2000 - 2.1)

def backward_ph_region2b(pressure: float, specific_enthalpy: float) -> float:
    """ T(p, h) in sub-region 2b, K """
    return _series(c.BACKWARD_PH2B_I, c.BACKWARD_PH2B_J, c.BACKWARD_PH2B_N,
                   pressure - 2, specific_enthalpy / 2000 - 2.6)

def backward_ph_region2c(pressure: float, specific_enthalpy: float) -> float:
    """ T(p, h) in sub-region 2c, K """
    return _series(c.BACKWARD_PH2C_I, c.BACKWARD_PH2C_J, c.BACKWARD_PH2C_N,
                   pressure + 25, specific_enthalpy / 2000 - 1.8)

def backward_ps_region2a(pressure: float, specific_entropy: float) -> float:
    """ T(p, s) in sub-region 2a, K """
    return _series(c.BACKWARD_PS2A_I, c.BACKWARD_PS2A_J, c.BACKWARD_PS2A_N,
                   pressure, specific_entropy / 2 - 2)

def backward_ps_region2b(pressure: float, specific_entropy: float) -> float:
    """ T(p, s) in sub-region 2b, K """
    return _series(c.BACKWARD_PS2B_I, c.BACKWARD_PS2B_J, c.BACKWARD_PS2B_N,
                   pressure, 10 - specific_entropy / 0.7853)

def backward_ps_region2c(pressure: float, specific_entropy: float) -> float:
    """ T(p, s) in sub-region 2c, K """
    return _series(c.BACKWARD_PS2C_I, c.BACKWARD_PS2C_J, c.BACKWARD_PS2C_N,
                   pressure, 2 - specific_entropy / 2.9251)
