# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Immutable containers for computed water/steam states
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum

from sandlermisc import ureg

from .errors import OutOfDomainError

logger = logging.getLogger(__name__)

class Phase(str, Enum):
    LIQUID = 'Liquid'
    GAS = 'Gas'
    SATURATED = 'Saturated'

    def __str__(self):
        return self.value

class Region(str, Enum):
    """
    IF97 regions and the backward sub-regions of region 2
    """
    R1 = '1'
    R2 = '2'
    R2A = '2a'
    R2B = '2b'
    R2C = '2c'
    R3 = '3'

    def __str__(self):
        return self.value

class PropertyKind(str, Enum):
    """
    Second independent variable of an inverse or range query; the value
    is the name of the matching ThermodynamicState field
    """
    ENTHALPY = 'specific_enthalpy'
    ENTROPY = 'specific_entropy'
    TEMPERATURE = 'temperature'

_default_unit_map = {
    'pressure': 'MPa',
    'temperature': 'K',
    'specific_enthalpy': 'kJ/kg',
    'specific_entropy': 'kJ/(kg*K)',
    'specific_volume': 'm**3/kg',
    'density': 'kg/m**3',
    'internal_energy': 'kJ/kg',
    'isobaric_heat_capacity': 'kJ/(kg*K)',
    'isochoric_heat_capacity': 'kJ/(kg*K)',
    'speed_of_sound': 'm/s',
    'quality': 'dimensionless',
    'mass_flow': 'kg/hr',
    'energy_flow': 'kJ/hr',
    'volume_flow': 'm**3/hr',
}

@dataclass(frozen=True)
class ThermodynamicState:
    """
    A fully resolved state of water.  Single-phase states carry the region
    they were computed in; saturated mixtures carry both saturated members
    and a quality.
    """
    pressure: float
    """ pressure, MPa """
    temperature: float
    """ temperature, K """
    specific_enthalpy: float
    """ kJ/kg """
    specific_entropy: float
    """ kJ/(kg K) """
    specific_volume: float
    """ m3/kg """
    internal_energy: float = None
    """ kJ/kg """
    isobaric_heat_capacity: float = None
    """ cp, kJ/(kg K); undefined for mixtures """
    isochoric_heat_capacity: float = None
    """ cv, kJ/(kg K); undefined for mixtures """
    speed_of_sound: float = None
    """ m/s; undefined for mixtures """
    phase: Phase = Phase.LIQUID
    region: str = None
    """ IF97 region tag, or '<liquid>&<gas>' for saturated mixtures """
    quality: float = None
    """ vapor mass fraction; only defined when phase is Saturated """
    saturated_liquid: ThermodynamicState = None
    saturated_gas: ThermodynamicState = None
    converged: bool = True
    """ False if an iterative solver hit its cap without meeting tolerance """
    mass_flow: float = None
    """ kg/hr """
    energy_flow: float = None
    """ kJ/hr """
    volume_flow: float = None
    """ m3/hr """
    density: float = field(init=False)
    """ kg/m3, reciprocal of the specific volume """

    def __post_init__(self):
        density = 1.0 / self.specific_volume if self.specific_volume else math.nan
        object.__setattr__(self, 'density', density)
        if (self.saturated_liquid is None) != (self.saturated_gas is None):
            raise ValueError('A saturated mixture needs both a liquid and a gas member.')

    @property
    def is_mixture(self) -> bool:
        return self.saturated_liquid is not None

    def with_mass_flow(self, mass_flow: float) -> ThermodynamicState:
        """
        Return a copy of this state carrying a mass flow and the energy and
        volume flows derived from it.

        Parameters
        ----------
        mass_flow : float
            mass flow in kg/hr

        Returns
        -------
        ThermodynamicState
            new state with mass_flow, energy_flow (kJ/hr) and volume_flow (m3/hr)
        """
        return replace(self,
                       mass_flow=mass_flow,
                       energy_flow=self.specific_enthalpy * mass_flow,
                       volume_flow=self.specific_volume * mass_flow)

    def as_quantities(self) -> dict:
        """
        Return every populated scalar field as a pint Quantity in its
        default unit
        """
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _default_unit_map and value is not None:
                result[f.name] = ureg.Quantity(value, _default_unit_map[f.name])
        return result

@dataclass(frozen=True)
class SaturationPair:
    """
    Saturated liquid and saturated gas at a common pressure and temperature
    """
    pressure: float
    temperature: float
    saturated_liquid: ThermodynamicState
    saturated_gas: ThermodynamicState

    @property
    def region(self) -> str:
        return f'{self.saturated_liquid.region}&{self.saturated_gas.region}'

    @property
    def converged(self) -> bool:
        return self.saturated_liquid.converged and self.saturated_gas.converged

    def quality_from(self, kind: PropertyKind, value: float) -> float:
        """
        Lever-rule quality of a mixture whose ``kind`` property equals ``value``
        """
        liquid = getattr(self.saturated_liquid, kind.value)
        gas = getattr(self.saturated_gas, kind.value)
        if gas == liquid:
            raise OutOfDomainError(f'quality_from: saturated {kind.value} values coincide at P={self.pressure} MPa.')
        return (value - liquid) / (gas - liquid)

    def mixture(self, quality: float) -> ThermodynamicState:
        """
        Build the two-phase state of the given quality by weighting the
        saturated members

        Parameters
        ----------
        quality : float
            vapor mass fraction, 0 to 1

        Returns
        -------
        ThermodynamicState
            state with phase Saturated
        """
        if not 0.0 <= quality <= 1.0:
            raise OutOfDomainError(f'mixture: quality must be in [0, 1], got x={quality}')
        liquid, gas = self.saturated_liquid, self.saturated_gas
        def weigh(name):
            return getattr(gas, name) * quality + getattr(liquid, name) * (1 - quality)
        logger.debug(f'SaturationPair.mixture: P={self.pressure:.6f}, T={self.temperature:.6f}, x={quality:.6f}')
        return ThermodynamicState(
            pressure=self.pressure,
            temperature=self.temperature,
            specific_enthalpy=weigh('specific_enthalpy'),
            specific_entropy=weigh('specific_entropy'),
            specific_volume=weigh('specific_volume'),
            internal_energy=weigh('internal_energy'),
            phase=Phase.SATURATED,
            region=self.region,
            quality=quality,
            saturated_liquid=liquid,
            saturated_gas=gas,
            converged=self.converged,
        )
