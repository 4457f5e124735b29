from .config import SolverSettings, DEFAULT_SETTINGS
from .errors import OutOfDomainError, ConvergenceError
from .state import Phase, Region, PropertyKind, ThermodynamicState, SaturationPair
from .regions import select_region
from .saturation import saturation_by_pressure, saturation_by_temperature
from .steam import (properties_from_pressure_temperature,
                    properties_from_pressure_enthalpy,
                    properties_from_pressure_entropy,
                    properties_from_pressure_quality,
                    properties_from_temperature_quality,
                    valid_range_for)

__all__ = [
    "SolverSettings",
    "DEFAULT_SETTINGS",
    "OutOfDomainError",
    "ConvergenceError",
    "Phase",
    "Region",
    "PropertyKind",
    "ThermodynamicState",
    "SaturationPair",
    "select_region",
    "saturation_by_pressure",
    "saturation_by_temperature",
    "properties_from_pressure_temperature",
    "properties_from_pressure_enthalpy",
    "properties_from_pressure_entropy",
    "properties_from_pressure_quality",
    "properties_from_temperature_quality",
    "valid_range_for",
]
