# Author: Cameron F. Abrams, <cfa22@drexel.edu>
import argparse as ap

from importlib.metadata import version

from sandlermisc import ureg
from sandlermisc.statereporter import StateReporter

from .errors import OutOfDomainError, ConvergenceError
from .saturation import saturation_by_pressure, saturation_by_temperature
from .state import PropertyKind, ThermodynamicState, SaturationPair
from .steam import (properties_from_pressure_temperature,
                    properties_from_pressure_enthalpy,
                    properties_from_pressure_entropy,
                    properties_from_pressure_quality,
                    valid_range_for)

banner = r"""
 __                 _ _
/ _\ __ _ _ __   __| | | ___ _ __
\ \ / _` | '_ \ / _` | |/ _ \ '__|
_\ \ (_| | | | | (_| | |  __/ |
\__/\__,_|_| |_|\__,_|_|\___|_|
          _  __ ___ _____
         (_)/ _/ _ \___  |
         | | || (_) | / /
         |_|_| \__, |/_/
                /_/           v""" + version("sandlerif97") + """

"""

pressure_units = {
    'mpa': 'MPa',
    'kpa': 'kPa',
    'bar': 'bar',
    'atm': 'atm',
    'psi': 'psi',
}
""" command-line pressure unit names -> pint unit strings """

temperature_units = {
    'K': 'kelvin',
    'C': 'degC',
    'F': 'degF',
}
""" command-line temperature unit names -> pint unit strings """

property_kinds = {
    'enthalpy': PropertyKind.ENTHALPY,
    'entropy': PropertyKind.ENTROPY,
    'temperature': PropertyKind.TEMPERATURE,
}

def to_base_unit(value: float, unit: str, base_unit: str) -> float:
    """
    Convert a value given in ``unit`` to a magnitude in ``base_unit``.

    Parameters
    ----------
    value : float
        the value to convert
    unit : str
        pint unit string of ``value``
    base_unit : str
        pint unit string of the result

    Returns
    -------
    float
        magnitude in ``base_unit``
    """
    return ureg.Quantity(value, unit).m_as(base_unit)

def pressure_in_MPa(value: float, pressure_unit: str) -> float:
    """
    Convert a command-line pressure to MPa
    """
    if pressure_unit not in pressure_units:
        raise ValueError(f"Unsupported pressure unit {pressure_unit}.")
    return to_base_unit(value, pressure_units[pressure_unit], 'MPa')

def temperature_in_K(value: float, temperature_unit: str) -> float:
    """
    Convert a command-line temperature to K
    """
    if temperature_unit not in temperature_units:
        raise ValueError(f"Unsupported temperature unit {temperature_unit}.")
    return to_base_unit(value, temperature_units[temperature_unit], 'kelvin')

def state_reporter(state: ThermodynamicState) -> StateReporter:
    """
    Build a report of a single-phase state or a saturated mixture.

    Parameters
    ----------
    state : ThermodynamicState
        the state to report

    Returns
    -------
    StateReporter
        populated reporter
    """
    result = StateReporter({})
    result.add_property('Region', str(state.region), fstring=None)
    result.add_property('Phase', str(state.phase), fstring=None)
    result.add_property('T', ureg.Quantity(state.temperature, 'K'), fstring="{:.2f}")
    result.add_property('P', ureg.Quantity(state.pressure, 'MPa'), fstring="{:.6g}")
    if state.quality is not None:
        result.add_property('x', state.quality, fstring="{:.4f}")
    result.add_property('v', ureg.Quantity(state.specific_volume, 'm**3/kg'), fstring="{:.6g}")
    result.add_property('rho', ureg.Quantity(state.density, 'kg/m**3'), fstring="{:.6g}")
    result.add_property('u', ureg.Quantity(state.internal_energy, 'kJ/kg'), fstring="{:.2f}")
    result.add_property('h', ureg.Quantity(state.specific_enthalpy, 'kJ/kg'), fstring="{:.2f}")
    result.add_property('s', ureg.Quantity(state.specific_entropy, 'kJ/(kg*K)'), fstring="{:.4f}")
    if not state.is_mixture:
        result.add_property('cp', ureg.Quantity(state.isobaric_heat_capacity, 'kJ/(kg*K)'), fstring="{:.4f}")
        result.add_property('cv', ureg.Quantity(state.isochoric_heat_capacity, 'kJ/(kg*K)'), fstring="{:.4f}")
        result.add_property('w', ureg.Quantity(state.speed_of_sound, 'm/s'), fstring="{:.2f}")
    if state.mass_flow is not None:
        result.add_property('mass flow', ureg.Quantity(state.mass_flow, 'kg/hr'), fstring="{:.4g}")
        result.add_property('energy flow', ureg.Quantity(state.energy_flow, 'kJ/hr'), fstring="{:.4g}")
        result.add_property('volume flow', ureg.Quantity(state.volume_flow, 'm**3/hr'), fstring="{:.4g}")
    if not state.converged:
        result.add_property('WARNING', 'solver did not converge', fstring=None)
    return result

def saturation_reporter(pair: SaturationPair) -> StateReporter:
    """
    Build a report of both members of a saturation pair
    """
    result = StateReporter({})
    result.add_property('Regions', pair.region, fstring=None)
    result.add_property('Tsat', ureg.Quantity(pair.temperature, 'K'), fstring="{:.2f}")
    result.add_property('Psat', ureg.Quantity(pair.pressure, 'MPa'), fstring="{:.6g}")
    for label, member in [('L', pair.saturated_liquid), ('V', pair.saturated_gas)]:
        result.add_property(f'v{label}', ureg.Quantity(member.specific_volume, 'm**3/kg'), fstring="{:.6g}")
        result.add_property(f'u{label}', ureg.Quantity(member.internal_energy, 'kJ/kg'), fstring="{:.2f}")
        result.add_property(f'h{label}', ureg.Quantity(member.specific_enthalpy, 'kJ/kg'), fstring="{:.2f}")
        result.add_property(f's{label}', ureg.Quantity(member.specific_entropy, 'kJ/(kg*K)'), fstring="{:.4f}")
    result.add_property('Hvap', ureg.Quantity(pair.saturated_gas.specific_enthalpy - pair.saturated_liquid.specific_enthalpy, 'kJ/kg'), fstring="{:.2f}")
    return result

def state(args):
    """
    Calculate and report the state of water at a pressure and one of
    temperature, enthalpy, entropy or quality.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.
    """
    P = pressure_in_MPa(args.P, args.pressure_unit)
    if args.T is not None:
        result = properties_from_pressure_temperature(P, temperature_in_K(args.T, args.temperature_unit))
    elif args.h is not None:
        result = properties_from_pressure_enthalpy(P, args.h)
    elif args.s is not None:
        result = properties_from_pressure_entropy(P, args.s)
    else:
        result = properties_from_pressure_quality(P, args.x)
    if args.m is not None:
        result = result.with_mass_flow(args.m)
    print(state_reporter(result).report())

def sat(args):
    """
    Calculate and report saturated liquid and vapor at a pressure or a
    temperature.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.
    """
    if args.P is not None:
        pair = saturation_by_pressure(pressure_in_MPa(args.P, args.pressure_unit))
    else:
        pair = saturation_by_temperature(temperature_in_K(args.T, args.temperature_unit))
    print(saturation_reporter(pair).report())

def prange(args):
    """
    Report the admissible range of a property at a pressure.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.
    """
    P = pressure_in_MPa(args.P, args.pressure_unit)
    kind = property_kinds[args.property]
    units = {PropertyKind.ENTHALPY: 'kJ/kg', PropertyKind.ENTROPY: 'kJ/(kg*K)', PropertyKind.TEMPERATURE: 'K'}
    low, high = valid_range_for(P, kind)
    result = StateReporter({})
    result.add_property('P', ureg.Quantity(P, 'MPa'), fstring="{:.6g}")
    result.add_property(f'{args.property} min', ureg.Quantity(low, units[kind]), fstring="{:.4f}")
    result.add_property(f'{args.property} max', ureg.Quantity(high, units[kind]), fstring="{:.4f}")
    print(result.report())

def cli():
    subcommands = {
        'state': dict(
            func = state,
            help = 'compute the state of water from pressure and one of T, h, s or x'
        ),
        'sat': dict(
            func = sat,
            help = 'compute saturated liquid and vapor at a pressure or temperature'
        ),
        'range': dict(
            func = prange,
            help = 'show the admissible range of enthalpy, entropy or temperature at a pressure'
        ),
    }
    parser = ap.ArgumentParser(
        prog='sandlerif97',
        description="Sandlerif97: IAPWS-IF97 properties of water and steam, a companion to Chemical, Biochemical, and Engineering Thermodynamics (5th edition) by Stan Sandler",
        epilog="(c) 2025, Cameron F. Abrams <cfa22@drexel.edu>"
    )
    parser.add_argument(
        '-b',
        '--banner',
        default=False,
        action=ap.BooleanOptionalAction,
        help='toggle banner message'
    )
    parser.add_argument(
        '-v',
        '--version',
        action='version',
        version=f'sandlerif97 version {version("sandlerif97")}',
        help='show program version and exit'
    )
    subparsers = parser.add_subparsers(
        title="subcommands",
        dest="command",
        metavar="<command>",
        required=True,
    )
    command_parsers={}
    for k, specs in subcommands.items():
        command_parsers[k] = subparsers.add_parser(
            k,
            help=specs['help'],
            add_help=False,
            formatter_class=ap.RawDescriptionHelpFormatter
        )
        command_parsers[k].set_defaults(func=specs['func'])
        command_parsers[k].add_argument(
            '--help',
            action='help',
            help=specs['help']
        )

    options = [
        ('pu', 'pressure_unit', 'pressure unit', str, 'mpa', list(pressure_units.keys())),
        ('tu', 'temperature_unit', 'temperature unit', str, 'K', list(temperature_units.keys())),
    ]
    for short, long, desc, typ, default, choices in options:
        for k in subcommands:
            command_parsers[k].add_argument(
                f'-{short}',
                f'--{long}',
                dest=long,
                type=typ,
                default=default,
                choices=choices,
                help=desc
            )

    state_args = [
        ('T', 'temperature', 'temperature', float, False),
        ('h', 'enthalpy', 'specific enthalpy in kJ/kg', float, False),
        ('s', 'entropy', 'specific entropy in kJ/kg-K', float, False),
        ('x', 'quality', 'vapor quality (0 to 1)', float, False),
    ]
    command_parsers['state'].add_argument(
        '-P',
        '--pressure',
        dest='P',
        type=float,
        required=True,
        help='pressure'
    )
    for prop, long_arg, explanation, arg_type, required in state_args:
        command_parsers['state'].add_argument(
            f'-{prop}',
            f'--{long_arg}',
            dest=prop,
            type=arg_type,
            required=required,
            help=explanation
        )
    command_parsers['state'].add_argument(
        '-m',
        '--mass-flow',
        dest='m',
        type=float,
        default=None,
        help='mass flow in kg/hr; adds energy and volume flows to the report'
    )

    for prop, long_arg, explanation in [('P', 'pressure', 'saturation pressure'), ('T', 'temperature', 'saturation temperature')]:
        command_parsers['sat'].add_argument(
            f'-{prop}',
            f'--{long_arg}',
            dest=prop,
            type=float,
            default=None,
            help=explanation
        )

    command_parsers['range'].add_argument(
        '-P',
        '--pressure',
        dest='P',
        type=float,
        required=True,
        help='pressure'
    )
    command_parsers['range'].add_argument(
        '--property',
        dest='property',
        type=str,
        default='enthalpy',
        choices=list(property_kinds.keys()),
        help='property whose range is reported'
    )

    args = parser.parse_args()

    if args.func == state:
        nprops = sum(getattr(args, prop) is not None for prop, _, _, _, _ in state_args)
        if nprops != 1:
            parser.error('Exactly one of T, h, s, and x must be specified with P for "state" subcommand')
    elif args.func == sat:
        if (args.P is None) == (args.T is None):
            parser.error('Exactly one of P and T must be specified for "sat" subcommand')

    if args.banner:
        print(banner)
    try:
        args.func(args)
    except (OutOfDomainError, ConvergenceError) as e:
        parser.exit(1, f'sandlerif97: {e}\n')
    if args.banner:
        print('Thanks for using sandlerif97!')
