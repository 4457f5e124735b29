# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Physical constants and validity limits of the IAPWS-IF97 formulation
"""

R = 0.461526
""" specific gas constant of water, kJ/(kg K) """

PRESSURE_MAX = 100.0
""" highest pressure covered by regions 1-3, MPa """
PRESSURE_Tp = 16.5291643
""" pressure where regions 1, 2, 3 and the saturation curve meet, MPa """
PRESSURE_CRIT = 22.064
""" critical pressure, MPa """

TEMPERATURE_MIN = 273.15
""" lowest temperature covered by the formulation, K """
TEMPERATURE_Tp = 623.15
""" temperature where regions 1, 2, 3 and the saturation curve meet, K """
TEMPERATURE_CRIT = 647.096
""" critical temperature, K """
TEMPERATURE_REGION3_MAX = 863.15
""" highest temperature at which region 3 exists, K """
TEMPERATURE_MAX = 1073.15
""" highest temperature covered by regions 1-3, K """

DENSITY_CRIT = 322.0
""" critical density, kg/m3 """

PRESSURE_REGION2A_MAX = 4.0
""" upper pressure of backward sub-region 2a, MPa """
ENTROPY_REGION2BC = 5.85
""" entropy separating backward sub-regions 2b and 2c, kJ/(kg K) """
