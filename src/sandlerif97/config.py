# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Tolerances and iteration caps of the iterative IF97 solvers
"""
from dataclasses import dataclass

@dataclass(frozen=True)
class SolverSettings:
    """
    Settings shared by the region-3 density solver and the backward
    temperature refiners.  Instances are immutable; use
    ``dataclasses.replace`` to derive a modified copy.
    """
    bisection_steps: int = 4
    """ number of bisection steps on density before switching to secant """
    pressure_tolerance: float = 1.e-10
    """ region-3 pressure residual tolerance, MPa """
    maxiter: int = 50
    """ maximum secant iterations of the region-3 density solve """
    temperature_tolerance: float = 1.e-6
    """ region-3 backward temperature step tolerance, K """
    region3_maxiter: int = 15
    """ maximum secant iterations of the region-3 backward temperature solve """
    logiter: bool = False
    """ flag for logging every solver iteration """
    strict: bool = False
    """ raise ConvergenceError instead of flagging a non-converged result """

DEFAULT_SETTINGS = SolverSettings()
