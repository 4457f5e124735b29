# Author: Cameron F. Abrams, <cfa22@drexel.edu>
"""
Exceptions raised by the IF97 property routines
"""

class OutOfDomainError(ValueError):
    """
    Raised when a requested state lies outside the validity range of
    IAPWS-IF97 (pressure, temperature, saturation curve, quality or an
    inverse-query target beyond its admissible range).
    """

class ConvergenceError(RuntimeError):
    """
    Raised in strict mode when an iterative solver exhausts its iteration
    cap without meeting its tolerance.
    """
    def __init__(self, message: str, estimate: float = None):
        super().__init__(message)
        self.estimate = estimate
        """ best estimate available when the solver gave up """
