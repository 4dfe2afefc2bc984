class SxcalError(Exception):
    """Base error."""

class InvalidDateError(SxcalError, ValueError):
    """Raised for a civil or lunar date that does not exist."""

class OutOfRangeError(SxcalError, ValueError):
    """Raised when a year lies outside the range a subsystem supports."""

class SolverConvergenceError(SxcalError, ArithmeticError):
    """Raised when the event solver produces a non-finite instant (internal fault)."""
