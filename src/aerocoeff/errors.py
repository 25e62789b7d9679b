"""Exceptions raised at the validated boundaries of aerocoeff."""


class FlowError(ValueError):
    pass


class DomainError(FlowError):
    """Input lies outside the domain where the relation is defined."""


class InvalidArgumentError(FlowError):
    """A discrete selector (surface type, method name) is not recognised."""


class IndeterminateResultError(FlowError, ZeroDivisionError):
    """A denominator of the relation vanishes at the given input."""


def require_gamma(gamma: float) -> float:
    g = float(gamma)
    if not (g > 1.0):
        raise DomainError(f"ratio of specific heats must be > 1, got {g}")
    return g
