from ._polynomial import Polynomial, polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Additive inverse ``-p`` in the same variable."""
    return polynomial(-p.coeffs, p.var)
