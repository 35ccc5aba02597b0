from ._polynomial_error import PolynomialError


class VariableMismatchError(PolynomialError):
    """Arithmetic between polynomials in different variables.

    Raised when addition, multiplication or division is attempted between
    polynomials whose variable labels differ (e.g., a series in ``x`` and
    a series in ``t``).
    """

    pass


def check_same_variable(a, b) -> None:
    if a.var != b.var:
        raise VariableMismatchError(
            f"Polynomials must have the same variable, got "
            f"{a.var!r} and {b.var!r}"
        )
