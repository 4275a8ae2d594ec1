# perlin_field/smoothing.py

"""
================================================================================
SMOOTHING (SMOOTHSTEP)
================================================================================
Easing applied to the fractional lattice offset before interpolation. The
order of the polynomial sets the continuity of the resulting noise field:

    LINEAR   S(x) = x                    (C0)
    CUBIC    S(x) = 3x^2 - 2x^3          (C1)
    QUINTIC  S(x) = 6x^5 - 15x^4 + 10x^3 (C2, default)

Inputs outside (0, 1) are clamped to 0 or 1 for every order.
================================================================================
"""

import enum

from numba import njit


class SmoothstepOrder(enum.IntEnum):
    """The easing polynomial applied to lattice offsets."""
    LINEAR = 0
    CUBIC = 1
    QUINTIC = 2

    @classmethod
    def parse(cls, value) -> "SmoothstepOrder":
        """
        Accepts a member, its integer value, or its case-insensitive name.

        Raises:
            ValueError: If the value names no supported order.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unsupported smoothstep order: {value!r}") from None
        if isinstance(value, bool):
            raise ValueError(f"Unsupported smoothstep order: {value!r}")
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise ValueError(f"Unsupported smoothstep order: {value!r}") from None


# Plain ints for use inside compiled code.
_LINEAR = int(SmoothstepOrder.LINEAR)
_CUBIC = int(SmoothstepOrder.CUBIC)
_QUINTIC = int(SmoothstepOrder.QUINTIC)


@njit
def _smoothstep(x, order):
    if x >= 1.0:
        return 1.0
    if x <= 0.0:
        return 0.0
    if order == _LINEAR:
        return x
    if order == _CUBIC:
        return x * x * (3.0 - 2.0 * x)
    if order == _QUINTIC:
        return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)
    raise ValueError("Unsupported smoothstep order")


def smoothstep(x: float, order=SmoothstepOrder.QUINTIC) -> float:
    """Evaluates the easing polynomial of the given order at x."""
    return _smoothstep(float(x), int(SmoothstepOrder.parse(order)))
