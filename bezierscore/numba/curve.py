# native imports

# bezierscore imports

# third party imports
import numba as nb
import numpy as np

from bezierscore.utils import USE_NUMBA_CACHING


@nb.njit(inline="always", cache=USE_NUMBA_CACHING)
def bezier(start: float, end: float, control: float, alpha: float) -> float:
    """Evaluate a scalar quadratic Bezier curve.

    Parameters
    ----------

    start : float
        Value of the curve at `alpha = 0`

    end : float
        Value of the curve at `alpha = 1`

    control : float
        Control value the curve bends towards

    alpha : float
        Curve parameter in [0, 1]

    Returns
    -------
    float
        Value of the curve at `alpha`

    """
    inverse = 1.0 - alpha
    return (start * inverse**2) + (2.0 * control * alpha * inverse) + (end * alpha**2)


@nb.njit(inline="always", cache=USE_NUMBA_CACHING)
def alpha(position: int, participant_count: int) -> float:
    """Normalized position of a 1-based rank, 0 for the best and 1 for the worst position."""
    return (position - 1) / (participant_count - 1)


@nb.njit(inline="always", cache=USE_NUMBA_CACHING)
def control(low_value: float, high_value: float, control_coefficient: float) -> float:
    """Control value of the curve.

    Blends the midpoint of the score range with `high_value` by `control_coefficient`.
    """
    midpoint = (high_value + low_value) / 2.0
    return (1.0 - control_coefficient) * midpoint + control_coefficient * high_value


@nb.njit(cache=USE_NUMBA_CACHING)
def fill_scores(
    out: np.ndarray,
    low_value: float,
    high_value: float,
    control_coefficient: float,
):
    """Write the score of every position into `out`.

    Parameters
    ----------

    out : np.ndarray
        One-dimensional float64 array of shape (participant_count,).
        Slot `i` receives the score of position `i + 1`.

    low_value : float
        Score of the last position

    high_value : float
        Score of the first position

    control_coefficient : float
        Control coefficient in [0, 1]

    """
    assert out.ndim == 1

    participant_count = out.shape[0]
    control_value = control(low_value, high_value, control_coefficient)

    for i in range(participant_count):
        out[i] = bezier(
            high_value,
            low_value,
            control_value,
            alpha(i + 1, participant_count),
        )
