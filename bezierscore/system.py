"""Leaderboard scoring along a quadratic Bezier curve.

A :class:`ScoringSystem` maps a 1-based leaderboard position to a score between `score_min` and `score_max`.
The first position receives `score_max`, the last position receives `score_min`. Positions in between follow a
quadratic Bezier curve whose control value is set by `control_coefficient`.

See https://dresswithpockets.github.io/2025/10/14/scoring-system.html

Example
-------

>>> system = ScoringSystem(500, 1000.0, 100000.0, 0.5, 1.33)
>>> first_place, ok = system.score(1)
>>> last_place, ok = system.score(500)
"""

import logging
import numbers
from collections.abc import Mapping, MutableSequence

import numpy as np
import pandas as pd

from bezierscore.constants.keys import ConfigKeys, ScoreCols
from bezierscore.exceptions import (
    CoefficientOutOfRangeError,
    ExponentOutOfRangeError,
    MissingConfigKeyError,
    ParticipantCountOutOfRangeError,
    ScoreMaxOutOfRangeError,
    ScoreMinOutOfRangeError,
)
from bezierscore.numba import curve

logger = logging.getLogger()


def _is_integral(value) -> bool:
    """True for integers and for floats without a fractional part, False for booleans."""
    if isinstance(value, bool | np.bool_):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, numbers.Real) and float(value).is_integer()


class ScoringSystem:
    """Immutable, validated scoring system.

    Parameters
    ----------

    participant_count : int
        Total number of ranked positions, at least 2.

    score_min : float
        Score of the last position, at least 1.

    score_max : float
        Score of the first position, greater than `score_min`.

    control_coefficient : float
        Blends the control value between the midpoint of the score range (0) and `score_max` (1).

    exponent : float
        Validated to be at least 1, not used by the curve.

    Raises
    ------
    ParticipantCountOutOfRangeError, ScoreMinOutOfRangeError, ScoreMaxOutOfRangeError,
    CoefficientOutOfRangeError, ExponentOutOfRangeError
        for the first parameter violating its range, checked in this order.
    """

    __slots__ = (
        "_participant_count",
        "_low_value",
        "_high_value",
        "_control_coefficient",
        "_exponent",
    )

    def __init__(
        self,
        participant_count: int,
        score_min: float,
        score_max: float,
        control_coefficient: float,
        exponent: float,
    ) -> None:
        if not _is_integral(participant_count) or participant_count < 2:
            raise ParticipantCountOutOfRangeError(
                participant_count,
                f"participant_count must be an integer of at least 2, got {participant_count}.",
            )

        if score_min < 1:
            raise ScoreMinOutOfRangeError(
                score_min, f"score_min must be at least 1, got {score_min}."
            )

        if score_max <= score_min:
            raise ScoreMaxOutOfRangeError(
                score_max,
                f"score_max must be greater than score_min ({score_min}), got {score_max}.",
            )

        if control_coefficient < 0 or control_coefficient > 1:
            raise CoefficientOutOfRangeError(
                control_coefficient,
                f"control_coefficient must be between 0 and 1 inclusive, got {control_coefficient}.",
            )

        if exponent < 1:
            raise ExponentOutOfRangeError(
                exponent, f"exponent must be at least 1, got {exponent}."
            )

        # object.__setattr__ as __setattr__ is blocked below
        object.__setattr__(self, "_participant_count", int(participant_count))
        object.__setattr__(self, "_low_value", float(score_min))
        object.__setattr__(self, "_high_value", float(score_max))
        object.__setattr__(self, "_control_coefficient", float(control_coefficient))
        object.__setattr__(self, "_exponent", float(exponent))

    @classmethod
    def from_config(cls, config: Mapping) -> "ScoringSystem":
        """Create a scoring system from the `scoring` section of a config.

        Parameters
        ----------

        config : Mapping
            Either a full config holding a `scoring` section or the section itself.

        Returns
        -------
        ScoringSystem
        """
        section = config.get(ConfigKeys.SCORING, config)

        kwargs = {}
        for key in ConfigKeys.SCORING_PARAMETERS:
            if key not in section:
                raise MissingConfigKeyError(f"{ConfigKeys.SCORING}.{key}")
            kwargs[key] = section[key]

        logger.debug(f"Creating scoring system from config: {kwargs}")
        return cls(**kwargs)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def _key(self) -> tuple:
        return (
            self._participant_count,
            self._low_value,
            self._high_value,
            self._control_coefficient,
            self._exponent,
        )

    def __eq__(self, other):
        if not isinstance(other, ScoringSystem):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(participant_count={self._participant_count}, "
            f"score_min={self._low_value}, score_max={self._high_value}, "
            f"control_coefficient={self._control_coefficient}, exponent={self._exponent})"
        )

    @property
    def participant_count(self) -> int:
        return self._participant_count

    @property
    def low_value(self) -> float:
        """Score of the last position."""
        return self._low_value

    @property
    def high_value(self) -> float:
        """Score of the first position."""
        return self._high_value

    @property
    def score_min(self) -> float:
        return self._low_value

    @property
    def score_max(self) -> float:
        return self._high_value

    @property
    def control_coefficient(self) -> float:
        return self._control_coefficient

    @property
    def exponent(self) -> float:
        return self._exponent

    @property
    def control(self) -> float:
        """Control value of the Bezier curve."""
        return curve.control(
            self._low_value, self._high_value, self._control_coefficient
        )

    def is_valid_position(self, position: int) -> bool:
        return _is_integral(position) and 1 <= position <= self._participant_count

    def alpha(self, position: int) -> float:
        """Curve parameter of `position`, `nan` if the position is not on the leaderboard."""
        if not self.is_valid_position(position):
            return np.nan
        return curve.alpha(int(position), self._participant_count)

    def score(self, position: int) -> tuple[float, bool]:
        """Score of a single leaderboard position.

        Parameters
        ----------

        position : int
            1-based position, 1 is first place and `participant_count` is last place.

        Returns
        -------
        tuple[float, bool]
            The score and True, or 0.0 and False if `position` is not an integer in [1, participant_count].
        """
        if not self.is_valid_position(position):
            return 0.0, False

        score = curve.bezier(
            self._high_value,
            self._low_value,
            self.control,
            curve.alpha(int(position), self._participant_count),
        )
        return float(score), True

    def score_all(self, buffer: MutableSequence | np.ndarray) -> bool:
        """Write the score of every position into `buffer`.

        Parameters
        ----------

        buffer : MutableSequence or np.ndarray
            Sequence of length `participant_count`. Slot `i` receives the score of position `i + 1`.

        Returns
        -------
        bool
            False if the length of `buffer` does not match `participant_count`, the buffer is left untouched in that case.
        """
        if len(buffer) != self._participant_count:
            return False

        if (
            isinstance(buffer, np.ndarray)
            and buffer.ndim == 1
            and buffer.dtype == np.float64
        ):
            curve.fill_scores(
                buffer, self._low_value, self._high_value, self._control_coefficient
            )
            return True

        for i, value in enumerate(self.scores().tolist()):
            buffer[i] = value
        return True

    def scores(self) -> np.ndarray:
        """Scores of all positions as float64 array, index `i` holding position `i + 1`."""
        out = np.empty(self._participant_count, dtype=np.float64)
        curve.fill_scores(
            out, self._low_value, self._high_value, self._control_coefficient
        )
        return out

    def to_frame(self) -> pd.DataFrame:
        """Scores of all positions as dataframe with a `position` and a `score` column."""
        return pd.DataFrame(
            {
                ScoreCols.POSITION: np.arange(1, self._participant_count + 1),
                ScoreCols.SCORE: self.scores(),
            }
        )
