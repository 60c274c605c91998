"""Module containing custom exceptions."""


class CustomError(Exception):
    """Base class of all bezierscore errors.

    Subclasses set a fixed `_error_code` and `_msg`, `detail_msg` explains the concrete cause.
    """

    _error_code = ""
    _msg = ""
    _detail_msg = ""

    def __init__(self, detail_msg: str = ""):
        super().__init__(self._msg)
        if detail_msg:
            self._detail_msg = detail_msg

    @property
    def error_code(self):
        return self._error_code

    @property
    def msg(self):
        return self._msg

    @property
    def detail_msg(self):
        return self._detail_msg

    def __str__(self):
        return f"{self._error_code}: {self._msg}\n{self._detail_msg}"


class UserError(CustomError):
    """Error caused by invalid parameters or configuration rather than by a malfunction in bezierscore."""


class ParameterOutOfRangeError(UserError):
    """Base class for a scoring system parameter that violates its allowed range."""

    def __init__(self, value: float | int | None = None, detail_msg: str = ""):
        super().__init__(detail_msg)
        self._value = value

    @property
    def value(self):
        return self._value


class ParticipantCountOutOfRangeError(ParameterOutOfRangeError):
    """Raise when the participant count is not an integer of at least 2."""

    _error_code = "PARTICIPANT_COUNT_OUT_OF_RANGE"
    _msg = "participant count out of range"
    _detail_msg = "participant_count must be an integer of at least 2."


class ScoreMinOutOfRangeError(ParameterOutOfRangeError):
    """Raise when the score minimum is below 1."""

    _error_code = "SCORE_MIN_OUT_OF_RANGE"
    _msg = "score minimum out of range"
    _detail_msg = "score_min must be at least 1."


class ScoreMaxOutOfRangeError(ParameterOutOfRangeError):
    """Raise when the score maximum is not strictly greater than the score minimum."""

    _error_code = "SCORE_MAX_OUT_OF_RANGE"
    _msg = "score maximum out of range"
    _detail_msg = "score_max must be greater than score_min."


class CoefficientOutOfRangeError(ParameterOutOfRangeError):
    """Raise when the control coefficient is outside of [0, 1]."""

    _error_code = "COEFFICIENT_OUT_OF_RANGE"
    _msg = "coefficient out of range"
    _detail_msg = "control_coefficient must be between 0 and 1 inclusive."


class ExponentOutOfRangeError(ParameterOutOfRangeError):
    """Raise when the exponent is below 1."""

    _error_code = "EXPONENT_OUT_OF_RANGE"
    _msg = "exponent out of range"
    _detail_msg = "exponent must be at least 1."


class ConfigError(UserError):
    """Raise when the scoring config is malformed."""

    _error_code = "CONFIG_ERROR"
    _msg = "Malformed or invalid configuration."


class UnknownConfigKeyError(ConfigError):
    """Raise when an override names a key the default config does not define."""

    def __init__(self, key: str):
        super().__init__(f"Unknown config key: '{key}'")
        self.key = key


class MissingConfigKeyError(ConfigError):
    """Raise when a required key is missing from a config."""

    def __init__(self, key: str):
        super().__init__(f"Required config key is missing: '{key}'")
        self.key = key
