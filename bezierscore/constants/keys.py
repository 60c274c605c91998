class ConstantsClass(type):
    """A metaclass for classes that should only contain string constants."""

    def __setattr__(self, name, value):
        raise TypeError("Constants class cannot be modified")


class ConfigKeys(metaclass=ConstantsClass):
    """String constants for accessing the config."""

    VERSION = "version"

    SCORING = "scoring"
    PARTICIPANT_COUNT = "participant_count"
    SCORE_MIN = "score_min"
    SCORE_MAX = "score_max"
    CONTROL_COEFFICIENT = "control_coefficient"
    EXPONENT = "exponent"

    SCORING_PARAMETERS = (
        PARTICIPANT_COUNT,
        SCORE_MIN,
        SCORE_MAX,
        CONTROL_COEFFICIENT,
        EXPONENT,
    )


class ScoreCols(metaclass=ConstantsClass):
    """String constants for the columns of the score table."""

    POSITION = "position"
    SCORE = "score"
