#!python
"""CLI for bezierscore: logs the scores of leaderboard positions.

Parameters come from the default config, updated by `--config-dict` and then by the dedicated flags.
"""

import argparse
import json
import logging
import os

from bezierscore import __version__
from bezierscore.constants.keys import ConfigKeys
from bezierscore.exceptions import ConfigError

logger = logging.getLogger()

EXIT_CODE_USER_ERROR = 1
EXIT_CODE_WRONG_CLI_PARAM = 126
EXIT_CODE_UNKNOWN_ERROR = 127

# flag name -> key within the scoring section
SCORING_FLAGS = {
    "participants": ConfigKeys.PARTICIPANT_COUNT,
    "score_min": ConfigKeys.SCORE_MIN,
    "score_max": ConfigKeys.SCORE_MAX,
    "coefficient": ConfigKeys.CONTROL_COEFFICIENT,
    "exponent": ConfigKeys.EXPONENT,
}

parser = argparse.ArgumentParser(
    description="Log leaderboard scores distributed along a quadratic Bezier curve",
    epilog="Dedicated flags take precedence over --config-dict.",
)
parser.add_argument(
    "--version",
    "-v",
    action="store_true",
    help="Print version and exit",
)
parser.add_argument(
    "--participants",
    "-n",
    type=int,
    default=None,
    help="Number of ranked positions.",
)
parser.add_argument(
    "--score-min", type=float, default=None, help="Score of the last position."
)
parser.add_argument(
    "--score-max", type=float, default=None, help="Score of the first position."
)
parser.add_argument(
    "--coefficient", type=float, default=None, help="Control coefficient in [0, 1]."
)
parser.add_argument(
    "--exponent", type=float, default=None, help="Exponent, at least 1."
)
parser.add_argument(
    "--position",
    "-p",
    type=int,
    action="append",
    default=[],
    help="Position to log the score of. Can be passed multiple times, defaults to first and last place.",
)
parser.add_argument(
    "--config-dict",
    type=str,
    default="{}",
    help='JSON dict updating the default config, e.g. "{\\"scoring\\": {\\"score_max\\": 5000}}".',
)


def _get_overrides_from_args(args: argparse.Namespace) -> dict:
    """Config overrides from `--config-dict` with the dedicated flags applied on top."""
    try:
        overrides = json.loads(args.config_dict) if args.config_dict else {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not parse --config-dict: {e}") from e

    scoring = {
        config_key: getattr(args, flag)
        for flag, config_key in SCORING_FLAGS.items()
        if getattr(args, flag) is not None
    }
    if scoring:
        overrides.setdefault(ConfigKeys.SCORING, {}).update(scoring)

    return overrides


def _log_positions(system, positions: list[int]) -> None:
    for position in positions:
        score, ok = system.score(position)
        if ok:
            logger.progress(f"position {position}: {score}")
        else:
            logger.warning(
                f"position {position} is not in [1, {system.participant_count}]"
            )


def run(*args, **kwargs):
    args, unknown = parser.parse_known_args()

    if unknown:
        print(f"Unknown arguments: {unknown}")
        parser.print_help()
        return EXIT_CODE_WRONG_CLI_PARAM

    if args.version:
        print(f"{__version__}")
        return

    # load modules only here to speed up -v and -h commands
    from bezierscore.config import load_config
    from bezierscore.exceptions import CustomError
    from bezierscore.reporting import reporting
    from bezierscore.reporting.logging import print_environment, print_logo
    from bezierscore.system import ScoringSystem

    reporting.init_logging()
    print_logo()
    print_environment()

    try:
        config = load_config(_get_overrides_from_args(args))
        system = ScoringSystem.from_config(config)
        logger.progress(f"Created {system}")
        logger.info(f"control value: {system.control}")

        _log_positions(system, args.position or [1, system.participant_count])

    except Exception as e:
        if isinstance(e, CustomError):
            exit_code = EXIT_CODE_USER_ERROR
        else:
            import traceback

            logger.info(traceback.format_exc())
            exit_code = EXIT_CODE_UNKNOWN_ERROR

        logger.error(e)
        return exit_code


if __name__ == "__main__" and os.getenv("RUN_MAIN") == "1":
    run()
