"""This module provides unit tests for bezierscore.cli."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from bezierscore.cli import (
    EXIT_CODE_USER_ERROR,
    EXIT_CODE_WRONG_CLI_PARAM,
    _get_overrides_from_args,
    run,
)
from bezierscore.exceptions import ConfigError
from bezierscore.reporting import reporting  # noqa: F401 registers Logger.progress


def _mock_args(**kwargs):
    defaults = {
        "config_dict": "{}",
        "participants": None,
        "score_min": None,
        "score_max": None,
        "coefficient": None,
        "exponent": None,
    }
    return MagicMock(**{**defaults, **kwargs})


def test_get_overrides_nothing_provided():
    assert _get_overrides_from_args(_mock_args()) == {}


def test_get_overrides_from_config_dict():
    args = _mock_args(config_dict='{"scoring": {"score_max": 20.0}}')

    assert _get_overrides_from_args(args) == {"scoring": {"score_max": 20.0}}


def test_get_overrides_flags_take_precedence():
    args = _mock_args(
        config_dict='{"scoring": {"score_max": 20.0, "score_min": 2.0}}',
        score_max=30.0,
        participants=7,
    )

    assert _get_overrides_from_args(args) == {
        "scoring": {"score_max": 30.0, "score_min": 2.0, "participant_count": 7}
    }


def test_get_overrides_invalid_json():
    with pytest.raises(ConfigError):
        _get_overrides_from_args(_mock_args(config_dict="{not json"))


@patch("bezierscore.cli.parser.parse_known_args")
@patch("builtins.print")
def test_cli_unknown_args(mock_print, mock_parse_known_args):
    mock_parse_known_args.return_value = (MagicMock, ["unknown_arg"])

    # when
    result = run()

    assert result == EXIT_CODE_WRONG_CLI_PARAM
    mock_print.assert_called_once_with("Unknown arguments: ['unknown_arg']")


@patch("builtins.print")
def test_cli_version(mock_print):
    with patch("sys.argv", ["bezierscore", "--version"]):
        result = run()

    assert result is None
    mock_print.assert_called_once()


def test_cli_logs_requested_positions():
    with (
        patch(
            "sys.argv",
            [
                "bezierscore",
                *("-n", "3", "--score-min", "1", "--score-max", "3"),
                *("--coefficient", "0", "-p", "1", "-p", "2", "-p", "4"),
            ],
        ),
        patch.object(logging.Logger, "progress", autospec=True) as mock_progress,
        patch.object(logging.Logger, "warning", autospec=True) as mock_warning,
    ):
        result = run()

    assert result is None
    messages = [call.args[1] for call in mock_progress.call_args_list]
    assert "position 1: 3.0" in messages
    assert "position 2: 2.0" in messages
    mock_warning.assert_called_once()
    assert "position 4" in mock_warning.call_args.args[1]


def test_cli_logs_first_and_last_place_by_default():
    with (
        patch("sys.argv", ["bezierscore", "-n", "10"]),
        patch.object(logging.Logger, "progress", autospec=True) as mock_progress,
    ):
        result = run()

    assert result is None
    messages = [call.args[1] for call in mock_progress.call_args_list]
    assert "position 1: 100000.0" in messages
    assert "position 10: 1000.0" in messages


def test_cli_invalid_parameters_return_user_error():
    with patch("sys.argv", ["bezierscore", "-n", "1"]):
        result = run()

    assert result == EXIT_CODE_USER_ERROR


def test_cli_unknown_config_key_returns_user_error():
    with patch("sys.argv", ["bezierscore", "--config-dict", '{"unknown_key": 1}']):
        result = run()

    assert result == EXIT_CODE_USER_ERROR
