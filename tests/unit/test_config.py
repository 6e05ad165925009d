"""Unit tests for launch configuration resolution"""

import pytest

from flappybingus_client.common.config import (
    DEFAULT_HEIGHT,
    DEFAULT_PATH,
    DEFAULT_SERVER,
    DEFAULT_TITLE,
    DEFAULT_WIDTH,
    config_resolve,
    path_normalize,
)
from flappybingus_client.common.types import (
    ConfigOutcome,
    ErrorsOutcome,
    HelpOutcome,
    IssueKind,
)


def _config(args, env=None):
    """Resolve and assert a configuration was produced"""
    outcome = config_resolve(args, env or {})
    assert isinstance(outcome, ConfigOutcome), outcome
    return outcome.config


def _errors(args, env=None):
    """Resolve and assert errors were produced"""
    outcome = config_resolve(args, env or {})
    assert isinstance(outcome, ErrorsOutcome), outcome
    return outcome


class TestConfigResolveDefaults:
    """Test resolution with no arguments and no environment"""

    def test_defaults(self):
        """Test every field falls back to its default"""
        config = _config([])

        assert config.server_url == "http://localhost:3000"
        assert config.path == "/"
        assert config.width == 1280
        assert config.height == 720
        assert config.title == "FlappyBingus"
        assert config.fullscreen is False
        assert config.show_menu is True

    def test_none_args_treated_as_empty(self):
        """Test a missing argument list resolves to defaults"""
        config = _config(None)
        assert config.server_url == DEFAULT_SERVER
        assert config.path == DEFAULT_PATH
        assert (config.width, config.height) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        assert config.title == DEFAULT_TITLE


class TestConfigResolveEnvironment:
    """Test environment overrides"""

    def test_environment_overrides_defaults(self):
        """Test every environment key is honoured"""
        env = {
            "FLAPPYBINGUS_SERVER_URL": "game.example.com:8080/",
            "FLAPPYBINGUS_PATH": "/arcade",
            "FLAPPYBINGUS_CLIENT_WIDTH": "800",
            "FLAPPYBINGUS_CLIENT_HEIGHT": " 600 ",
            "FLAPPYBINGUS_CLIENT_TITLE": "Bingus",
        }
        config = _config([], env)

        assert config.server_url == "http://game.example.com:8080/"
        assert config.path == "/arcade"
        assert config.width == 800
        assert config.height == 600
        assert config.title == "Bingus"

    def test_environment_integer_errors_use_variable_names(self):
        """Test environment errors are labelled with the variable name"""
        outcome = _errors(
            [],
            {"FLAPPYBINGUS_CLIENT_WIDTH": "0", "FLAPPYBINGUS_CLIENT_HEIGHT": "nope"},
        )
        assert outcome.errors == [
            "FLAPPYBINGUS_CLIENT_WIDTH must be a positive integer",
            "FLAPPYBINGUS_CLIENT_HEIGHT must be a positive integer",
        ]
        assert all(issue.kind is IssueKind.INVALID_INTEGER for issue in outcome.issues)

    def test_empty_environment_server_is_required(self):
        """Test a set-but-empty server variable is not replaced by the default"""
        outcome = _errors([], {"FLAPPYBINGUS_SERVER_URL": ""})
        assert outcome.errors == ["Server URL is required"]

    def test_flags_override_environment(self):
        """Test command-line flags win over environment values"""
        env = {
            "FLAPPYBINGUS_SERVER_URL": "http://env.example.com",
            "FLAPPYBINGUS_CLIENT_WIDTH": "640",
            "FLAPPYBINGUS_CLIENT_TITLE": "Env",
        }
        config = _config(
            ["--server", "https://flag.example.com", "--width", "1024", "--title", "Flag"], env
        )
        assert config.server_url == "https://flag.example.com"
        assert config.width == 1024
        assert config.title == "Flag"

    def test_invalid_environment_width_fixed_by_flag_still_reports(self):
        """Test environment errors are kept even when a flag supplies the value"""
        outcome = _errors(["--width", "900"], {"FLAPPYBINGUS_CLIENT_WIDTH": "abc"})
        assert outcome.errors == ["FLAPPYBINGUS_CLIENT_WIDTH must be a positive integer"]


class TestConfigResolveFlags:
    """Test command-line flag handling"""

    def test_all_value_flags(self):
        """Test every value flag is applied"""
        config = _config(
            [
                "--server", "localhost:8080",
                "--path", "/play",
                "--width", "1920",
                "--height", "1080",
                "--title", "Flappy Bingus",
            ]
        )
        assert config.server_url == "http://localhost:8080"
        assert config.path == "/play"
        assert config.width == 1920
        assert config.height == 1080
        assert config.title == "Flappy Bingus"

    def test_fullscreen_and_windowed_last_wins(self):
        """Test --fullscreen and --windowed override each other"""
        assert _config(["--fullscreen"]).fullscreen is True
        assert _config(["--fullscreen", "--windowed"]).fullscreen is False
        assert _config(["--windowed", "--fullscreen"]).fullscreen is True

    def test_no_menu(self):
        """Test --no-menu hides the menu"""
        assert _config(["--no-menu"]).show_menu is False

    def test_server_url_is_normalized(self):
        """Test the resolved server URL is the normalized form"""
        assert _config(["--server", "https://example.com/game/"]).server_url == (
            "https://example.com/game"
        )

    def test_single_dash_value_is_consumed(self):
        """Test values starting with one dash are still values"""
        assert _config(["--title", "-bingus-"]).title == "-bingus-"


class TestConfigResolveErrors:
    """Test error accumulation"""

    def test_unknown_option_then_missing_value(self):
        """Test errors are reported in scan order"""
        outcome = _errors(["--nope", "--width"])
        assert outcome.errors == ["Unknown option: --nope", "Missing value for --width"]
        assert [issue.kind for issue in outcome.issues] == [
            IssueKind.UNKNOWN_OPTION,
            IssueKind.MISSING_VALUE,
        ]

    def test_invalid_flag_integers_use_short_labels(self):
        """Test flag-sourced integer errors say Width/Height"""
        outcome = _errors(["--width", "-1", "--height", "abc"])
        assert outcome.errors == [
            "Width must be a positive integer",
            "Height must be a positive integer",
        ]

    @pytest.mark.parametrize("raw", ["0", "-5", "1.5", "1e3", "", "1_000", "2147483648"])
    def test_rejected_integers(self, raw):
        """Test malformed or out-of-range widths are rejected"""
        outcome = _errors(["--width", raw])
        assert outcome.errors == ["Width must be a positive integer"]

    @pytest.mark.parametrize("raw,expected", [("+42", 42), (" 7 ", 7), ("2147483647", 2147483647)])
    def test_accepted_integers(self, raw, expected):
        """Test signed, padded and maximal integers are accepted"""
        assert _config(["--height", raw]).height == expected

    def test_flag_like_value_is_skipped_not_reinterpreted(self):
        """Test a -- token after a value flag is swallowed as a missing value"""
        outcome = _errors(["--server", "--fullscreen"])
        assert outcome.errors == ["Missing value for --server"]

    def test_token_after_skipped_flag_is_scanned(self):
        """Test scanning resumes after the claimed slot"""
        outcome = _errors(["--width", "--height", "600"])
        assert outcome.errors == ["Missing value for --width", "Unknown option: 600"]

    def test_every_value_flag_reports_missing_value(self):
        """Test trailing value flags report a missing value"""
        for flag in ["--server", "--path", "--width", "--height", "--title"]:
            assert _errors([flag]).errors == [f"Missing value for {flag}"]

    def test_url_error_comes_last(self):
        """Test URL errors follow environment and scan errors"""
        outcome = _errors(
            ["--bogus", "--server", "ftp://example.com"],
            {"FLAPPYBINGUS_CLIENT_HEIGHT": "-2"},
        )
        assert outcome.errors == [
            "FLAPPYBINGUS_CLIENT_HEIGHT must be a positive integer",
            "Unknown option: --bogus",
            "Server URL must start with http:// or https://",
        ]
        assert outcome.issues[-1].kind is IssueKind.INVALID_URL

    def test_missing_host(self):
        """Test a hostless server URL is reported"""
        assert _errors(["--server", "http:///nope"]).errors == ["Server URL must include a host"]


class TestConfigResolveHelp:
    """Test help short-circuiting"""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_flag(self, flag):
        """Test both help spellings"""
        assert isinstance(config_resolve([flag], {}), HelpOutcome)

    def test_help_suppresses_errors(self):
        """Test help wins over malformed input"""
        outcome = config_resolve(
            ["--nope", "--width", "abc", "--help", "--server", "ftp://x"],
            {"FLAPPYBINGUS_CLIENT_WIDTH": "0"},
        )
        assert outcome == HelpOutcome()


class TestPathResolution:
    """Test in-game path normalization"""

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_blank_path_resets_to_root(self, raw):
        """Test a blank path becomes /"""
        assert _config(["--path", raw]).path == "/"

    def test_blank_environment_path_resets_to_root(self):
        """Test a blank environment path becomes /"""
        assert _config([], {"FLAPPYBINGUS_PATH": ""}).path == "/"

    def test_leading_slash_added(self):
        """Test a relative path gains a leading slash"""
        assert _config(["--path", "play"]).path == "/play"

    def test_path_normalize_none(self):
        """Test None path becomes /"""
        assert path_normalize(None) == "/"


class TestTitleResolution:
    """Test window title fallback"""

    def test_blank_title_uses_default(self):
        """Test a blank title falls back to the default"""
        assert _config(["--title", "  "]).title == "FlappyBingus"
