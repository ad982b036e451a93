"""CLI tests using typer's CliRunner."""

import logging

import pytest
from typer.testing import CliRunner

from reportkit.exceptions import ReportedError
from reportkit.main import app, resolve_error_class

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging(clean_env):
    """Drop handlers setup_logging() bound to the runner's streams."""
    yield
    logging.getLogger("reportkit").handlers.clear()


class TestReportCommand:
    """Test `reportkit report`"""

    def test_non_fatal_report(self):
        """Test a non-fatal report prints the message and info"""
        result = runner.invoke(app, ["report", "hello", "--info", "x", "--info", "y"])

        assert result.exit_code == 0
        assert "hello x y" in result.output

    def test_no_log_drops_info(self):
        """Test that --no-log leaves info out of the output"""
        result = runner.invoke(app, ["report", "hello", "--info", "secret", "--no-log"])

        assert result.exit_code == 0
        assert "hello" in result.output
        assert "secret" not in result.output

    def test_fatal_report_exits_1(self):
        """Test a fatal report shows the error and exits 1"""
        result = runner.invoke(app, ["report", "bad thing", "--fatal"])

        assert result.exit_code == 1
        assert "ReportedError" in result.output
        assert "bad thing" in result.output

    def test_fatal_with_builtin_error_class(self):
        """Test raising a built-in error class by name"""
        result = runner.invoke(app, ["report", "bad", "--fatal", "--error-class", "ValueError"])

        assert result.exit_code == 1
        assert "ValueError" in result.output

    def test_unknown_error_class(self):
        """Test that an unknown error class exits 2"""
        result = runner.invoke(app, ["report", "bad", "--error-class", "NotAnError"])

        assert result.exit_code == 2
        assert "unknown error class" in result.output

    def test_environment_makes_fatal(self, clean_env):
        """Test that REPORTKIT_FATAL makes reports fatal"""
        clean_env.setenv("REPORTKIT_FATAL", "1")
        result = runner.invoke(app, ["report", "bad"])

        assert result.exit_code == 1

    def test_flag_overrides_environment(self, clean_env):
        """Test that command line flags win over the environment"""
        clean_env.setenv("REPORTKIT_FATAL", "1")
        result = runner.invoke(app, ["report", "fine", "--no-fatal"])

        assert result.exit_code == 0
        assert "fine" in result.output


class TestCheckEnvCommand:
    """Test `reportkit check-env`"""

    def test_clean_environment(self):
        """Test check-env with no variables set"""
        result = runner.invoke(app, ["check-env"])

        assert result.exit_code == 0
        assert "REPORTKIT_FATAL" in result.output

    def test_invalid_variable(self, clean_env):
        """Test check-env exits 1 on an invalid value"""
        clean_env.setenv("REPORTKIT_DEBUG", "loud")
        result = runner.invoke(app, ["check-env"])

        assert result.exit_code == 1
        assert "loud" in result.output


class TestVersionCommand:
    """Test `reportkit version`"""

    def test_version(self):
        """Test the version command"""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "reportkit version" in result.output


class TestResolveErrorClass:
    """Test mapping names to error classes"""

    def test_reported_error(self):
        """Test that ReportedError resolves to the package class"""
        assert resolve_error_class("ReportedError") is ReportedError

    def test_builtin(self):
        """Test resolving a built-in exception name"""
        assert resolve_error_class("KeyError") is KeyError

    @pytest.mark.parametrize("name", ["print", "int", "BaseException", "Missing"])
    def test_not_an_error_class(self, name):
        """Test that names of non-error builtins resolve to None"""
        assert resolve_error_class(name) is None
