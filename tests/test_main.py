"""Tests for main entry point"""

import json
import logging

import pytest

from awsregion.cli.parser import parse_args
from awsregion.main import main


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the app logger after main() configures it"""
    logger = logging.getLogger("awsregion")
    original_handlers = logger.handlers[:]
    original_level = logger.level
    original_propagate = logger.propagate
    yield
    logger.handlers = original_handlers
    logger.setLevel(original_level)
    logger.propagate = original_propagate


class TestMain:
    """Tests for main()"""

    def test_no_command_prints_help(self, capsys):
        """Test that running without a command shows help and fails"""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "usage: awsregion" in capsys.readouterr().err

    def test_parse_success(self, capsys):
        """Test a successful parse exits 0"""
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "us-west-1", "--format", "json"])
        assert exc_info.value.code == 0
        assert json.loads(capsys.readouterr().out)["member"] == "US_WEST_1"

    def test_parse_failure(self, capsys):
        """Test a failed parse exits 1 with the error message"""
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "foo", "--format", "json"])
        assert exc_info.value.code == 1
        assert "Error: Not a valid AWS region: foo" in capsys.readouterr().err

    def test_regions_listing(self, capsys):
        """Test regions command through main"""
        with pytest.raises(SystemExit) as exc_info:
            main(["regions", "--format", "csv"])
        assert exc_info.value.code == 0
        assert len(capsys.readouterr().out.strip().splitlines()) == 11

    def test_debug_sets_log_level(self):
        """Test --debug lowers the logger and console handler to DEBUG"""
        with pytest.raises(SystemExit):
            main(["--debug", "config"])

        logger = logging.getLogger("awsregion")
        assert logger.level == logging.DEBUG
        assert [h.level for h in logger.handlers] == [logging.DEBUG]

    def test_default_log_level(self):
        """Test logging stays at INFO without --debug"""
        with pytest.raises(SystemExit):
            main(["config"])

        logger = logging.getLogger("awsregion")
        assert logger.level == logging.INFO
        assert [h.level for h in logger.handlers] == [logging.INFO]

    def test_uses_parse_args(self, monkeypatch):
        """Test main parses argv through parse_args"""
        seen = []

        def recording_parse_args(argv):
            seen.append(argv)
            return parse_args(argv)

        monkeypatch.setattr("awsregion.main.parse_args", recording_parse_args)
        with pytest.raises(SystemExit):
            main(["config"])
        assert seen == [["config"]]

    def test_keyboard_interrupt(self, monkeypatch):
        """Test Ctrl-C exits with 130"""
        def interrupted(args):
            raise KeyboardInterrupt

        monkeypatch.setattr("awsregion.main.run_cli", interrupted)
        with pytest.raises(SystemExit) as exc_info:
            main(["config"])
        assert exc_info.value.code == 130
