"""Unit tests for the CLI argument parser, exit codes and support utilities."""

import logging

import pytest

from hongdown.cli.builder import (
    EXIT_CONFIG_ERROR,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from hongdown.exceptions import (
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
    DependencyError,
    ParsingError,
    RenderingError,
)
from hongdown.logging_utils import configure_logging
from hongdown.utils.decorators import check_version_requirement, requires_dependencies


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.files == []
        assert not (args.write or args.check or args.diff)
        assert args.color == "auto"
        assert args.config is None
        assert args.log_level == "WARNING"
        assert args.log_file is None
        assert not args.trace

    def test_files_and_mode(self):
        args = create_parser().parse_args(["--check", "a.md", "b.md"])
        assert args.check
        assert args.files == ["a.md", "b.md"]

    def test_short_flags(self):
        args = create_parser().parse_args(["-w", "a.md"])
        assert args.write

    def test_log_level_case_insensitive(self):
        assert create_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_logging_flags(self):
        args = create_parser().parse_args(["--log-file", "run.log", "--trace"])
        assert args.log_file == "run.log"
        assert args.trace

    @pytest.mark.parametrize("flags", [["--write", "--check"], ["--check", "--diff"], ["-w", "-d"]])
    def test_modes_mutually_exclusive(self, flags):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(flags)
        assert exc_info.value.code == 2

    def test_invalid_color(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--color", "sometimes"])


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test mapping exceptions to exit codes."""

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (DependencyError("mistune"), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (ConfigReadError("a.toml"), EXIT_CONFIG_ERROR),
            (ConfigParseError("a.toml", "bad"), EXIT_CONFIG_ERROR),
            (ConfigValidationError("bad"), EXIT_CONFIG_ERROR),
            (FileNotFoundError("x"), EXIT_FILE_ERROR),
            (PermissionError("x"), EXIT_FILE_ERROR),
            (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), EXIT_FILE_ERROR),
            (ParsingError("x"), EXIT_ERROR),
            (RenderingError("x"), EXIT_ERROR),
            (RuntimeError("x"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, expected):
        assert get_exit_code_for_exception(exception) == expected


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the dependency check decorator."""

    def test_present(self):
        @requires_dependencies("test", [("pytest", "pytest", "")])
        def run():
            return "ran"

        assert run() == "ran"

    def test_missing(self):
        @requires_dependencies("test", [("no-such-dist", "no_such_module_xyz", "")])
        def run():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert exc_info.value.package_name == "no-such-dist"
        assert isinstance(exc_info.value.original_error, ImportError)

    def test_version_too_old(self):
        @requires_dependencies("test", [("pytest", "pytest", ">=9999")])
        def run():
            return "ran"

        with pytest.raises(DependencyError, match="pytest>=9999"):
            run()

    def test_check_version_requirement(self):
        assert check_version_requirement("pytest", ">=1.0")[0]
        assert check_version_requirement("no-such-dist-xyz", ">=1.0") == (False, None)


@pytest.mark.unit
class TestConfigureLogging:
    """Test logging setup for the CLI."""

    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_from_name(self):
        root = configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_name_falls_back_to_warning(self):
        assert configure_logging("chatty").level == logging.WARNING

    def test_console_records_go_to_stderr(self, capsys):
        configure_logging("INFO")
        logging.getLogger("hongdown.api").info("Reformatted doc.md")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hongdown: INFO: Reformatted doc.md" in captured.err

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "hongdown.log"
        root = configure_logging(logging.INFO, log_file=str(log_file))
        assert len(root.handlers) == 2
        logging.getLogger("hongdown.api").info("Reformatted doc.md")
        root.handlers[1].close()
        text = log_file.read_text(encoding="utf-8")
        assert "[INFO] [hongdown.api] Reformatted doc.md" in text

    def test_unwritable_log_file_warns(self, tmp_path, capsys):
        root = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "hongdown.log"))
        assert len(root.handlers) == 1
        assert "Cannot open log file" in capsys.readouterr().err
