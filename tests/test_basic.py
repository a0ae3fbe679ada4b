"""Basic unit tests for craftalog settings, logging and the command line."""

import logging
import logging.handlers
from pathlib import Path

import pytest


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "craftalog.ini"


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, settings_file: Path) -> None:
        """Test AppSettings can be initialized with an INI file."""
        from craftalog.settings import AppSettings

        settings_obj = AppSettings(settings_file=settings_file)
        assert settings_obj is not None
        assert settings_obj.version == "1.0"

    def test_defaults(self, settings_file: Path) -> None:
        """Test default values before anything is stored."""
        from craftalog.settings import AppSettings

        settings_obj = AppSettings(settings_file=settings_file)
        assert settings_obj.source_path is None
        assert settings_obj.recipes_path is None
        assert settings_obj.output_path == Path("src/data/generated")
        assert settings_obj.public_path == Path("public")
        assert settings_obj.crafting_surface == "crafting_table"
        assert settings_obj.extra_excluded_items == []
        assert settings_obj.copy_textures is True

    def test_values_persist(self, settings_file: Path, tmp_path: Path) -> None:
        """Test values survive a new AppSettings on the same file."""
        from craftalog.settings import AppSettings

        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.source_path = tmp_path / "pack"
        settings_obj.copy_textures = False
        settings_obj.extra_excluded_items = ["torch"]
        settings_obj.sync()

        reloaded = AppSettings(settings_file=settings_file)
        assert reloaded.source_path == tmp_path / "pack"
        assert reloaded.recipes_path == tmp_path / "pack" / "behavior_pack" / "recipes"
        assert reloaded.copy_textures is False
        assert reloaded.extra_excluded_items == ["torch"]

    def test_invalid_log_level_ignored(self, settings_file: Path) -> None:
        """Test invalid levels keep the current value."""
        from craftalog.settings import AppSettings

        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.console_log_level = "loud"
        assert settings_obj.console_log_level == "INFO"
        settings_obj.console_log_level = "debug"
        assert settings_obj.console_log_level == "DEBUG"


class TestSettingsValidation:
    """Test settings validation results."""

    def test_missing_source_is_error(self, settings_file: Path) -> None:
        """Test an unset source path fails validation."""
        from craftalog.settings import AppSettings

        validation = AppSettings(settings_file=settings_file).validate()
        assert not validation.is_valid
        assert "Source path not set" in validation.errors

    def test_valid_pack(self, settings_file: Path, pack_dir: Path) -> None:
        """Test the sample pack validates cleanly."""
        from craftalog.settings import AppSettings

        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.source_path = pack_dir
        validation = settings_obj.validate()
        assert validation.is_valid
        assert validation.warnings == []

    def test_missing_textures_is_warning(self, settings_file: Path, tmp_path: Path) -> None:
        """Test a pack without textures validates with warnings."""
        from craftalog.settings import AppSettings

        pack = tmp_path / "pack"
        (pack / "behavior_pack" / "recipes").mkdir(parents=True)
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.source_path = pack
        validation = settings_obj.validate()
        assert validation.is_valid
        assert len(validation.warnings) == 2

    def test_builder_rejects_invalid_settings(self, settings_file: Path) -> None:
        """Test DatasetBuilder.from_settings raises ConfigError."""
        from craftalog.builder import DatasetBuilder
        from craftalog.settings import AppSettings, ConfigError

        with pytest.raises(ConfigError):
            DatasetBuilder.from_settings(AppSettings(settings_file=settings_file))


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, settings_file: Path) -> None:
        """Test logging setup works with settings."""
        from craftalog.settings import AppSettings
        from craftalog.utils.logging_config import setup_logging

        settings_obj = AppSettings(settings_file=settings_file)
        setup_logging(settings=settings_obj)

        logger = logging.getLogger("craftalog")
        assert logger.level == logging.DEBUG

    def test_file_logging_respects_level(self, settings_file: Path, tmp_path: Path) -> None:
        """Test the CSV log receives records at or above the file level."""
        from craftalog.settings import AppSettings
        from craftalog.utils.logging_config import setup_logging

        log_file = tmp_path / "logs" / "run.csv"
        settings_obj = AppSettings(settings_file=settings_file)
        settings_obj.console_logging = False
        settings_obj.file_logging = True
        settings_obj.log_file_path = str(log_file)
        settings_obj.logging.file_log_level = "warning"
        setup_logging(settings=settings_obj)

        test_logger = logging.getLogger("craftalog.test")
        test_logger.info("skipped line")
        test_logger.warning("kept line")

        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            handler.flush()
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                root_logger.removeHandler(handler)
                handler.close()

        text = log_file.read_text(encoding="utf-8")
        assert "kept line" in text
        assert "skipped line" not in text

    def test_log_file_defaults(self, settings_file: Path) -> None:
        """Test rotation defaults."""
        from craftalog.settings import AppSettings

        options = AppSettings(settings_file=settings_file).logging
        assert options.log_file_path == "logs/craftalog.csv"
        assert options.log_file_max_bytes == 10 * 1024 * 1024
        assert options.log_file_backup_count == 5
        assert options.file_log_level == "DEBUG"

    def test_csv_formatter_escapes_quotes(self) -> None:
        """Test CSV output doubles embedded quotes."""
        from craftalog.utils.logging_config import CSVFormatter

        record = logging.LogRecord("craftalog.x", logging.INFO, __file__, 10, 'say "hi"', None, None)
        line = CSVFormatter().format(record)
        assert '"say ""hi"""' in line
        assert ";INFO" in line

    def test_colored_formatter(self) -> None:
        """Test the level name is wrapped in color codes."""
        from craftalog.utils.logging_config import ColoredFormatter

        record = logging.LogRecord("craftalog.x", logging.WARNING, __file__, 1, "msg", None, None)
        line = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert line.startswith("\033[33mWARNING\033[0m")


class TestCommandLine:
    """Test the python -m craftalog entry point."""

    def test_build_and_show(self, settings_file: Path, pack_dir: Path, tmp_path: Path) -> None:
        """Test a full build followed by --show."""
        from craftalog.__main__ import main

        output = tmp_path / "generated"
        args = [
            "--settings", str(settings_file),
            "--source", str(pack_dir),
            "--output", str(output),
            "--public", str(tmp_path / "public"),
        ]
        assert main(args) == 0
        assert (output / "item-recipes.json").exists()

        assert main(["--settings", str(settings_file), "--show", "torch"]) == 0
        assert main(["--settings", str(settings_file), "--show", "nope"]) == 1

    def test_missing_source_fails(self, settings_file: Path) -> None:
        """Test the build exits with 1 when the source is not configured."""
        from craftalog.__main__ import main

        assert main(["--settings", str(settings_file)]) == 1
