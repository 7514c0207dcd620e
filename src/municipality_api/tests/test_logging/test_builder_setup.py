import logging

from municipality_api.core.logging.builder import make_dict_config, setup_logging
from municipality_api.core.logging.filters import RequestIdFilter


# Minimal Settings-like object: the builder only reads these attributes
class DummySettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = False
    LOG_DIR = None  # set per test
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "development"
    ENABLE_SQL_LOGGING = False


def test_file_logging_adds_rotating_handlers(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["handlers"]["error_file"]["formatter"] == "json"
    assert cfg["loggers"][""]["handlers"] == ["console", "file", "error_file"]


def test_stdout_logging_uses_error_console(tmp_path):
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    settings.LOG_DIR = tmp_path

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}


def test_sql_logging_toggle():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"

    settings.ENABLE_SQL_LOGGING = True
    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_text_format_selects_standard_formatter():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    settings.LOG_FORMAT = "text"

    cfg = make_dict_config(settings)

    assert cfg["handlers"]["console"]["formatter"] == "standard"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path / "logs"
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    assert logging.getLogger().handlers


def test_repeated_setup_installs_one_root_request_id_filter():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True

    setup_logging(settings)
    setup_logging(settings)

    root_filters = [f for f in logging.getLogger().filters if isinstance(f, RequestIdFilter)]
    assert len(root_filters) == 1
