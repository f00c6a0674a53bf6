import logging

import pytest

from creational.config.manager import reset_config_manager
from creational.domain.student.value_objects import DEFAULT_CACHE_WINDOW, AdmissionYear
from creational.infrastructure.logging import configure_default_logging
from creational.infrastructure.registry.provider_registry import ProviderRegistry


@pytest.fixture(autouse=True)
def clean_registry():
    """Start and finish every test with an empty provider registry."""
    registry = ProviderRegistry.get_instance()
    registry.clear_registrations()
    yield registry
    registry.clear_registrations()


@pytest.fixture(autouse=True)
def default_admission_year_cache():
    """Restore the default admission-year cache window around every test."""
    AdmissionYear.configure_cache(*DEFAULT_CACHE_WINDOW)
    yield
    AdmissionYear.configure_cache(*DEFAULT_CACHE_WINDOW)


@pytest.fixture(autouse=True)
def clean_config_manager(monkeypatch):
    """Keep configuration environment variables out of the tests."""
    monkeypatch.delenv("CREATIONAL_CONFIG_FILE", raising=False)
    monkeypatch.delenv("CREATIONAL_LOG_LEVEL", raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def restore_logging():
    """Undo root logger and structlog changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    configure_default_logging()


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON configuration file and return its path."""
    import json

    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
