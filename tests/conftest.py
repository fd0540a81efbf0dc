"""Shared test fixtures for termtext."""

import logging

import pytest

_ENV_VARS = (
    "TERMTEXT_LOCALE",
    "TERMTEXT_HOME",
    "TERMTEXT_LOG_LEVEL",
    "TERMTEXT_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog keeps seeing termtext records."""
    yield
    pkg_logger = logging.getLogger("termtext")
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture
def pairs_file(tmp_path):
    """Key/value config file with comments, quotes and blank lines."""
    path = tmp_path / "pairs.conf"
    path.write_text(
        "# file colors\n"
        "\n"
        "ln   01;36\n"
        "di   '01;34'   # directories\n"
        "'*.tar gz' 01;31\n",
        encoding="utf-8",
    )
    return path
