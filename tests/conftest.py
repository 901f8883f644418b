# tests/conftest.py
import copy
import logging
from pathlib import Path

import pytest

from tagscan_cli.core.managers.config_manager import config_manager

TEST_DATA_DIR = Path(__file__).parent / "test_data"


@pytest.fixture
def sample_page_path() -> Path:
    """Path to the static HTML page used by the page-level and CLI tests."""
    return TEST_DATA_DIR / "sample_page.html"


@pytest.fixture
def sample_html(sample_page_path) -> str:
    return sample_page_path.read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def restore_logging_and_config():
    """
    The CLI reconfigures the root logger and some tests tweak the global
    config singleton; put both back after every test.
    """
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_config = copy.deepcopy(config_manager.get_all())
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    config_manager._config = saved_config
