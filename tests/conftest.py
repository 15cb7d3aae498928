from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_readmegen_logger() -> Iterator[None]:
    # The CLI installs handlers bound to the captured stderr of the running test.
    yield
    logger = logging.getLogger("readmegen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
