from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.provider_builder import ProviderBuilder


@pytest.fixture
def provider_builder(tmp_path: Path) -> ProviderBuilder:
    """Provide a provider checkout named terraform-provider-widget under tmp_path."""
    return ProviderBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_tfdocgen_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging so later tests start clean."""
    yield
    logger = logging.getLogger("tfdocgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
