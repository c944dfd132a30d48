"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from domain.aggregates.observation import Observation
from domain.value_objects.complex_data import ComplexData
from infrastructure.complex_obs_handlers.binary_data_handler import BinaryDataHandler

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def complex_obs_dir(tmp_path: Path) -> Path:
    """Return an existing, empty storage root."""
    root = tmp_path / "complex_obs"
    root.mkdir()
    return root


@pytest.fixture
def handler(complex_obs_dir: Path) -> BinaryDataHandler:
    """Create a BinaryDataHandler rooted at the temporary storage directory."""
    return BinaryDataHandler(root=complex_obs_dir)


@pytest.fixture
def sample_bytes() -> bytes:
    """Return a payload containing every byte value."""
    return bytes(range(256)) * 4


@pytest.fixture
def sample_observation(sample_bytes: bytes) -> Observation:
    """Create an Observation carrying in-memory complex data."""
    return Observation(complex_data=ComplexData.from_bytes("scan.pdf", sample_bytes))
