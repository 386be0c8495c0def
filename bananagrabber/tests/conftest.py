"""Shared fixtures for bananagrabber tests."""

from pathlib import Path

import pytest

SAMPLE_RESPONSES_DIR = Path(__file__).parent / "sample_responses"


def load_sample(name: str) -> bytes:
    """Read a saved Reddit response by file stem."""
    return (SAMPLE_RESPONSES_DIR / f"{name}.json").read_bytes()


@pytest.fixture
def sample_responses_dir() -> Path:
    return SAMPLE_RESPONSES_DIR


@pytest.fixture
def sample():
    """Loader for saved Reddit responses."""
    return load_sample
