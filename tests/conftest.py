import pytest


@pytest.fixture
def sample_address() -> str:
    """A lower-case wallet address."""
    return "0x1234567890abcdef1234567890abcdef12345678"


@pytest.fixture
def other_address() -> str:
    """A second wallet address, unrelated to sample_address."""
    return "0x87654321fedcba0987654321fedcba0987654321"
