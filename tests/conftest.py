"""Pytest configuration and shared fixtures for fundament tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fundament import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fundament import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fundament import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fundament import Nothing

    return Nothing


@pytest.fixture
def reset_config():
    """Clear the global configuration before and after a test."""
    import fundament._config

    fundament._config._config = None
    yield
    fundament._config._config = None
