"""Pytest configuration and shared fixtures for someval tests."""

import pytest


@pytest.fixture
def name_id():
    """Some2 holding both an id and a name."""
    from someval import Some2AB

    return Some2AB(13, 'Bob')


@pytest.fixture
def triple():
    """Some3 holding the A and C slots."""
    from someval import Some3AC

    return Some3AC(42, False)
