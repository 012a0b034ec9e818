"""Pytest fixtures and configuration for do-workspace tests."""

import pytest
import random
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from doworkspace.board.store import TaskBoard
from doworkspace.models.task import BoardSettings, Classification, Priority, TaskType


@pytest.fixture
def board():
    """Create an empty board with default settings (independent of env)."""
    return TaskBoard(settings=BoardSettings())


@pytest.fixture
def unlabeled_board():
    """Create a board with auto-labelling switched off."""
    return TaskBoard(settings=BoardSettings(auto_label=False))


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def reminder_classification():
    """Classification with both temporal fields set."""
    return Classification(
        priority=Priority.MEDIUM,
        type=TaskType.REMINDER,
        label="Reminder",
        extracted_date="Tomorrow",
        extracted_time="5PM",
    )


@pytest.fixture
def test_client(board):
    """Create a FastAPI test client with the board dependency overridden."""
    from doworkspace.api.app import app, get_board

    app.dependency_overrides[get_board] = lambda: board

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
