"""Shared test fixtures for NeuroPath tests."""

from __future__ import annotations

from datetime import date

import pytest

from repos.exercise_log import ExerciseLogRepository
from repos.game_scores import GameScoreRepository
from repos.personal_info import PersonalInfoRepository
from storage import JsonFileStore

FIXED_TODAY = date(2024, 6, 1)


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(str(tmp_path / "user_data"))


@pytest.fixture
def exercise_log(store):
    return ExerciseLogRepository(store)


@pytest.fixture
def score_repo(store):
    return GameScoreRepository(store)


@pytest.fixture
def info_repo(store):
    return PersonalInfoRepository(store)


@pytest.fixture
def clock():
    return lambda: FIXED_TODAY


@pytest.fixture
def broken_store(tmp_path):
    """A store whose base dir sits under a plain file, so every write fails."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return JsonFileStore(str(blocker / "data"))
