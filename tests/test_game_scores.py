"""Tests for GameScoreRepository: monotonic per-day best score."""

from __future__ import annotations

import json

import pytest

from repos.game_scores import FLOWER_GAME_SCORES_KEY, GameScoreRepository

DAY = "2024-06-01"


def test_empty_store_scores_zero(score_repo):
    assert score_repo.get_score(DAY) == 0
    assert score_repo.load_all() == {}


def test_higher_then_lower_keeps_higher(score_repo):
    assert score_repo.record_if_higher(DAY, 12) is True
    assert score_repo.record_if_higher(DAY, 7) is False
    assert score_repo.get_score(DAY) == 12


@pytest.mark.parametrize("order", [(3, 9), (9, 3)])
def test_order_does_not_matter(score_repo, order):
    for candidate in order:
        score_repo.record_if_higher(DAY, candidate)
    assert score_repo.get_score(DAY) == 9


def test_equal_candidate_does_not_write(score_repo, store):
    score_repo.record_if_higher(DAY, 5)
    before = store.read_value(FLOWER_GAME_SCORES_KEY)
    assert score_repo.record_if_higher(DAY, 5) is False
    assert store.read_value(FLOWER_GAME_SCORES_KEY) == before


def test_zero_on_empty_store_writes_nothing(score_repo, store):
    assert score_repo.record_if_higher(DAY, 0) is False
    assert store.read_value(FLOWER_GAME_SCORES_KEY) is None


def test_days_are_independent(score_repo):
    score_repo.record_if_higher("2024-05-31", 20)
    score_repo.record_if_higher(DAY, 4)
    assert score_repo.load_all() == {"2024-05-31": 20, DAY: 4}


def test_stored_document_layout(score_repo, store):
    score_repo.record_if_higher(DAY, 12)
    assert json.loads(store.read_value(FLOWER_GAME_SCORES_KEY)) == {DAY: 12}


@pytest.mark.parametrize("raw", ["oops", "[1, 2]", '{"2024-06-01": "12"}', '{"2024-06-01": true}', '{"2024-06-01": -5}'])
def test_corrupt_document_reads_as_empty(score_repo, store, raw):
    store.write_value(FLOWER_GAME_SCORES_KEY, raw)
    assert score_repo.get_score(DAY) == 0


def test_failed_write_is_not_a_new_high_score(broken_store):
    repo = GameScoreRepository(broken_store)
    assert repo.record_if_higher(DAY, 5) is False
    assert repo.get_score(DAY) == 0
