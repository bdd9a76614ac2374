"""Tests for RankingPolicy."""

import random

import pytest

from hvac_dispatch.domain.entities.technician_score import TechnicianScore
from hvac_dispatch.domain.policies.ranking import rank, resolve_tie
from hvac_dispatch.domain.value_objects.scoring_config import RankingConfig, ScoringConfig
from tests.factories import make_tech

DETERMINISTIC = ScoringConfig(ranking=RankingConfig(deterministic_tie_break=True))


def _score(tid: str, total: float, distance: float = 10.0, jobs: int = 0,
           history: list[float] | None = None) -> TechnicianScore:
    tech = make_tech(tid, jobs=jobs, history=history or [])
    return TechnicianScore(
        technician=tech, distance_score=0, availability_score=0, skill_score=0,
        performance_score=0, workload_score=0, total_score=total, distance=distance,
    )


def _ids(scores):
    return [s.technician_id for s in scores]


def test_sorted_descending_without_ties(normal_job):
    ranked = rank([_score("A", 50), _score("B", 90), _score("C", 70)], normal_job)
    assert _ids(ranked) == ["B", "C", "A"]


def test_empty(normal_job):
    assert rank([], normal_job) == []


def test_higher_history_sum_wins_tie(normal_job):
    a = _score("A", 80.0, history=[90.0] * 5)
    b = _score("B", 80.05, history=[90.0] * 10)
    assert _ids(rank([a, b], normal_job)) == ["B", "A"]


def test_history_sum_beats_total_within_threshold(normal_job):
    """A slightly lower total still wins first place on history sum."""
    a = _score("A", 80.1, history=[50.0])
    b = _score("B", 80.0, history=[50.0, 50.0])
    assert _ids(rank([a, b], normal_job)) == ["B", "A"]


def test_sum_not_average_decides(normal_job):
    few_perfect = _score("A", 70, history=[100.0] * 3)      # sum 300, avg 100
    many_average = _score("B", 70, history=[60.0] * 10)     # sum 600, avg 60
    assert _ids(rank([few_perfect, many_average], normal_job)) == ["B", "A"]


def test_distance_breaks_equal_history(normal_job):
    a = _score("A", 75, distance=12.0, history=[80.0])
    b = _score("B", 75, distance=4.0, history=[80.0])
    assert _ids(rank([a, b], normal_job)) == ["B", "A"]


def test_job_count_breaks_equal_distance(normal_job):
    a = _score("A", 75, distance=4.0, jobs=2)
    b = _score("B", 75, distance=4.0, jobs=1)
    assert _ids(rank([a, b], normal_job)) == ["B", "A"]


def test_float_noise_at_threshold_counts_as_tie(normal_job):
    a = _score("A", 80.2, history=[10.0])
    b = _score("B", 80.1, history=[90.0])
    assert _ids(rank([a, b], normal_job)) == ["B", "A"]


def test_outside_threshold_is_not_a_tie(normal_job):
    a = _score("A", 80.2, history=[10.0])
    b = _score("B", 80.0, history=[90.0])
    assert _ids(rank([a, b], normal_job)) == ["A", "B"]


def test_tie_window_anchored_on_top_score(normal_job):
    """C is within 0.1 of B but not of A, so it stays in 'others'."""
    a = _score("A", 80.0, history=[1.0])
    b = _score("B", 79.95, history=[99.0])
    c = _score("C", 79.88, history=[500.0])
    assert _ids(rank([a, b, c], normal_job)) == ["B", "A", "C"]


def test_others_keep_score_order(normal_job):
    scores = [_score("A", 90), _score("B", 60), _score("C", 70), _score("D", 89.95, history=[1.0])]
    assert _ids(rank(scores, normal_job)) == ["D", "A", "C", "B"]


def test_deterministic_flag_orders_full_ties_by_id(normal_job):
    scores = [_score("C", 70), _score("A", 70), _score("B", 70)]
    assert _ids(rank(scores, normal_job, DETERMINISTIC)) == ["A", "B", "C"]


def test_full_tie_shuffle_is_reproducible_with_seeded_rng(normal_job):
    scores = [_score(t, 70) for t in "ABCDE"]
    first = _ids(rank(scores, normal_job, rng=random.Random(7)))
    second = _ids(rank(scores, normal_job, rng=random.Random(7)))
    assert first == second
    assert sorted(first) == list("ABCDE")


def test_shuffle_never_overrides_meaningful_criteria(normal_job):
    for seed in range(20):
        scores = [_score("A", 70, distance=9.0), _score("B", 70, distance=1.0), _score("C", 70, distance=5.0)]
        assert _ids(rank(scores, normal_job, rng=random.Random(seed))) == ["B", "C", "A"]


def test_resolve_tie_does_not_mutate_input():
    tied = [_score("B", 70), _score("A", 70)]
    resolve_tie(tied, deterministic=True)
    assert _ids(tied) == ["B", "A"]


@pytest.mark.parametrize("repeat", range(3))
def test_ranking_is_deterministic_without_full_ties(normal_job, repeat):
    scores = [_score("A", 88.0), _score("B", 87.95, history=[5.0]), _score("C", 60.0)]
    assert _ids(rank(scores, normal_job)) == ["B", "A", "C"]
