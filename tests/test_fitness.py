import pytest

from lineupbalance.lineup import LineupTemplate, default_template
from lineupbalance.player import create_roster, default_roster
from lineupbalance.search import PermutationGenerator, Score, evaluate, match_differences


def _four_players():
    return create_roster([("P1", 1.0), ("P2", 2.0), ("P3", 3.0), ("P4", 4.0)])


def _single_court():
    return LineupTemplate.from_lists([[[0, 1, 2, 3]]], num_seats=4)


def test_identity_assignment_difference():
    score = evaluate(_four_players(), _single_court())

    assert score == Score(worst_case=4.0, average=4.0)


def test_balanced_assignment_scores_zero():
    p1, p2, p3, p4 = _four_players()

    score = evaluate((p4, p1, p2, p3), _single_court())

    assert score.worst_case == 0.0
    assert score.average == 0.0


def test_worst_case_is_max_and_average_is_mean():
    roster = default_roster()
    template = default_template()
    assignment = PermutationGenerator(roster, seed=11).shuffle()

    diffs = match_differences(assignment, template)
    score = evaluate(assignment, template)

    assert len(diffs) == template.num_matches
    assert score.worst_case == max(diffs)
    assert score.average == pytest.approx(sum(diffs) / len(diffs))
    assert score.worst_case >= score.average >= 0.0


def test_evaluate_is_deterministic_and_pure():
    roster = default_roster()
    template = default_template()
    assignment = PermutationGenerator(roster, seed=3).shuffle()
    before = tuple(assignment)

    first = evaluate(assignment, template)
    second = evaluate(assignment, template)

    assert first == second
    assert assignment == before


def test_average_counts_every_match():
    roster = create_roster([("A", 0.0), ("B", 0.0), ("C", 0.0), ("D", 3.0)])
    template = LineupTemplate.from_lists(
        [[[0, 1, 2, 3]], [[0, 3, 1, 2]], [[0, 1, 2, 3]]], num_seats=4
    )

    score = evaluate(roster, template)

    assert score.worst_case == 3.0
    assert score.average == 3.0


def test_improves_on_is_strict():
    best = Score(worst_case=1.0, average=0.5)

    assert Score(0.9, 0.9).improves_on(best)
    assert not Score(1.0, 0.1).improves_on(best)
    assert not Score(1.1, 0.0).improves_on(best)


def test_anything_improves_on_no_best_including_zero():
    assert Score(0.0, 0.0).improves_on(None)
    assert Score(5.0, 2.0).improves_on(None)
