from collections import Counter

import pytest

from lineupbalance.exceptions import (
    InvalidConfigurationException,
    InvalidRosterException,
    MissingConfigurationException,
    SearchStateException,
)
from lineupbalance.lineup import LineupTemplate, default_template
from lineupbalance.player import create_roster, default_roster
from lineupbalance.search import (
    LineupSearch,
    PermutationGenerator,
    SearchConfig,
    SearchResult,
    evaluate,
    load_config,
)


class ScriptedGenerator:
    """Feeds a fixed sequence of assignments to the search."""

    def __init__(self, assignments):
        self.assignments = list(assignments)

    def shuffle(self):
        return self.assignments.pop(0)


def _four_players():
    return create_roster([("P1", 1.0), ("P2", 2.0), ("P3", 3.0), ("P4", 4.0)])


def _single_court():
    return LineupTemplate.from_lists([[[0, 1, 2, 3]]], num_seats=4)


def test_generator_always_yields_permutations():
    roster = default_roster()
    generator = PermutationGenerator(roster, seed=1)

    for _ in range(200):
        assignment = generator.shuffle()
        assert isinstance(assignment, tuple)
        assert Counter(assignment) == Counter(roster)

    assert roster == default_roster()


def test_generator_seed_is_reproducible():
    roster = default_roster()

    first = [PermutationGenerator(roster, seed=99).shuffle() for _ in range(3)]
    second = [PermutationGenerator(roster, seed=99).shuffle() for _ in range(3)]

    assert first == second


def test_generator_reaches_every_ordering_of_small_roster():
    roster = create_roster([("A", 1), ("B", 2), ("C", 3)])
    generator = PermutationGenerator(roster, seed=5)

    seen = Counter(generator.shuffle() for _ in range(6000))

    assert len(seen) == 6
    assert all(700 < count < 1300 for count in seen.values())


def test_balanced_assignment_preferred_over_identity():
    p1, p2, p3, p4 = _four_players()
    identity = (p1, p2, p3, p4)
    balanced = (p4, p1, p2, p3)
    search = LineupSearch(
        _four_players(),
        _single_court(),
        SearchConfig(trials=2, progress_every=0),
        generator=ScriptedGenerator([identity, balanced]),
    )

    result = search.run()

    assert result.best.assignment == balanced
    assert result.best.score.worst_case == 0.0
    assert result.best.trial == 1


def test_zero_score_found_first_is_kept():
    p1, p2, p3, p4 = _four_players()
    balanced = (p4, p1, p2, p3)
    identity = (p1, p2, p3, p4)
    search = LineupSearch(
        _four_players(),
        _single_court(),
        SearchConfig(trials=2, progress_every=0),
        generator=ScriptedGenerator([balanced, identity]),
    )

    result = search.run()

    assert result.best.assignment == balanced
    assert result.best.trial == 0


def test_ties_keep_earliest_candidate():
    p1, p2, p3, p4 = _four_players()
    first = (p1, p2, p3, p4)
    tied = (p3, p4, p1, p2)
    search = LineupSearch(
        _four_players(),
        _single_court(),
        SearchConfig(trials=2, progress_every=0),
        generator=ScriptedGenerator([first, tied]),
    )

    assert evaluate(first, search.template) == evaluate(tied, search.template)

    result = search.run()

    assert result.best.assignment == first
    assert result.best.trial == 0


def test_single_trial_best_equals_candidate():
    roster = default_roster()
    template = default_template()
    candidate = PermutationGenerator(roster, seed=21).shuffle()
    search = LineupSearch(
        roster,
        template,
        SearchConfig(trials=1, seed=21, progress_every=0),
    )

    result = search.run()

    assert result.trials == 1
    assert result.best.assignment == candidate
    assert result.best.score == evaluate(candidate, template)


def test_best_is_monotonic_and_below_every_trial():
    roster = default_roster()
    template = default_template()
    observed = []
    search = LineupSearch(
        roster,
        template,
        SearchConfig(trials=300, seed=4),
        on_trial=lambda trial, score, assignment: observed.append(score.worst_case),
    )

    history = []
    for trial in range(search.config.trials):
        search.consider(trial, search.generator.shuffle())
        history.append(search.best_result.score.worst_case)

    assert len(observed) == 300
    assert all(later <= earlier for earlier, later in zip(history, history[1:]))
    assert history[-1] == min(observed)


def test_progress_every_throttles_callback():
    calls = []
    search = LineupSearch(
        default_roster(),
        default_template(),
        SearchConfig(trials=25, seed=2, progress_every=10),
        on_trial=lambda trial, score, assignment: calls.append(trial),
    )

    search.run()

    assert calls == [0, 10, 20]


def test_roster_must_fit_template():
    with pytest.raises(InvalidRosterException):
        LineupSearch(_four_players(), default_template())


def test_result_without_best_raises():
    with pytest.raises(SearchStateException):
        SearchResult(best_result=None, trials=0).best


@pytest.mark.parametrize(
    "kwargs",
    [
        {"trials": 0},
        {"trials": -5},
        {"trials": 1.5},
        {"seed": "abc"},
        {"progress_every": -1},
        {"progress_every": True},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(InvalidConfigurationException):
        SearchConfig(**kwargs)


def test_config_dict_round_trip_and_defaults():
    config = SearchConfig(trials=10, seed=3, progress_every=0)

    assert SearchConfig.from_dict(config.to_dict()) == config
    assert SearchConfig.from_dict({}) == SearchConfig()
    assert SearchConfig.from_dict({"trials": 5, "extra": 1}).trials == 5


def test_load_config(tmp_path):
    path = tmp_path / "search.json"
    path.write_text('{"trials": 40, "seed": 8}', encoding="utf-8")

    config = load_config(path)

    assert config == SearchConfig(trials=40, seed=8, progress_every=1)


def test_load_config_errors(tmp_path):
    with pytest.raises(MissingConfigurationException):
        load_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{trials: }", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        load_config(broken)

    wrong_type = tmp_path / "list.json"
    wrong_type.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        load_config(wrong_type)
