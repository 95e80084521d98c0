import pytest

from santapairing.models import FailureReason, PairingHistory
from santapairing.pairing.engine import match


def _givers_and_recipients(pairs):
    return sorted(g for g, _ in pairs), sorted(r for _, r in pairs)


def test_two_participants_without_reciprocal_is_infeasible():
    result = match(["A", "B"], allow_reciprocal=False)

    assert not result
    assert result.reason == FailureReason.EXHAUSTED
    assert result.pairs == []
    # A->B, B stuck, back to A which has nothing else
    assert result.steps == 3
    assert result.backtracks == 1


def test_two_participants_with_reciprocal_swap():
    result = match(["A", "B"], allow_reciprocal=True)

    assert result
    assert result.pairs == [("A", "B"), ("B", "A")]


def test_three_participants_cover_everyone():
    result = match(["A", "B", "C"], allow_reciprocal=True)

    assert result
    assert len(result.pairs) == 3
    givers, recipients = _givers_and_recipients(result.pairs)
    assert givers == ["A", "B", "C"]
    assert recipients == ["A", "B", "C"]
    assert all(g != r for g, r in result.pairs)


def test_single_step_backtrack_recovers_without_reshuffle():
    trace = []
    result = match(["A", "B", "C"], allow_reciprocal=True, on_step=trace.append)

    # B first takes A, which leaves C only itself; B is retried with C
    assert result.pairs == [("A", "B"), ("B", "C"), ("C", "A")]
    assert result.backtracks == 1
    assert result.steps == 5
    assert [(s.giver, s.recipient) for s in trace] == [
        ("A", "B"),
        ("B", "A"),
        ("C", None),
        ("B", "C"),
        ("C", "A"),
    ]
    assert trace[2].is_dead_end
    assert trace[2].available == ("C",)
    # A is handed back in participant order
    assert trace[3].available == ("A", "C")
    assert trace[3].candidates == ("A", "C")


def test_three_participants_without_reciprocal_needs_no_backtrack():
    result = match(["A", "B", "C"], allow_reciprocal=False)

    assert result.pairs == [("A", "B"), ("B", "C"), ("C", "A")]
    assert result.backtracks == 0


def test_single_group_of_two_fails_at_first_giver():
    trace = []
    result = match(
        ["A", "B"], groups=[["A", "B"]], allow_reciprocal=True, on_step=trace.append
    )

    assert not result
    assert result.reason == FailureReason.EXHAUSTED
    assert result.steps == 1
    assert result.backtracks == 0
    assert trace[0].candidates == ()
    assert trace[0].rejected == ("A", "B")


def test_history_excludes_previous_recipient():
    result = match(["A", "B", "C"], history={"A": ["B"]}, allow_reciprocal=True)

    assert result.pairs == [("A", "C"), ("B", "A"), ("C", "B")]


def test_history_accepts_pairing_history_model():
    history = PairingHistory.from_pairs([("A", "B")])
    result = match(["A", "B", "C"], history=history, allow_reciprocal=True)

    assert dict(result.pairs)["A"] == "C"


@pytest.mark.parametrize(
    "allow_reciprocal, expected",
    [
        (True, [("A1", "B1"), ("A2", "B2"), ("B1", "A1"), ("B2", "A2")]),
        (False, [("A1", "B1"), ("A2", "B2"), ("B1", "A2"), ("B2", "A1")]),
    ],
)
def test_households_never_draw_each_other(allow_reciprocal, expected):
    result = match(
        ["A1", "A2", "B1", "B2"],
        groups=[["A1", "A2"], ["B1", "B2"]],
        allow_reciprocal=allow_reciprocal,
    )

    assert result.pairs == expected


def test_participant_in_two_groups_avoids_both():
    result = match(
        ["A", "B", "C", "D"],
        groups=[["A", "B"], ["B", "C"]],
        allow_reciprocal=True,
    )

    assert result.pairs == [("A", "C"), ("B", "D"), ("C", "A"), ("D", "B")]


@pytest.mark.parametrize("participants", [[], ["A"]])
def test_degenerate_input_fails_cleanly(participants):
    result = match(participants, allow_reciprocal=True)

    assert not result
    assert result.reason == FailureReason.EXHAUSTED
    assert result.pairs == []


def test_step_limit_stops_attempt():
    limited = match(["A", "B", "C"], allow_reciprocal=True, max_steps=3)
    enough = match(["A", "B", "C"], allow_reciprocal=True, max_steps=5)

    assert not limited
    assert limited.reason == FailureReason.STEP_LIMIT
    assert limited.pairs == []
    assert enough
    assert enough.steps == 5


def test_same_input_gives_same_output():
    participants = ["Ann", "Bob", "Carol", "Dave", "Erin", "Frank", "Gina", "Hank"]
    groups = [["Ann", "Bob"], ["Carol", "Dave", "Erin"]]
    history = {"Frank": ["Gina"], "Ann": ["Carol", "Dave"]}

    first = match(participants, groups, history, allow_reciprocal=False)
    second = match(participants, groups, history, allow_reciprocal=False)

    assert first
    assert first.pairs == second.pairs


def test_inputs_are_not_mutated():
    participants = ["A", "B", "C", "D"]
    groups = [["A", "B"]]
    history = {"C": {"D"}}

    match(participants, groups, history)

    assert participants == ["A", "B", "C", "D"]
    assert groups == [["A", "B"]]
    assert history == {"C": {"D"}}


def test_dead_end_unwinds_two_givers():
    trace = []
    history = {"A": ["C"], "B": ["C", "D"], "C": ["D"]}

    result = match(
        ["A", "B", "C", "D"],
        history=history,
        allow_reciprocal=True,
        on_step=trace.append,
    )

    # C is stuck, B has nothing after A, so A moves on to its next candidate
    assert [(s.giver, s.recipient) for s in trace] == [
        ("A", "B"),
        ("B", "A"),
        ("C", None),
        ("B", None),
        ("A", "D"),
        ("B", "A"),
        ("C", "B"),
        ("D", "C"),
    ]
    assert trace[3].available == ("A", "C", "D")
    assert trace[3].candidates == ("A",)
    assert trace[4].candidates == ("B", "D")
    assert result.pairs == [("A", "D"), ("B", "A"), ("C", "B"), ("D", "C")]
    assert result.steps == 8
    assert result.backtracks == 2
