from santapairing.models import PairingHistory
from santapairing.utils.validation import (
    validate_groups,
    validate_history,
    validate_options,
    validate_participants,
)
from santapairing.validation.checker import (
    CriterionStatus,
    create_pairing_validator,
    validate_pairs,
)

PARTICIPANTS = ["Ann", "Bob", "Carol", "Dave"]


def _criteria(report):
    return {result.criterion: result.status for result in report.criteria_results}


# ========== Draw checker ==========


def test_valid_draw_passes_every_rule():
    report = create_pairing_validator().validate(
        [("Ann", "Carol"), ("Bob", "Dave"), ("Carol", "Bob"), ("Dave", "Ann")],
        participants=PARTICIPANTS,
        groups=[["Ann", "Bob"]],
        history={"Ann": ["Dave"]},
        allow_reciprocal=False,
    )

    assert report
    assert report.overall_status == CriterionStatus.COMPLIANT
    assert report.summary == "All 5 rules satisfied"


def test_incomplete_draw_is_flagged():
    report = validate_pairs(
        [("Ann", "Bob"), ("Bob", "Ann"), ("Carol", "Ann")],
        participants=PARTICIPANTS,
        allow_reciprocal=True,
    )

    assert _criteria(report)["S1"] == CriterionStatus.VIOLATION
    s1 = report.violations[0]
    assert "Dave" in s1.details["givers"]
    assert "Ann" in s1.details["recipients"]


def test_self_pairing_is_flagged():
    report = validate_pairs(
        [("Ann", "Ann"), ("Bob", "Bob")],
        participants=["Ann", "Bob"],
        allow_reciprocal=True,
    )

    assert _criteria(report)["S2"] == CriterionStatus.VIOLATION
    assert _criteria(report)["S1"] == CriterionStatus.COMPLIANT


def test_same_group_pairing_is_flagged():
    report = validate_pairs(
        [("Ann", "Bob"), ("Bob", "Carol"), ("Carol", "Dave"), ("Dave", "Ann")],
        participants=PARTICIPANTS,
        groups=[["Ann", "Bob"]],
        allow_reciprocal=True,
    )

    assert _criteria(report)["S3"] == CriterionStatus.VIOLATION
    assert report.violations[0].details["pairs"] == [("Ann", "Bob")]


def test_repeat_from_history_is_flagged():
    report = validate_pairs(
        [("Ann", "Bob"), ("Bob", "Carol"), ("Carol", "Dave"), ("Dave", "Ann")],
        participants=PARTICIPANTS,
        history=PairingHistory.from_pairs([("Carol", "Dave")]),
        allow_reciprocal=True,
    )

    assert _criteria(report)["S4"] == CriterionStatus.VIOLATION
    assert "S4" in report.summary


def test_reciprocal_pair_depends_on_flag():
    pairs = [("Ann", "Bob"), ("Bob", "Ann"), ("Carol", "Dave"), ("Dave", "Carol")]

    strict = validate_pairs(pairs, participants=PARTICIPANTS, allow_reciprocal=False)
    relaxed = validate_pairs(pairs, participants=PARTICIPANTS, allow_reciprocal=True)

    assert _criteria(strict)["S5"] == CriterionStatus.VIOLATION
    assert strict.violations[0].details["pairs"] == [("Ann", "Bob"), ("Carol", "Dave")]
    assert _criteria(relaxed)["S5"] == CriterionStatus.NOT_APPLICABLE
    assert relaxed


# ========== Input validation ==========


def test_participant_checks():
    assert validate_participants(["Ann", "Bob"])
    assert not validate_participants([])
    assert not validate_participants(["Ann", "  "])
    duplicates = validate_participants(["Ann", "Bob", "Ann", "Ann"])
    assert not duplicates
    assert duplicates.offenders == ["Ann"]


def test_group_and_history_checks():
    assert validate_groups([["Ann", "Bob"]], PARTICIPANTS)
    assert validate_groups([["Ann", "Zed"], ["Zed"]], PARTICIPANTS).offenders == ["Zed"]
    assert validate_history({"Ann": ["Bob"]}, PARTICIPANTS)
    assert validate_history({"Old": ["Ann"]}, PARTICIPANTS).offenders == ["Old"]


def test_options_check_finds_stranded_participants():
    assert validate_options(PARTICIPANTS, [["Ann", "Bob"]], {"Ann": ["Carol"]})

    no_recipient = validate_options(
        PARTICIPANTS, [["Ann", "Bob"]], {"Ann": ["Carol", "Dave"]}
    )
    assert not no_recipient
    assert no_recipient.offenders == ["Ann"]
    assert "to give to" in no_recipient.error_message

    no_giver = validate_options(
        PARTICIPANTS, (), {"Ann": ["Dave"], "Bob": ["Dave"], "Carol": ["Dave"]}
    )
    assert not no_giver
    assert no_giver.offenders == ["Dave"]
    assert "give to Dave" in no_giver.error_message


def test_options_check_ignores_reciprocal_rule():
    assert validate_options(["Ann", "Bob"], ())
    assert validate_options(["Ann", "Bob"], [["Ann", "Bob"]]).offenders == [
        "Ann",
        "Bob",
    ]
