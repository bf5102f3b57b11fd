"""Tests for the moderation engine."""

import pytest

from rudeshare.moderation.lexicons import DEATH_THREAT_WORDS, HARASSMENT_WORDS
from rudeshare.moderation.models import Severity
from rudeshare.moderation.moderator import (
    _RUDE_RESPONSES,
    calculate_rudeness_score,
    generate_rude_response,
    is_boosted,
    moderate,
)


# --- Classification ---


def test_empty_content_is_allowed():
    verdict = moderate("")
    assert verdict.severity is Severity.allowed
    assert verdict.rudeness_score == 0
    assert verdict.flagged_terms == ()
    assert not verdict.is_banned


def test_two_polite_words_are_banned():
    verdict = moderate("please thank you")
    assert verdict.severity is Severity.banned_polite
    assert verdict.is_too_polite
    assert verdict.flagged_terms == ("please", "thank you")


def test_single_polite_word_is_tolerated():
    verdict = moderate("thanks for nothing")
    assert verdict.severity is Severity.allowed
    assert not verdict.is_too_polite
    assert verdict.flagged_terms == ("thanks",)


def test_polite_phrases_count_towards_ban():
    verdict = moderate("i hope you are proud of you")
    assert verdict.severity is Severity.banned_polite
    assert verdict.flagged_terms == ("i hope you", "proud of you")


def test_polite_words_reported_before_phrases():
    verdict = moderate("thanks, much love")
    assert verdict.flagged_terms == ("thanks", "much love")


def test_death_threat_is_illegal():
    verdict = moderate("I will kill you")
    assert verdict.severity is Severity.banned_illegal
    assert verdict.is_death_threat
    assert not verdict.is_harassment
    assert verdict.flagged_terms == ("kill",)
    assert verdict.rudeness_score == 0


def test_harassment_is_illegal():
    verdict = moderate("what's your home address")
    assert verdict.severity is Severity.banned_illegal
    assert verdict.is_harassment
    assert not verdict.is_death_threat
    assert verdict.flagged_terms == ("address", "home")


def test_death_threats_flagged_before_harassment():
    verdict = moderate("i will kill your family")
    assert verdict.is_death_threat and verdict.is_harassment
    assert verdict.flagged_terms == ("kill", "family")


def test_illegal_check_short_circuits_politeness():
    verdict = moderate("please thank you or i will murder you")
    assert verdict.severity is Severity.banned_illegal
    assert not verdict.is_too_polite
    assert verdict.flagged_terms == ("murder",)


def test_shouted_threat_scores_zero():
    verdict = moderate("KILL THE VIBE")
    assert verdict.severity is Severity.banned_illegal
    assert verdict.rudeness_score == 0


def test_every_illegal_term_bans():
    for term in DEATH_THREAT_WORDS + HARASSMENT_WORDS:
        verdict = moderate(f"absolute garbage {term} !!!")
        assert verdict.severity is Severity.banned_illegal, term
        assert verdict.rudeness_score == 0


def test_substring_matching_without_word_boundaries():
    # "diet" contains "die"
    assert moderate("I am on a diet").flagged_terms == ("die",)
    # "class" contains "ass"
    verdict = moderate("this class")
    assert verdict.severity is Severity.allowed
    assert verdict.rudeness_score == 5


def test_rude_post_is_allowed_and_scored():
    verdict = moderate("this is fucking garbage and I hate it!!!")
    assert verdict.severity is Severity.allowed
    assert verdict.flagged_terms == ()
    # fuck, garbage, hate = 15; fucking = 3; three "!" = 6; "!!!" = 10
    assert verdict.rudeness_score == 34


def test_polite_ban_still_carries_score():
    verdict = moderate("please thank you, idiot")
    assert verdict.severity is Severity.banned_polite
    assert verdict.rudeness_score == 5


# --- Rudeness scoring ---


def test_filler_only_gets_length_bonus():
    verdict = moderate("x" * 250)
    assert verdict.severity is Severity.allowed
    assert verdict.rudeness_score == 4


def test_length_bonus_starts_above_200():
    assert calculate_rudeness_score("x" * 200) == 0
    assert calculate_rudeness_score("x" * 201) == 4


def test_word_in_both_lists_scores_twice():
    assert calculate_rudeness_score("damn") == 8


def test_overlapping_lexicon_entries_each_count():
    assert calculate_rudeness_score("sucks") == 10


def test_repeated_words_count_separately():
    assert calculate_rudeness_score("trash trash trash") == 15


def test_caps_bonus():
    assert calculate_rudeness_score("SHUT UP NOW") == 15
    assert calculate_rudeness_score("Shut up now") == 0


def test_caps_bonus_needs_more_than_thirty_percent():
    assert calculate_rudeness_score("ABCdefghij") == 0
    assert calculate_rudeness_score("ABCDefghij") == 15


def test_exclamation_bonuses():
    assert calculate_rudeness_score("no!") == 0
    assert calculate_rudeness_score("no!!") == 4
    assert calculate_rudeness_score("no!!!") == 16
    assert calculate_rudeness_score("what???") == 10


def test_score_is_capped_at_100():
    assert calculate_rudeness_score("fuck " * 50) == 100


def test_score_is_monotonic_in_rude_words():
    content = "meh"
    previous = calculate_rudeness_score(content)
    for _ in range(30):
        content += " trash"
        score = calculate_rudeness_score(content)
        assert previous <= score <= 100
        previous = score
    assert previous == 100


def test_score_is_monotonic_in_intensifiers():
    content = "meh"
    previous = calculate_rudeness_score(content)
    for _ in range(40):
        content += " utterly"
        score = calculate_rudeness_score(content)
        assert previous <= score <= 100
        previous = score
    assert previous == 100


def test_is_boosted_threshold():
    assert not is_boosted(79)
    assert is_boosted(80)
    assert is_boosted(100)


# --- Rude responses ---


def test_rude_response_uses_first_term():
    expected = {t.format(term="please") for t in _RUDE_RESPONSES}
    for _ in range(25):
        assert generate_rude_response(["please", "thank you"]) in expected


def test_rude_response_is_random(monkeypatch):
    monkeypatch.setattr("random.choice", lambda seq: seq[-1])
    assert generate_rude_response(["sorry"]) == "Keep your soft sorry nonsense to yourself."


def test_rude_response_requires_a_term():
    with pytest.raises(ValueError):
        generate_rude_response([])


def test_verdict_to_dict():
    data = moderate("please thank you").to_dict()
    assert data["severity"] == "banned_polite"
    assert data["flagged_terms"] == ["please", "thank you"]
