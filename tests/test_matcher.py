import pytest

from required_labels.utils.errors import ConfigError
from required_labels.utils.matcher import match_exact, match_labels, match_regex
from required_labels.utils.models import Mode, Policy


def _policy(patterns, regex=False, mode=Mode.EXACTLY, count=1):
    return Policy(mode=mode, count=count, patterns=tuple(patterns), patterns_are_regex=regex)


def test_exact_returns_patterns_not_applied_labels():
    assert match_exact(["DO NOT MERGE"], ["Do Not Merge"]) == ["Do Not Merge"]


def test_exact_keeps_pattern_order_and_ignores_unmatched():
    applied = ["bug", "enhancement"]
    assert match_exact(applied, ["enhancement", "triage", "bug"]) == ["enhancement", "bug"]


def test_exact_on_empty_applied_set():
    assert match_exact([], ["bug"]) == []


def test_regex_is_case_insensitive_and_returns_applied_labels():
    applied = ["Needs Code Review", "Needs QA Review", "Do Not Merge"]
    assert match_regex(applied, ["needs .*"]) == ["Needs Code Review", "Needs QA Review"]


def test_regex_label_matching_several_patterns_counts_once():
    assert match_regex(["enhancement"], ["enhance.*", "enh", "ment$"]) == ["enhancement"]


def test_regex_multiple_patterns_or_semantics():
    assert match_regex(["backport 3.7"], ["backport/none", r"backport \d.\d"]) == ["backport 3.7"]


def test_invalid_regex_is_config_error():
    with pytest.raises(ConfigError, match=r"\[bug\(\]"):
        match_regex(["bug"], ["bug("])


def test_match_labels_dispatches_on_regex_flag():
    applied = ["enhancement", "bug"]
    assert match_labels(applied, _policy(["enhance.*"], regex=True)) == ["enhancement"]
    assert match_labels(applied, _policy(["enhance.*"], regex=False)) == []


def test_bug_matches_pattern_bug_in_both_modes():
    assert match_labels(["Bug"], _policy(["bug"])) == ["bug"]
    assert match_labels(["Bug"], _policy(["bug"], regex=True)) == ["Bug"]
