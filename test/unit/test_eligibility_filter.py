from __future__ import annotations

from domain.services import EligibilityFilter


def test_company_match_is_case_insensitive_substring() -> None:
    rules = EligibilityFilter(excluded_companies=["recruiting"])
    assert rules.company_excluded("Acme Recruiting Partners") == "recruiting"
    assert rules.company_excluded("Acme Labs") is None


def test_title_match_respects_word_boundaries() -> None:
    rules = EligibilityFilter(excluded_titles=["Java"])
    assert rules.title_excluded("Senior Java Engineer") == "Java"
    assert rules.title_excluded("Javascript Developer") is None
    assert rules.title_excluded("Backend (java)") == "java"


def test_title_pattern_with_symbols_matches_at_end() -> None:
    rules = EligibilityFilter(excluded_titles=["C++", ".NET"])
    assert rules.title_excluded("Developer C++") == "C++"
    assert rules.title_excluded("Senior .NET/Azure dev") == ".NET"
    assert rules.title_excluded("C Developer") is None


def test_missing_values_never_reject() -> None:
    rules = EligibilityFilter(excluded_companies=["acme"], excluded_titles=["java"])
    assert rules.company_excluded(None) is None
    assert rules.title_excluded(None) is None
    assert rules.evaluate(company=None, title=None).eligible


def test_empty_rule_lists_never_reject() -> None:
    rules = EligibilityFilter(excluded_companies=["", "  "], excluded_titles=[])
    assert rules.company_excluded("Anything") is None
    assert rules.title_excluded("Anything at all") is None


def test_evaluate_reports_reason() -> None:
    rules = EligibilityFilter(excluded_companies=["globex"], excluded_titles=["intern"])
    decision = rules.evaluate(company="Globex Corp", title="Intern")
    assert not decision.eligible
    assert decision.reason == "company"
    assert decision.matched == "globex"

    decision = rules.evaluate(company="Initech", title="Summer Intern")
    assert decision.reason == "title"
    assert rules.evaluate(company="Initech", title="Engineer").eligible
