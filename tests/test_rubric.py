from blog_seo.models import IssueType, Status
from blog_seo.rubric import (
    RUBRIC,
    SLUG_RULES,
    STOP_WORDS,
    make_result,
    max_possible_score,
)


def test_check_order():
    assert list(RUBRIC) == [
        "title-length",
        "seo-title",
        "meta-description",
        "content-length",
        "keyword-in-title",
        "keyword-density",
        "url-structure",
        "readability",
        "headings",
        "images",
    ]


def test_max_possible_score():
    assert max_possible_score(with_keyword=True) == 100
    assert max_possible_score(with_keyword=False) == 80


def test_points_are_fixed_and_non_negative():
    for rule in RUBRIC.values():
        for status in Status:
            assert rule.points(status) in (0, 5, 10)
        assert rule.max_score == 10


def test_keyword_checks_are_optional():
    optional = [check_id for check_id, rule in RUBRIC.items() if rule.requires_keyword]
    assert optional == ["keyword-in-title", "keyword-density"]


def test_keyword_in_title_warning_earns_nothing():
    assert RUBRIC["keyword-in-title"].points(Status.WARNING) == 0


def test_length_bands():
    assert RUBRIC["title-length"].thresholds == {"min": 30, "max": 60}
    assert RUBRIC["seo-title"].thresholds == {"min": 50, "max": 60}
    assert RUBRIC["meta-description"].thresholds == {"min": 150, "max": 160}


def test_make_result():
    result = make_result("headings", Status.WARNING, "One heading")
    assert result.name == "Heading Structure"
    assert result.score == 5
    assert result.max_score == 10


def test_slug_penalties():
    penalties = {name: rule.penalty for name, rule in SLUG_RULES.items()}
    assert penalties == {
        "required": 50,
        "too-long": 20,
        "getting-long": 10,
        "invalid-characters": 30,
        "uppercase": 15,
        "double-hyphen": 10,
        "edge-hyphen": 10,
        "stop-words": 5,
        "leading-digit": 5,
        "too-many-words": 5,
    }
    errors = [name for name, rule in SLUG_RULES.items() if rule.issue_type == IssueType.ERROR]
    assert errors == ["required", "invalid-characters"]


def test_stop_words():
    assert len(STOP_WORDS) == 30
    assert {"the", "should", "been"} <= STOP_WORDS
