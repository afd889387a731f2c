import pytest

from blog_seo.text import (
    ContentStats,
    count_headings,
    count_images,
    count_sentences,
    count_words,
    flesch_reading_ease,
    keyword_density,
    strip_html,
)


def test_strip_html():
    assert strip_html("<p>Hello <b>world</b></p>") == "Hello world"
    assert strip_html("") == ""


def test_count_words():
    assert count_words("<p>one two three</p>") == 3
    assert count_words("   ") == 0


def test_malformed_html_is_plain_text():
    assert count_words("<p>unclosed <b text") == 3


@pytest.mark.parametrize("text,expected", [
    ("First. Second! Third? ", 3),
    ("No punctuation", 1),
    ("Wait... what?!", 2),
    ("", 0),
    ("...", 0),
])
def test_count_sentences(text, expected):
    assert count_sentences(text) == expected


class TestKeywordDensity:
    def test_phrase_matches(self):
        text = "react hooks are great. I love react hooks"
        assert keyword_density(text, "React Hooks") == pytest.approx(25.0)

    def test_punctuation_is_not_normalized(self):
        assert keyword_density("I like hooks, really", "hooks") == 0.0

    def test_empty_inputs(self):
        assert keyword_density("some text", "") == 0.0
        assert keyword_density("", "react") == 0.0

    def test_keyword_longer_than_content(self):
        assert keyword_density("react", "react hooks guide") == 0.0


class TestReadability:
    def test_no_sentences(self):
        assert flesch_reading_ease("") == pytest.approx(79.935)

    def test_ten_word_sentence(self):
        text = "one two three four five six seven eight nine ten."
        assert flesch_reading_ease(text) == pytest.approx(69.785)

    def test_readability_score_is_clamped(self):
        stats = ContentStats.from_html("word " * 200)
        assert stats.flesch_score < 0
        assert stats.readability_score == 0.0


def test_count_headings():
    html = "<h1>a</h1><H2 class='x'>b</H2><hr><header>c</header><h7>d</h7>"
    assert count_headings(html) == 2


def test_count_images():
    html = (
        '<img src="a.png" alt="A">'
        '<img src="b.png">'
        '<img alt="" src="c.png">'
        '<img alt="   " src="d.png">'
        "<IMG ALT=logo>"
        "<img src='e.png' alt='Single quoted'/>"
    )
    assert count_images(html) == (6, 3)


def test_data_alt_is_not_alt():
    assert count_images('<img data-alt="x" src="a.png">') == (1, 0)


def test_content_stats():
    html = '<h2>Intro</h2>\n<p>React hooks rock. Use react hooks.</p>\n<img src="a" alt="b">'
    stats = ContentStats.from_html(html, "react hooks")
    assert stats.word_count == 7
    assert stats.sentence_count == 2
    assert stats.heading_count == 1
    assert stats.image_count == 1
    assert stats.images_with_alt == 1
    # "hooks." keeps its period, so only the first occurrence counts
    assert stats.keyword_density == pytest.approx(100 / 7)
