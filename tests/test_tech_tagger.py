"""Tests for technology keyword tagging."""

from app.core.tech_tagger import TECH_VOCABULARY, scan_line_technologies, tag_technologies


def test_output_follows_vocabulary_order_not_document_order():
    techs = tag_technologies("I use docker daily. Before that, python.")
    assert techs == ["python", "docker"]


def test_case_insensitive_and_deduplicated():
    techs = tag_technologies("Python, PYTHON and python again")
    assert techs == ["python"]


def test_substring_false_positive_is_kept():
    """'java' matches inside 'javascript'; substring matching accepts this."""
    techs = tag_technologies("Frontend in JavaScript")
    assert techs == ["javascript", "java"]


def test_multi_word_and_symbol_terms():
    techs = tag_technologies("Designed a REST API, wired CI/CD, wrote C++ and C#.")
    assert "rest api" in techs
    assert "ci/cd" in techs
    assert "c++" in techs
    assert "c#" in techs


def test_no_match_and_empty_text():
    assert tag_technologies("Enjoys hiking and cooking.") == []
    assert tag_technologies("") == []


def test_every_match_is_a_vocabulary_term():
    techs = tag_technologies("React Native app on Android and iOS backed by Firebase")
    assert techs == [t for t in TECH_VOCABULARY if t in techs]
    assert {"react", "react native", "android", "ios", "firebase"} <= set(techs)


def test_scan_line_keeps_first_seen_order_and_skips_known():
    found = ["docker"]
    scan_line_technologies("Python service in Docker on AWS", ["python", "docker", "aws"], found)
    assert found == ["docker", "python", "aws"]


def test_scan_line_only_checks_given_terms():
    found = []
    scan_line_technologies("Python service", [], found)
    assert found == []
