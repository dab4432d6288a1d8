"""
Test suite for per-field confidence scoring and parse quality.
"""

from app.core.confidence_calculator import ConfidenceCalculator
from app.core.schemas import SectionMap
from app.core.text_parser import parse_text_to_response


FULL_RESUME = """Jane Doe
Contact
jane@example.com
Summary
Backend engineer.
Work History
Acme Corp 2019-2023
Education
BSc Computer Science
Skills
Python, Docker
Projects
Tracker:
A python tool."""


def test_confidence_scores_present_in_response():
    resp = parse_text_to_response(FULL_RESUME)

    assert set(resp.confidence_scores.keys()) == {"sections", "projects", "technologies"}
    assert resp.confidence_scores["sections"].confidence == 1.0
    assert resp.confidence_scores["projects"].confidence == 0.8
    assert resp.confidence_scores["technologies"].confidence == 0.7
    assert resp.parse_quality == "high"
    assert resp.warnings == []


def test_unstructured_text_is_low_quality_with_warnings():
    resp = parse_text_to_response("Jane Doe\nSeattle, WA\nEnjoys hiking and cooking.")

    assert resp.parse_quality == "low"
    assert resp.confidence_scores["sections"].extraction_method == "no_section_headers"
    assert resp.confidence_scores["projects"].extraction_method == "not_found"
    assert any("No section headers" in w for w in resp.warnings)
    assert "No projects identified." in resp.warnings


def test_projects_only_resume_is_medium_quality():
    resp = parse_text_to_response("Projects\nTracker:\nA python tool.")

    assert resp.confidence_scores["sections"].confidence == 0.5
    assert resp.parse_quality == "medium"


def test_fallback_projects_lower_confidence_and_warn():
    resp = parse_text_to_response("Experience\nBuilt a search service in python.")

    assert resp.confidence_scores["projects"].confidence == 0.5
    assert resp.confidence_scores["projects"].extraction_method == "experience_fallback"
    assert any("experience section" in w for w in resp.warnings)


def test_truncated_description_warns():
    resp = parse_text_to_response("Projects\nWeather Station:\n" + "x" * 600)
    assert any("truncated" in w for w in resp.warnings)


def test_sections_confidence_scales_with_populated_sections():
    assert ConfidenceCalculator.sections(SectionMap()) == (0.0, "no_section_headers", 0)
    assert ConfidenceCalculator.sections(SectionMap(skills=["Python"])) == (0.5, "keyword_headers", 1)
    assert ConfidenceCalculator.sections(SectionMap(skills=["a"], projects=["b"], contact=["c"])) == (0.7, "keyword_headers", 3)


def test_overall_quality_tiers():
    assert ConfidenceCalculator.calculate_overall_parse_quality(
        {"sections": 1.0, "projects": 0.8, "technologies": 0.7}
    ) == "high"
    assert ConfidenceCalculator.calculate_overall_parse_quality(
        {"sections": 0.5, "projects": 0.5, "technologies": 0.7}
    ) == "medium"
    assert ConfidenceCalculator.calculate_overall_parse_quality({}) == "low"
