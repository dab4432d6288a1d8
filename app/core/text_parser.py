import logging
from typing import Dict, List

from app.core.confidence_calculator import ConfidenceCalculator
from app.core.project_extractor import EXTRACTION_EXPERIENCE_FALLBACK, extract_projects_with_method
from app.core.resume_message import compose_resume_message
from app.core.schemas import FieldConfidence, ParsedResume, ParseResponse
from app.core.section_segmenter import segment_sections
from app.core.tech_tagger import tag_technologies
from app.core.text_normalization import MAX_DESCRIPTION_LENGTH

logger = logging.getLogger(__name__)


def _parse_with_method(text: str):
    sections = segment_sections(text)
    technologies = tag_technologies(text)
    projects, method = extract_projects_with_method(sections.projects, sections.experience, technologies)
    logger.debug(f"Parsed resume: {len(projects)} project(s) via {method}, {len(technologies)} technologies")
    return ParsedResume(sections=sections, projects=projects, technologies=technologies), method


def parse(text: str) -> ParsedResume:
    """
    Convert raw resume text into sections, projects and technologies.

    Pure and deterministic; never raises for string input. Unrecognizable
    text yields empty sections, projects and technologies.
    """
    parsed, _ = _parse_with_method(text)
    return parsed


def parse_text_to_response(text: str) -> ParseResponse:
    """
    Parse resume text and wrap the result with confidence metadata, warnings
    and the summary message for the dialogue layer.
    """
    parsed, method = _parse_with_method(text)
    confidence_scores: Dict[str, FieldConfidence] = {}
    warnings: List[str] = []

    conf, sections_method, populated = ConfidenceCalculator.sections(parsed.sections)
    confidence_scores["sections"] = FieldConfidence(
        field_name="sections",
        confidence=conf,
        extraction_method=sections_method,
        reasons=[f"{populated} of 6 sections populated"],
    )
    if populated == 0:
        warnings.append("No section headers detected. Resume structure could not be inferred.")

    conf, projects_method = ConfidenceCalculator.projects(method)
    confidence_scores["projects"] = FieldConfidence(
        field_name="projects",
        confidence=conf,
        extraction_method=projects_method,
        reasons=[f"Found {len(parsed.projects)} project(s)"],
    )
    if not parsed.projects:
        warnings.append("No projects identified.")
    elif method == EXTRACTION_EXPERIENCE_FALLBACK:
        warnings.append("Projects were inferred from the experience section; titles may be full sentences.")

    conf, tech_method = ConfidenceCalculator.technologies(len(parsed.technologies))
    tech_reasons = [f"Matched {len(parsed.technologies)} vocabulary term(s)"]
    if parsed.technologies:
        tech_reasons.append("Substring matching may over-match (e.g. 'java' inside 'javascript')")
    confidence_scores["technologies"] = FieldConfidence(
        field_name="technologies",
        confidence=conf,
        extraction_method=tech_method,
        reasons=tech_reasons,
    )

    for project in parsed.projects:
        if len(project.description) > MAX_DESCRIPTION_LENGTH:
            warnings.append(f"Description of project '{project.title}' was truncated to {MAX_DESCRIPTION_LENGTH} characters.")

    parse_quality = ConfidenceCalculator.calculate_overall_parse_quality({
        field: c.confidence for field, c in confidence_scores.items()
    })

    return ParseResponse(
        parsed_resume=parsed,
        confidence_scores=confidence_scores,
        parse_quality=parse_quality,
        summary_message=compose_resume_message(parsed, text),
        warnings=warnings,
    )
