"""
Confidence scoring for resume extraction fields.

Per-field confidence lets downstream consumers judge how much of the parsed
structure to trust before building a conversation around it.

Confidence Scale:
  1.0   = Every section header found
  0.8   = Projects taken from a dedicated PROJECTS section
  0.7   = Technologies matched against the vocabulary (substring, may over-match)
  0.5   = Projects recovered from EXPERIENCE achievement lines
  0.0   = Nothing found
"""

from typing import Dict, Tuple

from app.core.project_extractor import (
    EXTRACTION_EXPERIENCE_FALLBACK,
    EXTRACTION_PROJECTS_SECTION,
)
from app.core.schemas import SectionMap


class ConfidenceCalculator:
    """Central place for all extraction confidence logic."""

    @staticmethod
    def sections(section_map: SectionMap) -> Tuple[float, str, int]:
        """
        Confidence grows with the number of populated sections.

        Returns:
            (confidence, method, populated_section_count)
        """
        populated = sum(1 for lines in section_map.model_dump().values() if lines)
        if populated == 0:
            return 0.0, "no_section_headers", 0
        return round(min(1.0, 0.4 + 0.1 * populated), 2), "keyword_headers", populated

    @staticmethod
    def projects(extraction_method: str) -> Tuple[float, str]:
        if extraction_method == EXTRACTION_PROJECTS_SECTION:
            return 0.8, EXTRACTION_PROJECTS_SECTION
        if extraction_method == EXTRACTION_EXPERIENCE_FALLBACK:
            return 0.5, EXTRACTION_EXPERIENCE_FALLBACK
        return 0.0, "not_found"

    @staticmethod
    def technologies(count: int) -> Tuple[float, str]:
        if count == 0:
            return 0.0, "not_found"
        return 0.7, "vocabulary_substring"

    @staticmethod
    def calculate_overall_parse_quality(field_confidences: Dict[str, float]) -> str:
        """
        Determine overall parse quality based on per-field confidences.

        Quality tiers:
          "high"   : Average of sections, projects, technologies >= 0.75
          "medium" : Average >= 0.5
          "low"    : Otherwise
        """
        core_fields = ["sections", "projects", "technologies"]
        core_confidences = [
            field_confidences.get(field, 0.0) for field in core_fields
        ]

        avg_core = sum(core_confidences) / len(core_confidences)

        if avg_core >= 0.75:
            return "high"
        elif avg_core >= 0.5:
            return "medium"
        else:
            return "low"
