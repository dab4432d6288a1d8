"""
Keyword-driven resume section segmentation.

Each line is checked against SECTION_KEYWORDS in order. A line containing any
keyword of a section becomes that section's header: it switches the active
section and is consumed. Every other non-empty line is stored under the active
section. Lines before the first header belong to no section and are dropped.
"""

import logging
from typing import Dict, List, Optional, Tuple

from app.core.schemas import SectionMap

logger = logging.getLogger(__name__)

# Precedence is list order: a line matching several sections goes to the first.
SECTION_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("contact", ("contact", "email", "phone")),
    ("summary", ("summary", "objective", "profile")),
    ("experience", ("experience", "employment", "work history")),
    ("education", ("education", "academic")),
    ("skills", ("skills", "technologies", "proficiencies")),
    ("projects", ("project", "portfolio")),
]

SECTION_KEYS: Tuple[str, ...] = tuple(key for key, _ in SECTION_KEYWORDS)


def detect_section_header(line: str) -> Optional[str]:
    """
    Return the section a line opens, or None if it is not a header.

    Matching is substring containment on the trimmed, lowercased line, so
    "Work Experience", "EXPERIENCE:" and "my experience at Acme" all match.
    """
    normalized = line.strip().lower()
    for section, keywords in SECTION_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return section
    return None


def segment_sections(text: str) -> SectionMap:
    buckets: Dict[str, List[str]] = {key: [] for key in SECTION_KEYS}
    current_section: Optional[str] = None

    for idx, line in enumerate(text.split("\n")):
        section = detect_section_header(line)
        if section:
            logger.debug(f"SECTION HEADER DETECTED at line {idx}: '{line.strip()}' -> section='{section}'")
            current_section = section
            continue

        trimmed = line.strip()
        if current_section and trimmed:
            buckets[current_section].append(trimmed)

    return SectionMap(**buckets)
