"""
Project extraction from segmented resume sections.

Two mutually exclusive passes:
- projects_section: walk the PROJECTS lines, starting a new project at every
  line that looks like a title and folding the following lines into its
  description.
- experience_fallback: only when the first pass finds nothing, walk the
  EXPERIENCE lines and treat achievement-style lines ("Developed ...",
  "Built ...", "Project: ...") as project titles.

Both passes are a fold over lines carrying (projects, pending) with a final
flush. Descriptions are normalized once at the end regardless of the pass.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from app.core.schemas import ProjectRecord
from app.core.tech_tagger import scan_line_technologies
from app.core.text_normalization import normalize_description

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 100

ALL_CAPS_RUN_RE = re.compile(r"[A-Z]{3,}")
# "Capitalized words" followed by ':', '|', or a dash that ends the line or precedes a word
TITLE_SEPARATOR_RE = re.compile(r"^[A-Z][\w\s-]+(\s*[-–]\s*(\w+|$)|:|\|)", re.ASCII)
TRAILING_TITLE_PUNCT_RE = re.compile(r"[:\-–]$")

PROJECT_TRIGGERS = ("project:", "developed", "implemented", "built", "created")

EXTRACTION_PROJECTS_SECTION = "projects_section"
EXTRACTION_EXPERIENCE_FALLBACK = "experience_fallback"
EXTRACTION_NOT_FOUND = "not_found"


@dataclass
class _PendingProject:
    title: str
    description: str = ""
    technologies: List[str] = field(default_factory=list)

    def add_line(self, line: str, technologies: Sequence[str]) -> None:
        self.description += " " + line.strip()
        scan_line_technologies(line, technologies, self.technologies)


def is_project_title(line: str) -> bool:
    """
    Heuristic: short line that ends with ':', has an ALL-CAPS run, or reads
    like "Name: ...", "Name | ...", "Name - tagline" / "Name -".
    """
    t = line.strip()
    if len(t) >= MAX_TITLE_LENGTH:
        return False
    return (
        t.endswith(":")
        or bool(ALL_CAPS_RUN_RE.search(t))
        or bool(TITLE_SEPARATOR_RE.match(t))
    )


def clean_project_title(line: str) -> str:
    """Drop one trailing ':', '-' or '–'. Falls back to the trimmed line if nothing would remain."""
    t = line.strip()
    title = TRAILING_TITLE_PUNCT_RE.sub("", t).strip()
    return title or t


def _extract_from_projects_section(lines: Sequence[str], technologies: Sequence[str]) -> List[_PendingProject]:
    projects: List[_PendingProject] = []
    pending: Optional[_PendingProject] = None

    for line in lines:
        trimmed = line.strip()
        if is_project_title(trimmed):
            if pending:
                projects.append(pending)
            pending = _PendingProject(title=clean_project_title(trimmed))
            logger.debug(f"PROJECT TITLE DETECTED: '{pending.title}'")
        elif pending:
            pending.add_line(line, technologies)

    if pending:
        projects.append(pending)
    return projects


def _extract_from_experience(lines: Sequence[str], technologies: Sequence[str]) -> List[_PendingProject]:
    projects: List[_PendingProject] = []
    pending: Optional[_PendingProject] = None
    in_project = False

    for line in lines:
        lowered = line.strip().lower()
        if any(trigger in lowered for trigger in PROJECT_TRIGGERS):
            if pending:
                projects.append(pending)
            pending = _PendingProject(title=line.strip())
            # Trigger lines are full sentences and usually name the stack
            scan_line_technologies(line, technologies, pending.technologies)
            in_project = True
            logger.debug(f"Fallback: project trigger in experience line '{pending.title}'")
        elif in_project and pending:
            pending.add_line(line, technologies)

    if pending:
        projects.append(pending)
    return projects


def extract_projects_with_method(
    projects_lines: Sequence[str],
    experience_lines: Sequence[str],
    technologies: Sequence[str],
) -> Tuple[List[ProjectRecord], str]:
    """
    Extract projects and report which pass produced them.

    Args:
        projects_lines: Lines of the PROJECTS section
        experience_lines: Lines of the EXPERIENCE section
        technologies: Terms already matched in the whole document, in vocabulary order

    Returns:
        (projects, extraction_method) where extraction_method is one of
        "projects_section", "experience_fallback", "not_found"
    """
    method = EXTRACTION_NOT_FOUND
    pending = _extract_from_projects_section(projects_lines, technologies)
    if pending:
        method = EXTRACTION_PROJECTS_SECTION
    elif experience_lines:
        logger.debug("No projects in PROJECTS section, scanning EXPERIENCE for project mentions")
        pending = _extract_from_experience(experience_lines, technologies)
        if pending:
            method = EXTRACTION_EXPERIENCE_FALLBACK
            logger.warning(f"Project fallback triggered: {len(pending)} project(s) recovered from experience section")

    projects = [
        ProjectRecord(
            title=p.title,
            description=normalize_description(p.description),
            technologies=list(p.technologies),
        )
        for p in pending
    ]
    return projects, method


def extract_projects(
    projects_lines: Sequence[str],
    experience_lines: Sequence[str],
    technologies: Sequence[str],
) -> List[ProjectRecord]:
    projects, _ = extract_projects_with_method(projects_lines, experience_lines, technologies)
    return projects
