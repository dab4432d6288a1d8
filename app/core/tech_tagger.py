"""
Technology keyword tagging.

Plain substring matching against a fixed, ordered vocabulary. Short terms
match inside longer words ("java" in "javascript", "git" in "github"); that
is a known limitation of the approach.
"""

from typing import Iterable, List

TECH_VOCABULARY: List[str] = [
    "javascript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin",
    "react", "angular", "vue", "node", "express", "django", "flask", "spring",
    "tensorflow", "pytorch", "docker", "kubernetes", "aws", "azure", "gcp",
    "sql", "nosql", "mongodb", "postgresql", "mysql", "oracle", "firebase",
    "git", "jenkins", "ci/cd", "agile", "scrum", "rest api", "graphql", "microservices",
    "typescript", "flutter", "react native", "android", "ios",
]


def tag_technologies(text: str, vocabulary: Iterable[str] = TECH_VOCABULARY) -> List[str]:
    """Return vocabulary terms found anywhere in text, in vocabulary order."""
    lowered = text.lower()
    return [tech for tech in vocabulary if tech in lowered]


def scan_line_technologies(line: str, technologies: Iterable[str], found: List[str]) -> None:
    """Append to found (in place) each term from technologies present in line and not already in found."""
    lowered = line.lower()
    for tech in technologies:
        if tech in lowered and tech not in found:
            found.append(tech)
