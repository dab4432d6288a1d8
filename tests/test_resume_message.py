"""Tests for the summary message sent with the resume."""

from app.core.resume_message import compose_resume_message
from app.core.schemas import ParsedResume, ProjectRecord
from app.core.text_parser import parse


def test_message_lists_projects_and_technologies():
    parsed = ParsedResume(
        projects=[
            ProjectRecord(title="Tracker", description="", technologies=["python", "docker"]),
            ProjectRecord(title="Blog", description="Static site."),
        ],
        technologies=["python", "docker"],
    )

    message = compose_resume_message(parsed, "RAW")

    assert message == (
        "Here's my resume for your reference:"
        "\n\nProjects identified in resume:\n"
        "1. Tracker\n"
        "   Technologies: python, docker\n"
        "2. Blog\n"
        "\n\nTechnologies/Skills identified:\n"
        "python, docker"
        "\n\nRAW"
    )


def test_message_without_findings_is_intro_plus_text():
    message = compose_resume_message(parse("just text"), "just text")
    assert message == "Here's my resume for your reference:\n\njust text"
