from app.core.schemas import ParsedResume


def compose_resume_message(parsed: ParsedResume, resume_text: str) -> str:
    """
    Build the message sent alongside the resume: identified projects (with
    their technologies) and skills, followed by the raw resume text.
    """
    projects_list = ""
    if parsed.projects:
        projects_list = "\n\nProjects identified in resume:\n"
        for i, project in enumerate(parsed.projects, start=1):
            projects_list += f"{i}. {project.title}\n"
            if project.technologies:
                projects_list += f"   Technologies: {', '.join(project.technologies)}\n"

    tech_list = ""
    if parsed.technologies:
        tech_list = "\n\nTechnologies/Skills identified:\n" + ", ".join(parsed.technologies)

    return "Here's my resume for your reference:" + projects_list + tech_list + "\n\n" + resume_text
