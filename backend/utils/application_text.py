"""
Templated application text.

Builds a tailored resume paragraph and a cover letter for one job from the
candidate profile. Pure string formatting: same inputs, same output.
"""

RESUME_TEMPLATE = (
    "Experienced software engineer with {experience} in {skills}. "
    "Passionate about green technology and sustainability. "
    "Perfect fit for {title} role at {company}."
)

COVER_LETTER_TEMPLATE = """Dear Hiring Manager at {company},

I am excited to apply for the {title} position. With my background in {skills}, I am confident I can contribute to your mission of {mission}.

My experience aligns perfectly with your requirements, and I am passionate about using technology to address climate challenges.

Best regards,
[Your Name]"""

DEFAULT_MISSION = "building great products"


def _mission(description: str) -> str:
    # Blank descriptions would leave "your mission of ."
    return description if description.strip() else DEFAULT_MISSION


def render_resume(skills: list[str], experience: str, title: str, company: str) -> str:
    return RESUME_TEMPLATE.format(
        experience=experience,
        skills=", ".join(skills),
        title=title,
        company=company,
    )


def render_cover_letter(skills: list[str], title: str, company: str, description: str) -> str:
    return COVER_LETTER_TEMPLATE.format(
        company=company,
        title=title,
        skills=", ".join(skills),
        mission=_mission(description),
    )
