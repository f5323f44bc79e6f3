"""Terminal front end for the application wizard."""

import logging
import sys
import textwrap
from pathlib import Path

from wizard.client import ApiClient, ApiError
from wizard.config import settings
from wizard.machine import STEP_LABELS, IllegalTransition, Stage, Wizard

TITLE = "Green Job Hunter"


def render_steps(wizard: Wizard) -> str:
    """Step indicator, e.g. ``[1] Upload CV > (2) Review Jobs > ...``."""
    parts = []
    for i, label in enumerate(STEP_LABELS):
        marker = f"({i + 1})" if i == wizard.step_index else f"[{i + 1}]"
        parts.append(f"{marker} {label}")
    return " > ".join(parts)


def render_job(index: int, job: dict, selected: bool) -> str:
    check = "[x]" if selected else "[ ]"
    details = f"Salary: {job.get('salary', 'N/A')} | Type: {job.get('type', '')}"
    if job.get("remote"):
        details += " | Remote"
    description = textwrap.shorten(job.get("description", ""), width=300, placeholder="...")
    return "\n".join(
        [
            f"{check} {index}. {job['title']}",
            f"    {job['company']}",
            f"    {job.get('location', '')}",
            f"    {description}",
            f"    Requirements: {', '.join(job.get('requirements', []))}",
            f"    {details}",
        ]
    )


def render_application(app: dict) -> str:
    return "\n".join(
        [
            f"{app['jobTitle']} at {app['company']}",
            "Tailored Resume:",
            textwrap.indent(app["tailoredResume"], "    "),
            "Cover Letter:",
            textwrap.indent(app["coverLetter"], "    "),
        ]
    )


def _upload_stage(wizard: Wizard, prompt, initial_cv: Path | None):
    print("Upload your CV to get started")
    if initial_cv is not None:
        path = initial_cv
    else:
        path = Path(prompt("CV path (.pdf, .doc, .docx): ").strip())
    if not path.is_file():
        print(f"Not found: {path}")
        return

    wizard.choose_cv(path)
    raw = prompt("Keywords (comma separated, blank for default): ").strip()
    keywords = [k.strip() for k in raw.split(",") if k.strip()]
    print("Finding green jobs...")
    wizard.find_jobs(keywords or None)


def _review_stage(wizard: Wizard, prompt):
    print("Jobs Matched to Your CV")
    if not wizard.jobs:
        print("No jobs found.")
    for i, job in enumerate(wizard.jobs, start=1):
        print(render_job(i, job, wizard.is_selected(job["id"])))

    choice = prompt("Toggle <n>, (g)enerate applications, (b)ack: ").strip().lower()
    if choice.isdigit() and 1 <= int(choice) <= len(wizard.jobs):
        job = wizard.jobs[int(choice) - 1]
        wizard.toggle_job(job["id"], not wizard.is_selected(job["id"]))
    elif choice == "g":
        wizard.generate()
    elif choice == "b":
        wizard.back()
    else:
        print("Please enter a job number, 'g' or 'b'")


def _approve_stage(wizard: Wizard, prompt):
    print("Review and Approve Applications")
    for app in wizard.applications:
        print("-" * 40)
        print(render_application(app))

    choice = prompt("(s)ubmit applications, (b)ack: ").strip().lower()
    if choice == "s":
        wizard.submit()
    elif choice == "b":
        wizard.back()
    else:
        print("Please enter 's' or 'b'")


def _done_stage(wizard: Wizard, prompt):
    print("Applications Submitted!")
    for result in wizard.results:
        print(f"  {result['jobTitle']} at {result['company']}: {result['status']} ({result['submittedAt']})")
    print(f"Thank you for using {TITLE}. Good luck with your applications!")

    choice = prompt("(r)estart: ").strip().lower()
    if choice == "r":
        wizard.restart()


class QuitWizard(Exception):
    """Raised by the prompt wrapper when the user types /quit."""


def _quit_aware(prompt):
    def ask(text: str) -> str:
        answer = prompt(text)
        if answer.strip().lower() == "/quit":
            raise QuitWizard
        return answer

    return ask


def run_wizard(wizard: Wizard, initial_cv: Path | None = None, prompt=input):
    """Drive the wizard until the user quits (``/quit`` or Ctrl-C)."""
    prompt = _quit_aware(prompt)
    while True:
        print()
        print(render_steps(wizard))
        print("-" * 40)
        if wizard.error:
            print(f"[Error] {wizard.error}")

        try:
            if wizard.stage is Stage.UPLOAD:
                _upload_stage(wizard, prompt, initial_cv)
                initial_cv = None
            elif wizard.stage is Stage.REVIEW_JOBS:
                _review_stage(wizard, prompt)
            elif wizard.stage is Stage.APPROVE_APPLICATIONS:
                _approve_stage(wizard, prompt)
            else:
                _done_stage(wizard, prompt)
        except IllegalTransition as e:
            print(f"[Error] {e}")
        except (KeyboardInterrupt, EOFError, QuitWizard):
            break


def main():
    """Run the application wizard CLI."""
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

    print(TITLE)
    print("=" * 40)

    # Optional CV path argument (handle filenames with spaces)
    initial_cv = Path(" ".join(sys.argv[1:])) if len(sys.argv) > 1 else None

    api = ApiClient()
    try:
        print("\nInitializing...")
        try:
            api.health()
        except ApiError as e:
            print(f"Error: cannot reach API at {settings.api_base_url} ({e})")
            return
        print("Ready!\n")
        print("Commands: /quit at any prompt")

        run_wizard(Wizard(api=api), initial_cv=initial_cv, prompt=input)
    finally:
        api.close()
    print("Goodbye!")
