"""
Wizard state machine.

Four stages, driven strictly forward by successful API calls:

    UPLOAD --find_jobs--> REVIEW_JOBS --generate--> APPROVE_APPLICATIONS --submit--> DONE

with single-step ``back`` from the two middle stages and ``restart`` from DONE.
A failed call leaves the stage unchanged and records the error message.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from wizard.client import ApiClient, ApiError

logger = logging.getLogger(__name__)


class Stage(Enum):
    UPLOAD = "upload"
    REVIEW_JOBS = "review_jobs"
    APPROVE_APPLICATIONS = "approve_applications"
    DONE = "done"


class Action(Enum):
    FIND_JOBS = "find_jobs"
    GENERATE = "generate"
    SUBMIT = "submit"
    BACK = "back"
    RESTART = "restart"


TRANSITIONS: dict[tuple[Stage, Action], Stage] = {
    (Stage.UPLOAD, Action.FIND_JOBS): Stage.REVIEW_JOBS,
    (Stage.REVIEW_JOBS, Action.GENERATE): Stage.APPROVE_APPLICATIONS,
    (Stage.REVIEW_JOBS, Action.BACK): Stage.UPLOAD,
    (Stage.APPROVE_APPLICATIONS, Action.SUBMIT): Stage.DONE,
    (Stage.APPROVE_APPLICATIONS, Action.BACK): Stage.REVIEW_JOBS,
    (Stage.DONE, Action.RESTART): Stage.UPLOAD,
}

STEP_LABELS = ["Upload CV", "Review Jobs", "Approve Applications", "Submit Applications"]


class IllegalTransition(Exception):
    """The requested action is not allowed in the current stage."""


@dataclass
class Wizard:
    """One wizard session. All data lives in memory for the session only."""

    api: ApiClient
    stage: Stage = Stage.UPLOAD
    cv_path: Path | None = None
    profile: dict | None = None
    jobs: list[dict] = field(default_factory=list)
    selected_jobs: list[dict] = field(default_factory=list)
    applications: list[dict] = field(default_factory=list)
    results: list[dict] = field(default_factory=list)
    error: str | None = None
    loading: bool = False

    @property
    def step_index(self) -> int:
        return list(Stage).index(self.stage)

    def _target(self, action: Action) -> Stage:
        try:
            return TRANSITIONS[(self.stage, action)]
        except KeyError:
            raise IllegalTransition(
                f"Cannot {action.value.replace('_', ' ')} from {self.stage.value.replace('_', ' ')}"
            ) from None

    def _require_stage(self, stage: Stage, what: str):
        if self.stage is not stage:
            raise IllegalTransition(f"Cannot {what} from {self.stage.value.replace('_', ' ')}")

    @contextmanager
    def _pending(self):
        """Run API calls with the loading flag set; failures land in ``error``."""
        self.loading = True
        self.error = None
        try:
            yield
        except (ApiError, OSError) as e:
            self.error = str(e)
            logger.warning(f"{self.stage.value}: {e}")
        finally:
            self.loading = False

    def choose_cv(self, path: str | Path):
        self._require_stage(Stage.UPLOAD, "choose a CV")
        self.cv_path = Path(path)

    def find_jobs(self, keywords: list[str] | None = None) -> bool:
        """Upload the chosen CV and fetch matching jobs."""
        target = self._target(Action.FIND_JOBS)
        if self.cv_path is None:
            raise IllegalTransition("Choose a CV file first")

        with self._pending():
            profile = self.api.upload_cv(self.cv_path)
            jobs = self.api.search_jobs(keywords)
            self.profile = profile
            self.jobs = jobs
            self.selected_jobs = []
            self.stage = target
        return self.error is None

    def is_selected(self, job_id) -> bool:
        return any(j["id"] == job_id for j in self.selected_jobs)

    def toggle_job(self, job_id, checked: bool):
        """Add or remove one job from the selection."""
        self._require_stage(Stage.REVIEW_JOBS, "select jobs")
        job = next((j for j in self.jobs if j["id"] == job_id), None)
        if job is None:
            raise LookupError(f"Unknown job id: {job_id}")

        if checked and not self.is_selected(job_id):
            self.selected_jobs.append(job)
        elif not checked:
            self.selected_jobs = [j for j in self.selected_jobs if j["id"] != job_id]

    def generate(self) -> bool:
        """Generate applications for the selected jobs."""
        target = self._target(Action.GENERATE)
        if not self.selected_jobs:
            raise IllegalTransition("Select at least one job first")

        with self._pending():
            self.applications = self.api.generate_applications(self.profile, self.selected_jobs)
            self.stage = target
        return self.error is None

    def submit(self) -> bool:
        """Submit the generated applications."""
        target = self._target(Action.SUBMIT)
        if not self.applications:
            raise IllegalTransition("No applications to submit")

        with self._pending():
            self.results = self.api.submit_applications(self.applications)
            self.stage = target
        return self.error is None

    def back(self):
        self.stage = self._target(Action.BACK)
        self.error = None

    def restart(self):
        """Start over with an empty session."""
        self._target(Action.RESTART)
        self.stage = Stage.UPLOAD
        self.cv_path = None
        self.profile = None
        self.jobs = []
        self.selected_jobs = []
        self.applications = []
        self.results = []
        self.error = None
