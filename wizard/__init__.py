"""
Application wizard client.

- client: HTTP client for the API
- machine: Four-stage wizard state machine
- cli: Terminal front end
"""

from wizard.client import ApiClient, ApiError
from wizard.machine import IllegalTransition, Stage, Wizard

__all__ = ["ApiClient", "ApiError", "IllegalTransition", "Stage", "Wizard"]
