"""State definitions for the menu state machine and the project wizard graph."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, TypedDict


class MenuState(str, Enum):
    MAIN_MENU = "main_menu"
    CHAT_SESSION = "chat_session"
    PROJECT_WIZARD = "project_wizard"
    CODE_GEN = "code_gen"
    COMPONENT = "component"
    DEPLOY = "deploy"
    TEMPLATES = "templates"
    SETTINGS = "settings"
    ABOUT = "about"
    EXIT = "exit"


class WizardState(TypedDict, total=False):
    """State shared across project wizard nodes.

    A field left as None has not been answered yet; nodes skip fields that are
    already set, so a partially filled state resumes at the first open step.
    """

    name: Optional[str]
    framework: Optional[str]
    template: Optional[str]
    use_ai: Optional[bool]
    init_git: Optional[bool]
    confirmed: Optional[bool]
    step: int
    errors: List[str]
