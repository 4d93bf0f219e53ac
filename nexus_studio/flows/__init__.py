"""Menu state machine and the LangGraph project wizard."""

from nexus_studio.flows.menu import MAIN_MENU_OPTIONS, TRANSITIONS, next_state
from nexus_studio.flows.state import MenuState, WizardState
from nexus_studio.flows.wizard import build_wizard_graph, run_project_wizard

__all__ = [
    "MAIN_MENU_OPTIONS",
    "TRANSITIONS",
    "MenuState",
    "WizardState",
    "build_wizard_graph",
    "next_state",
    "run_project_wizard",
]
