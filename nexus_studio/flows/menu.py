"""Main menu state machine.

The main menu and every sub-flow are explicit states; moving between them only
happens through ``next_state`` and the transition table below.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.flows.state import MenuState

DONE = "done"
DEFAULT_CHOICE = "1"

MAIN_MENU_OPTIONS: List[Tuple[str, str, MenuState]] = [
    ("1", "AI Chat Assistant", MenuState.CHAT_SESSION),
    ("2", "New Project Wizard", MenuState.PROJECT_WIZARD),
    ("3", "AI Code Generator", MenuState.CODE_GEN),
    ("4", "Create Component", MenuState.COMPONENT),
    ("5", "Deploy Project", MenuState.DEPLOY),
    ("6", "Browse Templates", MenuState.TEMPLATES),
    ("7", "Settings", MenuState.SETTINGS),
    ("8", "About / Help", MenuState.ABOUT),
    ("9", "Exit", MenuState.EXIT),
]

SUB_FLOWS = [
    MenuState.CHAT_SESSION,
    MenuState.PROJECT_WIZARD,
    MenuState.CODE_GEN,
    MenuState.COMPONENT,
    MenuState.DEPLOY,
    MenuState.TEMPLATES,
    MenuState.SETTINGS,
    MenuState.ABOUT,
]


def _build_transitions() -> Dict[Tuple[MenuState, str], MenuState]:
    table: Dict[Tuple[MenuState, str], MenuState] = {}
    for key, _, target in MAIN_MENU_OPTIONS:
        table[(MenuState.MAIN_MENU, key)] = target
    for state in SUB_FLOWS:
        table[(state, DONE)] = MenuState.MAIN_MENU
    return table


TRANSITIONS: Dict[Tuple[MenuState, str], MenuState] = _build_transitions()


def menu_options() -> List[Tuple[str, str]]:
    return [(key, label) for key, label, _ in MAIN_MENU_OPTIONS]


def normalize_choice(raw: str) -> str:
    choice = raw.strip()
    return choice or DEFAULT_CHOICE


def next_state(state: MenuState, trigger: str) -> MenuState:
    """Resolve a transition; unknown triggers raise ValidationError and leave state untouched."""

    if state is MenuState.MAIN_MENU:
        trigger = normalize_choice(trigger)
    target = TRANSITIONS.get((state, trigger))
    if target is None:
        if state is MenuState.MAIN_MENU:
            raise ValidationError(
                code="INVALID_OPTION",
                message=f"Invalid option: {trigger!r}. Please choose 1-{len(MAIN_MENU_OPTIONS)}.",
            )
        raise ValidationError(code="INVALID_TRANSITION", message=f"No transition from {state.value} on {trigger!r}")
    return target
