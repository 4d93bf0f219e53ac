"""Project wizard graph (steps 1-4) built on LangGraph.

Step 1 asks for the project name, step 2 the framework, step 3 the project
template, step 4 the options and the final confirmation. A step whose answer
fails validation routes back to itself, so the user is re-prompted.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Protocol

from langgraph.errors import GraphRecursionError
from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.flows.state import WizardState
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.project.scaffold import ProjectSpec
from nexus_studio.project.templates import FRAMEWORK_TEMPLATES, PROJECT_TEMPLATES

PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,63}$")
MAX_WIZARD_STEPS = 50


class WizardIO(Protocol):
    def ask(self, question: str, default: str = "") -> str:
        ...

    def confirm(self, question: str, default: bool = False) -> bool:
        ...

    def warn(self, message: str) -> None:
        ...


def validate_project_name(name: str) -> Optional[str]:
    if not name:
        return "Project name is required"
    if not PROJECT_NAME_RE.match(name):
        return "Project name may only contain letters, digits, '.', '_' and '-'"
    return None


def _reject(state: WizardState, io: WizardIO, message: str) -> WizardState:
    state.setdefault("errors", []).append(message)
    io.warn(message)
    return state


def name_node(state: WizardState, io: WizardIO) -> WizardState:
    if state.get("name"):
        return state
    state["step"] = 1
    answer = io.ask("Step 1/4 - Project name")
    error = validate_project_name(answer)
    if error:
        return _reject(state, io, error)
    state["name"] = answer
    return state


def framework_node(state: WizardState, io: WizardIO, default: str) -> WizardState:
    if state.get("framework"):
        return state
    state["step"] = 2
    answer = io.ask(f"Step 2/4 - Framework ({', '.join(FRAMEWORK_TEMPLATES)})", default).lower()
    if answer not in FRAMEWORK_TEMPLATES:
        return _reject(state, io, f"Unknown framework: {answer}")
    state["framework"] = answer
    return state


def template_node(state: WizardState, io: WizardIO, default: str) -> WizardState:
    if state.get("template"):
        return state
    state["step"] = 3
    answer = io.ask(f"Step 3/4 - Template ({', '.join(PROJECT_TEMPLATES)})", default).lower()
    if answer not in PROJECT_TEMPLATES:
        return _reject(state, io, f"Unknown template: {answer}")
    state["template"] = answer
    return state


def options_node(state: WizardState, io: WizardIO) -> WizardState:
    state["step"] = 4
    if state.get("use_ai") is None:
        state["use_ai"] = io.confirm("Step 4/4 - Enhance with AI (README + starter component)?")
    if state.get("init_git") is None:
        state["init_git"] = io.confirm("Initialize a git repository?")
    if state.get("confirmed") is None:
        state["confirmed"] = io.confirm(
            f"Create {state['framework']} project '{state['name']}' from the {state['template']} template?",
            default=True,
        )
    return state


def _route(field: str, current: str, following: str):
    def router(state: WizardState) -> str:
        return following if state.get(field) else current

    return router


def build_wizard_graph(io: WizardIO, default_framework: str, default_template: str) -> CompiledStateGraph:
    graph = StateGraph(WizardState)
    graph.add_node("name", lambda s: name_node(s, io))
    graph.add_node("framework", lambda s: framework_node(s, io, default_framework))
    graph.add_node("template", lambda s: template_node(s, io, default_template))
    graph.add_node("options", lambda s: options_node(s, io))
    graph.set_entry_point("name")
    graph.add_conditional_edges("name", _route("name", "name", "framework"), {"name": "name", "framework": "framework"})
    graph.add_conditional_edges(
        "framework",
        _route("framework", "framework", "template"),
        {"framework": "framework", "template": "template"},
    )
    graph.add_conditional_edges(
        "template",
        _route("template", "template", "options"),
        {"template": "template", "options": "options"},
    )
    graph.add_edge("options", END)
    return graph.compile()


def initial_state(**answers) -> WizardState:
    state: WizardState = {
        "name": None,
        "framework": None,
        "template": None,
        "use_ai": None,
        "init_git": None,
        "confirmed": None,
        "step": 0,
        "errors": [],
    }
    state.update(answers)
    return state


def run_project_wizard(
    io: WizardIO,
    default_framework: str = "react",
    default_template: str = "default",
    answers: Optional[Dict[str, object]] = None,
) -> Optional[ProjectSpec]:
    """Run the wizard and return the collected ProjectSpec, or None when the user declines.

    ``answers`` pre-fills steps, which are then skipped.
    """

    graph = build_wizard_graph(io, default_framework, default_template)
    try:
        result = graph.invoke(initial_state(**(answers or {})), config={"recursion_limit": MAX_WIZARD_STEPS})
    except GraphRecursionError:
        raise ValidationError(code="WIZARD_ABORTED", message="Too many invalid answers, wizard aborted")
    logger.info(
        "wizard.finished",
        extra={"extra": {"confirmed": bool(result.get("confirmed")), "errors": len(result.get("errors", []))}},
    )
    if not result.get("confirmed"):
        return None
    return ProjectSpec(
        name=result["name"],
        framework=result["framework"],
        template=result["template"],
        use_ai=bool(result.get("use_ai")),
        init_git=bool(result.get("init_git")),
    )
