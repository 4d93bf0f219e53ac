import pytest

from nexus_studio.cli.app import NexusApp
from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.flows.menu import DONE, MAIN_MENU_OPTIONS, SUB_FLOWS, TRANSITIONS, menu_options, next_state
from nexus_studio.flows.state import MenuState


@pytest.mark.parametrize("key,_label,target", MAIN_MENU_OPTIONS)
def test_each_menu_key_enters_its_flow(key, _label, target):
    assert next_state(MenuState.MAIN_MENU, key) is target


def test_empty_choice_defaults_to_chat():
    assert next_state(MenuState.MAIN_MENU, "") is MenuState.CHAT_SESSION
    assert next_state(MenuState.MAIN_MENU, "  ") is MenuState.CHAT_SESSION


def test_choice_is_trimmed():
    assert next_state(MenuState.MAIN_MENU, " 7 ") is MenuState.SETTINGS


@pytest.mark.parametrize("choice", ["99", "0", "10", "a", "chat"])
def test_invalid_choice_raises(choice):
    with pytest.raises(ValidationError) as exc:
        next_state(MenuState.MAIN_MENU, choice)
    assert exc.value.code == "INVALID_OPTION"
    assert "1-9" in exc.value.message


def test_every_sub_flow_returns_to_main_menu():
    for state in SUB_FLOWS:
        assert next_state(state, DONE) is MenuState.MAIN_MENU
    assert len(TRANSITIONS) == len(MAIN_MENU_OPTIONS) + len(SUB_FLOWS)


def test_undefined_transition_is_rejected():
    with pytest.raises(ValidationError) as exc:
        next_state(MenuState.CHAT_SESSION, "1")
    assert exc.value.code == "INVALID_TRANSITION"
    with pytest.raises(ValidationError):
        next_state(MenuState.EXIT, DONE)


def test_menu_lists_nine_options_in_order():
    assert [key for key, _ in menu_options()] == [str(i) for i in range(1, 10)]


def test_app_redisplays_menu_after_invalid_choice(make_ui, settings):
    ui = make_ui(["99", "9"])
    app = NexusApp(settings, ui)
    assert app.run() == 0
    assert "Invalid option: '99'. Please choose 1-9." in ui.output
    assert ui.output.count("AI Chat Assistant") == 2
    assert "Goodbye!" in ui.output
    assert app.state is MenuState.EXIT


def test_app_enter_opens_chat_then_returns(make_ui, settings):
    ui = make_ui(["", "hello", "/exit", "9"])
    app = NexusApp(settings, ui)
    assert app.run() == 0
    assert "Here's a React component for: hello" in ui.output
    assert ui.output.count("Select an option") == 2
