from nexus_studio.agents.chat_session import ChatSession, SessionConfig
from nexus_studio.cli.chat import ChatCommand, ChatLoop, parse_command
from nexus_studio.providers import TemplateBackend
from nexus_studio.providers.registry import fallback_template


class RecordingBackend(TemplateBackend):
    """记录每次请求的模板后端。"""

    def __init__(self):
        super().__init__()
        self.requests = []

    def generate(self, req):
        self.requests.append(req)
        return super().generate(req)


def _loop(make_ui, inputs, model="phi-3-mini"):
    backend = RecordingBackend()
    session = ChatSession(backend, SessionConfig(model=model))
    ui = make_ui(inputs)
    return ChatLoop(session, ui), session, backend, ui


def test_parse_command_is_exact_and_case_sensitive():
    assert parse_command("/exit") is ChatCommand.EXIT
    assert parse_command("/EXIT") is None
    assert parse_command("/model gpt-4") is None
    assert parse_command("hello") is None


def test_default_model_prompt_uses_phi3_mini_template(make_ui):
    loop, session, backend, ui = _loop(make_ui, ["build a button", "/exit"])
    loop.run()
    assert backend.requests[0].model == "phi-3-mini"
    assert backend.requests[0].prompt == "build a button"
    reply = session.conversation.entries[1].content
    assert reply.startswith("Here's a React component for: build a button")
    assert "Code [javascript]" in ui.output


def test_model_switch_applies_to_next_turn(make_ui):
    loop, session, backend, _ = _loop(make_ui, ["/model", "gpt-4", "build a button", "/exit"])
    loop.run()
    assert session.model == "gpt-4"
    assert backend.requests[-1].model == "gpt-4"
    reply = session.conversation.entries[-1].content
    assert reply.startswith("GPT-4 response for: build a button")
    assert "React component" not in reply


def test_empty_model_answer_keeps_current_model(make_ui):
    loop, session, _, ui = _loop(make_ui, ["/model", "", "/exit"])
    loop.run()
    assert session.model == "phi-3-mini"
    assert "Keeping phi-3-mini" in ui.output


def test_code_command_defaults_framework_to_react(make_ui):
    loop, session, backend, _ = _loop(make_ui, ["/code", "login form", "", "/exit"])
    loop.run()
    prompt = backend.requests[0].prompt
    assert "react" in prompt
    assert "login form" in prompt
    assert session.conversation.entries[0].content == prompt
    assert len(session.conversation) == 2


def test_code_command_with_framework(make_ui):
    loop, _, backend, _ = _loop(make_ui, ["/code", "todo list", "vue", "/exit"])
    loop.run()
    assert backend.requests[0].prompt.startswith("Generate vue code for: todo list")


def test_code_command_without_description_skips_turn(make_ui):
    loop, session, backend, ui = _loop(make_ui, ["/code", "", "/exit"])
    loop.run()
    assert backend.requests == []
    assert len(session.conversation) == 0
    assert "description is required" in ui.output


def test_clear_empties_conversation_and_keeps_loop(make_ui):
    loop, session, _, ui = _loop(make_ui, ["one", "two", "/clear", "three", "/exit"])
    loop.run()
    assert [e.content for e in session.conversation if e.role == "user"] == ["three"]
    assert "Conversation cleared" in ui.output


def test_clear_after_history_reads_empty(make_ui):
    loop, session, _, _ = _loop(make_ui, ["a", "b", "c", "/clear", "/exit"])
    loop.run()
    assert session.conversation.entries == ()


def test_unknown_slash_text_is_a_prompt(make_ui):
    loop, session, backend, _ = _loop(make_ui, ["/unknown thing", "/exit"], model="custom-model")
    loop.run()
    assert backend.requests[0].prompt == "/unknown thing"
    assert session.conversation.entries[1].content == fallback_template("/unknown thing", "custom-model")


def test_history_is_passed_to_backend(make_ui):
    loop, _, backend, _ = _loop(make_ui, ["first", "second", "/exit"])
    loop.run()
    assert backend.requests[0].conversation == ()
    assert [e.content for e in backend.requests[1].conversation][0] == "first"
    assert len(backend.requests[1].conversation) == 2


def test_blank_lines_are_ignored_and_help_is_shown(make_ui):
    loop, session, backend, ui = _loop(make_ui, ["", "   ", "/help", "/exit"])
    loop.run()
    assert backend.requests == []
    assert "/clear" in ui.output and "/code" in ui.output
    assert len(session.conversation) == 0


def test_handle_returns_false_on_exit(make_ui):
    loop, _, _, _ = _loop(make_ui, [])
    assert loop.handle("/exit") is False
    assert loop.handle("/help") is True
