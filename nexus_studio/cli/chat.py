from enum import Enum
from typing import Optional

from nexus_studio.agents.chat_session import ChatSession
from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.prompts import DEFAULT_CODE_FRAMEWORK, build_code_prompt
from nexus_studio.ui.console import ConsoleUI


class ChatCommand(str, Enum):
    EXIT = "/exit"
    CLEAR = "/clear"
    MODEL = "/model"
    HELP = "/help"
    CODE = "/code"


HELP = """
/exit    return to the main menu
/clear   clear the conversation
/model   switch model (leave empty to keep the current one)
/help    show this help
/code    generate code from a description and a framework
anything else is sent to the AI as a prompt
""".strip()


def parse_command(line: str) -> Optional[ChatCommand]:
    """Exact, case-sensitive match; anything else is a prompt."""

    try:
        return ChatCommand(line)
    except ValueError:
        return None


class ChatLoop:
    def __init__(self, session: ChatSession, ui: ConsoleUI):
        self.session = session
        self.ui = ui

    def show_header(self) -> None:
        self.ui.header("AI Chat Assistant", subtitle=f"model: {self.session.model}")
        self.ui.info("Type /help for commands, /exit to return to the menu.")

    def run(self) -> None:
        self.show_header()
        while True:
            line = self.ui.ask("You").strip()
            if not line:
                continue
            if not self.handle(line):
                return

    def handle(self, line: str) -> bool:
        """Handle one input line; returns False when the loop should end."""

        command = parse_command(line)
        if command is ChatCommand.EXIT:
            return False
        if command is ChatCommand.CLEAR:
            self.session.clear()
            self.ui.clear()
            self.show_header()
            self.ui.success("Conversation cleared")
            return True
        if command is ChatCommand.MODEL:
            self._switch_model()
            return True
        if command is ChatCommand.HELP:
            self.ui.info(HELP)
            return True
        if command is ChatCommand.CODE:
            prompt = self._code_prompt()
            if prompt is None:
                return True
            line = prompt
        self._turn(line)
        return True

    def _switch_model(self) -> None:
        name = self.ui.ask(f"New model (current: {self.session.model})")
        if self.session.set_model(name):
            self.ui.success(f"Model switched to {self.session.model}")
        else:
            self.ui.info(f"Keeping {self.session.model}")

    def _code_prompt(self) -> Optional[str]:
        description = self.ui.ask("Describe the code to generate")
        if not description:
            self.ui.warn("A description is required for /code")
            return None
        framework = self.ui.ask("Framework", DEFAULT_CODE_FRAMEWORK)
        return build_code_prompt(description, framework)

    def _turn(self, prompt: str) -> None:
        self.ui.thinking()
        try:
            result = self.session.ask(prompt)
        except ValidationError as e:
            self.ui.warn(e.message)
            return
        self.ui.info(f"AI ({result.model}):")
        self.ui.show_response(result.text)
