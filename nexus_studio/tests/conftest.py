import io

import pytest
from rich.console import Console

from nexus_studio.config.settings import Settings
from nexus_studio.ui.console import ConsoleUI


class ScriptedUI(ConsoleUI):
    """ConsoleUI 读取预设输入，输出写入内存缓冲区。"""

    def __init__(self, inputs):
        self._buf = io.StringIO()
        self._answers = iter(inputs)
        super().__init__(
            console=Console(file=self._buf, force_terminal=False, color_system=None, width=1000),
            input_func=self._next_answer,
        )

    def _next_answer(self) -> str:
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("scripted input exhausted")

    @property
    def output(self) -> str:
        return self._buf.getvalue()


class FakeRunner:
    """模拟的 ProcessRunner，记录调用而不执行任何进程。"""

    def __init__(self, tools=(), fail=None):
        self.tools = set(tools)
        self.fail = fail
        self.calls = []

    def exists(self, command):
        return command in self.tools

    def run(self, cmd, cwd=None, env=None, check=True):
        from nexus_studio.tools.process import ProcessResult

        self.calls.append({"cmd": list(cmd), "cwd": cwd, "env": env})
        if self.fail is not None:
            raise self.fail
        return ProcessResult(command=list(cmd), returncode=0, stdout="https://example.test/deploy\n")


@pytest.fixture
def make_ui():
    return ScriptedUI


@pytest.fixture
def settings(tmp_path):
    return Settings(
        projects_dir=str(tmp_path / "projects"),
        user_config_file=str(tmp_path / "user" / "config.json"),
        log_dir=str(tmp_path / "logs"),
        typing_delay=0.0,
        step_delay=0.0,
    )


@pytest.fixture
def fake_runner():
    return FakeRunner
