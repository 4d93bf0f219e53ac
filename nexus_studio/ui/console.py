"""终端界面封装（基于 rich）。

所有输出都经过这里：菜单、表格、进度条、“正在输入”提示与代码块渲染。
输入函数可注入，测试时用脚本化的输入代替真实终端。
"""

import time
from typing import Callable, Iterable, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from nexus_studio.render.formatter import BOX_BOTTOM, box_header, find_code_block, style_for_language

InputFunc = Callable[[], str]


class ConsoleUI:
    def __init__(
        self,
        console: Optional[Console] = None,
        input_func: InputFunc = input,
        typing_delay: float = 0.0,
        step_delay: float = 0.0,
    ):
        self._console = console or Console()
        self._input = input_func
        self.typing_delay = typing_delay
        self.step_delay = step_delay

    @property
    def console(self) -> Console:
        return self._console

    # ---- 输入 ----

    def ask(self, question: str, default: str = "") -> str:
        """读取一行输入并去掉首尾空白；输入为空时返回 default。"""

        prompt = Text(question, style="bold cyan")
        if default:
            prompt.append(f" [{default}]", style="dim")
        prompt.append(": ")
        self._console.print(prompt, end="")
        answer = self._input().strip()
        return answer or default

    def confirm(self, question: str, default: bool = False) -> bool:
        answer = self.ask(f"{question} (y/N)" if not default else f"{question} (Y/n)").lower()
        if not answer:
            return default
        return answer in ("y", "yes")

    # ---- 消息 ----

    def info(self, message: str) -> None:
        self._console.print(Text(message))

    def success(self, message: str) -> None:
        self._console.print(Text(f"✓ {message}", style="green"))

    def warn(self, message: str) -> None:
        self._console.print(Text(f"⚠ {message}", style="yellow"))

    def error(self, message: str) -> None:
        self._console.print(Text(f"✗ {message}", style="bold red"))

    def clear(self) -> None:
        self._console.clear()

    # ---- 结构化输出 ----

    def header(self, title: str, subtitle: Optional[str] = None) -> None:
        self._console.print(Panel.fit(Text(title, style="bold"), subtitle=subtitle, border_style="cyan"))

    def menu(self, title: str, options: Sequence[Tuple[str, str]]) -> None:
        body = Text()
        for i, (key, label) in enumerate(options):
            if i:
                body.append("\n")
            body.append(f"  [{key}] ", style="bold cyan")
            body.append(label)
        self._console.print(Panel(body, title=title, border_style="cyan", expand=False))

    def table(self, title: str, columns: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        table = Table(title=title)
        for col in columns:
            table.add_column(col)
        for row in rows:
            table.add_row(*[str(c) for c in row])
        self._console.print(table)

    def tree(self, title: str, lines: Iterable[str]) -> None:
        root = Tree(Text(title, style="bold cyan"))
        for line in lines:
            root.add(Text(line))
        self._console.print(root)

    # ---- 动画（纯装饰，可用 0 延迟关闭） ----

    def progress(self, steps: Sequence[str]) -> None:
        with Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            console=self._console,
            transient=True,
        ) as progress:
            task = progress.add_task("", total=len(steps))
            for step in steps:
                progress.update(task, description=step)
                if self.step_delay:
                    time.sleep(self.step_delay)
                progress.advance(task)
        for step in steps:
            self.success(step)

    def thinking(self, label: str = "AI is thinking...") -> None:
        if not self.typing_delay:
            return
        with self._console.status(label):
            time.sleep(self.typing_delay)

    # ---- 回答渲染 ----

    def show_response(self, text: str) -> None:
        """渲染回答；第一个代码块用边框包起来，并按语言着色。"""

        match = find_code_block(text)
        if match is None:
            self._console.print(Text(text))
            return
        block = match.block
        out = Text(match.before)
        out.append(box_header(block.language), style="cyan")
        out.append(block.code, style=style_for_language(block.language))
        out.append(BOX_BOTTOM, style="cyan")
        out.append(match.after)
        self._console.print(out)
