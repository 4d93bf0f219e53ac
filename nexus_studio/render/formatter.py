"""Response formatting: detect the first fenced code block and wrap it for display.

Everything here is a pure text transform. Choosing a style name is separate
from applying it; the terminal layer decides how a style name is rendered.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from nexus_studio.domain.models import CodeBlock

CODE_FENCE_RE = re.compile(r"```(\w*)\n(.*?)```", re.DOTALL)

LANGUAGE_STYLES: Dict[str, str] = {
    "javascript": "yellow",
    "typescript": "blue",
    "html": "red",
    "css": "magenta",
}
DEFAULT_STYLE = "dim"

BOX_TOP = "\n┌─ Code [{language}] ─┐\n"
BOX_BOTTOM = "\n└───────────────────┘"

Styler = Callable[[str, str], str]


@dataclass(frozen=True)
class CodeBlockMatch:
    before: str
    block: CodeBlock
    after: str


def find_code_block(text: str) -> Optional[CodeBlockMatch]:
    """Return the first fenced block in ``text``, or None."""

    m = CODE_FENCE_RE.search(text)
    if m is None:
        return None
    return CodeBlockMatch(
        before=text[: m.start()],
        block=CodeBlock(language=m.group(1), code=m.group(2)),
        after=text[m.end():],
    )


def style_for_language(language: str) -> str:
    return LANGUAGE_STYLES.get(language, DEFAULT_STYLE)


def box_header(language: str) -> str:
    return BOX_TOP.format(language=language)


def _plain(code: str, style: str) -> str:
    return code


def format_response(text: str, styler: Optional[Styler] = None) -> str:
    """Replace the first fenced block with the bordered display wrapper.

    Text without a block is returned unchanged. ``styler`` receives the block's
    inner text and the style name picked for its language.
    """

    match = find_code_block(text)
    if match is None:
        return text
    styler = styler or _plain
    block = match.block
    styled = styler(block.code, style_for_language(block.language))
    return f"{match.before}{box_header(block.language)}{styled}{BOX_BOTTOM}{match.after}"
