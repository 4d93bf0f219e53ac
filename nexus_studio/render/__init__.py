"""回答渲染：代码块识别与包装。"""

from nexus_studio.render.formatter import (
    CodeBlockMatch,
    find_code_block,
    format_response,
    style_for_language,
)

__all__ = ["CodeBlockMatch", "find_code_block", "format_response", "style_for_language"]
