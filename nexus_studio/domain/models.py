"""统一的对话与生成数据模型。

本模块定义了菜单路由、生成引擎与格式化器之间共享的标准数据结构：

- ConversationEntry: 一条对话消息（user/assistant）。
- GenerationRequest: 发给生成后端的完整请求。
- GenerationResult: 生成后端返回的统一结果。
- CodeBlock: 从回答中识别出的第一个代码块。

所有生成后端（如 TemplateBackend）都只依赖这些模型。
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple


# 对话角色类型，仅允许 user / assistant
Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class ConversationEntry:
    """一条对话消息，追加后不可修改。"""

    role: Role
    content: str


@dataclass(frozen=True)
class CodeBlock:
    """回答中的围栏代码块。

    - language: 开始围栏上的语言标记，没有标记时为空串。
    - code: 围栏内的原始文本，不做任何修改。
    """

    language: str
    code: str


@dataclass
class GenerationRequest:
    """一次生成请求，每次调用临时构造，不做持久化。

    max_tokens / temperature 目前只是为真实模型后端预留的参数，
    模板后端会接收但不使用。
    """

    prompt: str
    model: str
    conversation: Tuple[ConversationEntry, ...] = field(default_factory=tuple)
    max_tokens: int = 2048
    temperature: float = 0.7


@dataclass
class GenerationResult:
    """一次生成调用的最终结果。

    - text: 完整回答文本。
    - model: 实际使用的模型名（即请求里的 model）。
    - code_block: 回答中第一个代码块（若有）。
    """

    text: str
    model: str
    code_block: Optional[CodeBlock] = None
