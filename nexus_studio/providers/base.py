"""生成后端抽象接口。

菜单路由与聊天会话不直接依赖具体实现，而是依赖此协议：

- 每种后端实现一个 GenerationBackend（目前只有 TemplateBackend）。
- 负责：接收 GenerationRequest，返回统一的 GenerationResult。

这样以后接入真实模型后端时，不需要修改路由代码。
"""

from typing import Protocol

from nexus_studio.domain.models import GenerationRequest, GenerationResult


class GenerationBackend(Protocol):
    """生成后端协议。

    实现者需要提供：
    - name: 后端名称，用于日志。
    - generate(req): 执行一次生成，返回 GenerationResult。
    """

    name: str

    def generate(self, req: GenerationRequest) -> GenerationResult:
        ...
