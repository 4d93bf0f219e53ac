"""模板生成后端。

代替真实模型调用，给定相同请求总是返回逐字节相同的文本：

1. 按模型名（不区分大小写）在模板映射中查找 (prompt) -> text 函数。
2. 找到则用它生成；找不到则退化为 fallback_template，不报错。
3. 识别回答中的第一个代码块，一并放入 GenerationResult。

没有网络调用、没有随机性，也不做 token 统计。
"""

from typing import Mapping, Optional

from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.domain.models import GenerationRequest, GenerationResult
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.providers.registry import MODEL_TEMPLATES, TemplateFn, fallback_template, get_template
from nexus_studio.render.formatter import find_code_block


class TemplateBackend:
    """确定性的模板后端。"""

    name = "template"

    def __init__(self, templates: Optional[Mapping[str, TemplateFn]] = None):
        self._templates: Mapping[str, TemplateFn] = templates if templates is not None else MODEL_TEMPLATES

    @property
    def models(self) -> list[str]:
        return sorted(self._templates)

    def generate(self, req: GenerationRequest) -> GenerationResult:
        if not req.prompt:
            raise ValidationError(code="EMPTY_PROMPT", message="Prompt must not be empty")
        template = get_template(req.model, self._templates)
        if template is None:
            logger.info("generation.fallback", extra={"extra": {"model": req.model}})
            text = fallback_template(req.prompt, req.model)
        else:
            text = template(req.prompt)
        logger.debug(
            "generation.done",
            extra={
                "extra": {
                    "model": req.model,
                    "history": len(req.conversation),
                    "max_tokens": req.max_tokens,
                    "temperature": req.temperature,
                    "chars": len(text),
                }
            },
        )
        match = find_code_block(text)
        return GenerationResult(text=text, model=req.model, code_block=match.block if match else None)
