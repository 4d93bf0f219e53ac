"""生成后端集成层。

该包下的模块负责：
- 定义后端抽象接口 (base)。
- 维护模型名到回答模板的映射 (registry)。
- 提供确定性的模板后端实现 (template_backend)。
"""

from typing import Mapping, Optional

from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.providers.base import GenerationBackend
from nexus_studio.providers.registry import TemplateFn
from nexus_studio.providers.template_backend import TemplateBackend


def create_backend(name: str = "template", templates: Optional[Mapping[str, TemplateFn]] = None) -> GenerationBackend:
    """根据名称创建生成后端实例。"""

    backend_name = (name or "template").lower()
    if backend_name == "template":
        return TemplateBackend(templates)
    raise ValidationError(code="UNKNOWN_BACKEND", message=f"Unknown backend: {name!r}")


__all__ = ["GenerationBackend", "TemplateBackend", "create_backend"]
