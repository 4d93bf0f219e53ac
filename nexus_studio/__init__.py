"""Nexus Studio AI 顶层包。

该包提供交互式终端应用的核心实现，
包括配置加载、领域模型、模板生成后端、回答格式化、
主菜单状态机、项目向导、脚手架写入与部署流程。
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
