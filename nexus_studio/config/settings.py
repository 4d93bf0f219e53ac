"""配置管理模块。

支持从 .env、nexus.config.yaml 以及环境变量加载配置。
Settings 在启动时构造一次，之后显式传给需要它的组件。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nexus_studio.domain.exceptions import StorageError, ValidationError


# 可通过 Settings 菜单持久化并覆盖的键
USER_KEYS = ("default_model", "default_framework", "default_template", "theme", "analytics")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise StorageError(code="CONFIG_READ_ERROR", message=f"Failed to read config at {path}: {exc}")
    if not isinstance(data, dict):
        raise ValidationError(code="CONFIG_INVALID", message=f"Config file {path} is not a mapping")
    return data


def _load_config_from_yaml() -> Dict[str, Any]:
    """从默认位置的 nexus.config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("NEXUS_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.append(Path.cwd() / "nexus.config.yaml")

    for path in candidates:
        if not path.exists():
            continue
        try:
            return _read_yaml(path)
        except (StorageError, ValidationError) as exc:
            warnings.warn(f"{exc.message}, ignored")
    return {}


class Settings(BaseSettings):
    """应用配置（使用 Pydantic）。"""

    # ---- 生成相关 ----
    default_model: str = Field(default="phi-3-mini", description="聊天会话的默认模型名")
    backend: str = Field(default="template", description="生成后端名称")
    max_tokens: int = Field(default=2048, ge=1, description="为真实后端预留的最大生成 tokens")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="为真实后端预留的温度")

    # ---- 项目脚手架 ----
    default_framework: str = Field(default="react", description="未指定框架时使用的框架")
    default_template: str = Field(default="default", description="未指定模板时使用的项目模板")
    projects_dir: str = Field(
        default_factory=lambda: str(Path.cwd()),
        description="新项目创建所在目录",
    )

    # ---- 界面 ----
    theme: str = Field(default="dark", description="界面主题")
    analytics: bool = Field(default=True)
    typing_delay: float = Field(default=0.4, ge=0.0, description="模拟“正在输入”的延迟（秒）")
    step_delay: float = Field(default=0.3, ge=0.0, description="进度条每一步的延迟（秒）")

    # ---- 存储与日志 ----
    user_config_file: str = Field(
        default_factory=lambda: str(Path.home() / ".nexus-studio" / "config.json"),
        description="Settings 菜单持久化的 JSON 文件",
    )
    log_dir: str = Field(default="logs", description="日志目录")
    log_redact_content: bool = Field(default=False, description="是否截断日志内容")

    model_config = SettingsConfigDict(
        env_prefix="NEXUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("default_model", "default_framework", "default_template", "backend")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value must not be empty")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


def load_settings(config_file: Optional[str] = None, **overrides: Any) -> Settings:
    """构造 Settings。

    显式传入的 YAML 文件（命令行 --config）优先级最高，其次是 overrides、
    环境变量、.env 与默认位置的 YAML。
    """

    values: Dict[str, Any] = dict(overrides)
    if config_file:
        path = Path(config_file).expanduser()
        if not path.exists():
            raise StorageError(code="CONFIG_NOT_FOUND", message=f"Config file not found: {path}")
        values.update(_read_yaml(path))
    try:
        return Settings(**values)
    except PydanticValidationError as exc:
        raise ValidationError(code="CONFIG_INVALID", message=str(exc))


def apply_overrides(settings: Settings, data: Mapping[str, Any]) -> Settings:
    """把用户持久化的键值覆盖到 settings 上，返回新的 Settings。

    未知键会被忽略，值会按字段类型重新校验。
    """

    update = {k: v for k, v in data.items() if k in USER_KEYS}
    if not update:
        return settings
    merged = settings.model_dump()
    merged.update(update)
    try:
        return Settings.model_validate(merged)
    except PydanticValidationError as exc:
        raise ValidationError(code="CONFIG_INVALID", message=str(exc))
