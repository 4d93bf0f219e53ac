"""配置加载（settings）与用户持久化配置（user_store）。"""

from nexus_studio.config.settings import Settings, apply_overrides, load_settings
from nexus_studio.config.user_store import UserConfigStore

__all__ = ["Settings", "UserConfigStore", "apply_overrides", "load_settings"]
