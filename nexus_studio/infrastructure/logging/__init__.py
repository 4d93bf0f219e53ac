"""JSON 行格式的文件日志。"""

from nexus_studio.infrastructure.logging.logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
