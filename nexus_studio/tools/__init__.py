"""外部进程调用。"""

from nexus_studio.tools.process import ProcessResult, ProcessRunner

__all__ = ["ProcessResult", "ProcessRunner"]
