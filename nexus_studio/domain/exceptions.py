"""统一业务异常模型。

所有跨模块抛出的业务级错误都继承自 BusinessError，
便于在菜单主循环中统一捕获并提示用户，而不是中断整个会话。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "PROJECT_EXISTS"）。
        message: 用户可读错误信息。
        extra: 其他补充字段（例如 tool、path 等）。
    """

    def __init__(self, code: str, message: str, **extra):
        self.code = code
        self.message = message
        self.extra = extra
        super().__init__(message)


class ValidationError(BusinessError):
    """用户输入或配置校验失败，可恢复，提示后重新输入。"""


class ToolError(BusinessError):
    """外部工具缺失或执行失败（git、docker、vercel 等），以警告形式报告。"""


class StorageError(BusinessError):
    """配置文件或脚手架文件读写失败。"""


class PrerequisiteError(BusinessError):
    """启动前置条件不满足（例如 Python 版本过低），进程以非零状态退出。"""
