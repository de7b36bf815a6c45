"""
统一异常定义模块
提供项目特定的异常类和错误处理机制
"""

from typing import Optional, Dict, Any


class QuoteServiceError(Exception):
    """语录服务基础异常类"""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        message = message or self.public_message
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(QuoteServiceError):
    """配置相关错误"""
    pass


class ValidationError(QuoteServiceError):
    """数据验证错误"""
    pass


class QuoteNotFoundError(QuoteServiceError):
    """没有符合查询条件的语录"""
    status_code = 404
    public_message = "Quote not found"


class EndpointNotFoundError(QuoteServiceError):
    """请求路径不存在"""
    status_code = 404
    public_message = "Endpoint not found. Try /api/quote or /api/quotes"


class MethodNotAllowedError(QuoteServiceError):
    """不支持的请求方法"""
    status_code = 405
    public_message = "Only GET requests are allowed"


# 错误代码常量
class ErrorCodes:
    """错误代码常量"""

    # 配置错误
    CONFIG_NOT_FOUND = "CONFIG_001"
    CONFIG_INVALID_FORMAT = "CONFIG_002"
    CONFIG_LOAD_ERROR = "CONFIG_003"

    # 验证错误
    VALIDATION_DUPLICATE_ID = "VAL_001"
    VALIDATION_INVALID_QUOTE = "VAL_002"
    VALIDATION_INVALID_FILE = "VAL_003"

    # 请求错误
    QUOTE_NOT_FOUND = "REQ_001"
    ENDPOINT_NOT_FOUND = "REQ_002"
    METHOD_NOT_ALLOWED = "REQ_003"
    INTERNAL_ERROR = "REQ_004"


def create_error_response(error: Optional[QuoteServiceError] = None) -> Dict[str, str]:
    """创建标准化的错误响应

    响应体只包含一个 ``error`` 字段。对外只暴露异常类的公开信息，
    内部细节（context、error_code）仅写入日志。
    """
    if error is None:
        return {"error": QuoteServiceError.public_message}
    return {"error": error.public_message}
