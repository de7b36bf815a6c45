"""
工具模块包
提供项目所需的通用工具和功能
"""

# 导出核心工具
from .config_manager import (
    config_manager,
    UnifiedConfigManager,
    ApiConfig,
    LoggingConfig,
    LoggingModuleConfig,
    QuoteConfig
)
from .exceptions import (
    QuoteServiceError,
    ConfigurationError,
    ValidationError,
    QuoteNotFoundError,
    EndpointNotFoundError,
    MethodNotAllowedError,
    ErrorCodes,
    create_error_response
)
from .logging_manager import (
    LogContext,
    LogConfig,
    LoggingManager,
    logging_manager,
    logger,
    initialize_logging,
    ModuleLoggers,
    api_logger,
    store_logger,
    config_logger,
    main_logger
)
from .path_utils import BASE_DIR, CONFIG_DIR, LOG_DIR

# 版本信息
__version__ = "1.0.0"

__all__ = [
    # 配置管理
    "config_manager",
    "UnifiedConfigManager",
    "ApiConfig",
    "LoggingConfig",
    "LoggingModuleConfig",
    "QuoteConfig",

    # 异常处理
    "QuoteServiceError",
    "ConfigurationError",
    "ValidationError",
    "QuoteNotFoundError",
    "EndpointNotFoundError",
    "MethodNotAllowedError",
    "ErrorCodes",
    "create_error_response",

    # 日志工具
    "LogContext",
    "LogConfig",
    "LoggingManager",
    "logging_manager",
    "logger",
    "initialize_logging",
    "ModuleLoggers",
    "api_logger",
    "store_logger",
    "config_logger",
    "main_logger",

    # 路径工具
    "BASE_DIR",
    "CONFIG_DIR",
    "LOG_DIR",
    ]
