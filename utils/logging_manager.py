"""
统一的日志管理模块
整合基础日志配置和上下文日志功能
"""

import logging
import sys
import time
import threading
import traceback
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .exceptions import QuoteServiceError, ErrorCodes
from .config_manager import config_manager, UnifiedConfigManager, LoggingModuleConfig
from .path_utils import BASE_DIR, LOG_DIR

# 获取 logging_manager 模块的专用日志器
logger = logging.getLogger("LoggingManager")


@dataclass
class LogConfig:
    """日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file_max_bytes: int = 10 * 1024 * 1024  # 10MB
    file_backup_count: int = 5
    enable_console: bool = True
    enable_file: bool = True
    log_directory: Optional[str] = None
    log_filename: str = "quote_service.log"


class LoggingManager:
    """统一的日志管理器"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True
        self._loggers: Dict[str, logging.Logger] = {}
        self._config = LogConfig()

    def configure(self, config: LogConfig = None):
        """配置日志系统"""
        if config:
            self._config = config

        # 处理日志目录 - 如果未设置，使用项目根目录下的 log 文件夹
        if self._config.log_directory is None:
            self._config.log_directory = str(LOG_DIR)

        # 设置根日志级别
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self._config.level.upper(), logging.INFO))

        # 清除现有处理器
        self._clear_handlers(root_logger)

        # 添加控制台处理器
        if self._config.enable_console:
            self._add_console_handler(root_logger)

        # 添加文件处理器
        if self._config.enable_file:
            Path(self._config.log_directory).mkdir(parents=True, exist_ok=True)
            self._add_file_handler(root_logger)

    def configure_from_config_file(self, config: UnifiedConfigManager = None):
        """从配置文件加载日志配置

        config 为空时使用全局 config_manager（项目 config 目录）。
        """
        try:
            logging_config = (config or config_manager).get_logging_config()

            # 处理相对路径 - 相对于项目根目录
            log_directory = Path(logging_config.file_config.directory)
            if not log_directory.is_absolute():
                log_directory = BASE_DIR / log_directory

            rotation_config = logging_config.file_config.rotation or {}

            log_config = LogConfig(
                level=logging_config.level,
                format=logging_config.format,
                date_format=logging_config.date_format,
                file_max_bytes=rotation_config.get('max_bytes_mb', 10) * 1024 * 1024,
                file_backup_count=rotation_config.get('backup_count', 5),
                enable_console=logging_config.console_config.enabled,
                enable_file=logging_config.file_config.enabled,
                log_directory=str(log_directory),
                log_filename=logging_config.file_config.filename
            )

            # 应用配置
            self.configure(log_config)

            # 配置模块特定的日志级别
            self._configure_module_loggers(logging_config.modules)

            return logging_config

        except (OSError, AttributeError, TypeError, ValueError) as e:
            raise QuoteServiceError(
                f"Failed to configure logging from config file: {str(e)}",
                ErrorCodes.CONFIG_INVALID_FORMAT
            ) from e

    def _configure_module_loggers(self, modules_config: Dict[str, LoggingModuleConfig]):
        """配置模块特定的日志器"""
        for module_name, module_config in modules_config.items():
            module_logger = self.get_logger(module_name)
            if module_config.enabled:
                module_logger.setLevel(getattr(logging, module_config.level.upper(), logging.INFO))
            else:
                # 如果模块被禁用，设置为 CRITICAL 级别
                module_logger.setLevel(logging.CRITICAL)

    def _clear_handlers(self, logger: logging.Logger):
        """清除现有处理器"""
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    def _formatter(self) -> logging.Formatter:
        return logging.Formatter(self._config.format, datefmt=self._config.date_format)

    def _add_console_handler(self, logger: logging.Logger):
        """添加控制台处理器"""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(self._formatter())
        logger.addHandler(console_handler)

    def _add_file_handler(self, logger: logging.Logger):
        """添加文件处理器"""
        log_file_path = Path(self._config.log_directory) / self._config.log_filename
        file_handler = RotatingFileHandler(
            filename=log_file_path,
            maxBytes=self._config.file_max_bytes,
            backupCount=self._config.file_backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(self._formatter())
        logger.addHandler(file_handler)

    def get_logger(self, name: str = None) -> logging.Logger:
        """获取日志记录器"""
        if name is None:
            name = "quoteservice"

        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)

        return self._loggers[name]


class LogContext:
    """日志上下文管理器"""

    def __init__(self, module: str, operation: str = None,
                 extra_context: Dict[str, Any] = None):
        self.module = module
        self.operation = operation
        self.extra_context = dict(extra_context or {})
        self.start_time = None
        self.logger = logging_manager.get_logger(module)

    def __enter__(self):
        self.start_time = time.time()
        self.logger.info(f"[{self._get_context_str()}] Starting operation")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time
        context = self._get_context_str()
        if exc_type is not None:
            self.logger.error(f"[{context}] Operation failed in {duration:.2f}s: {exc_val}")
            self.logger.debug(f"[{context}] Traceback: {''.join(traceback.format_tb(exc_tb))}")
        else:
            self.logger.info(f"[{context}] Operation completed in {duration:.2f}s")

    def _get_context_str(self) -> str:
        """获取上下文字符串"""
        parts = [self.module]

        if self.operation:
            parts.append(self.operation)

        for key, value in self.extra_context.items():
            parts.append(f"{key}:{value}")

        return ".".join(parts)


# 全局日志管理器实例
logging_manager = LoggingManager()

# 兼容性：保持原有的 logger 接口
logger = logging_manager.get_logger()


class ModuleLoggers:
    """模块专用日志器集合"""

    API = logging_manager.get_logger("API")
    QuoteStore = logging_manager.get_logger("QuoteStore")
    Config = logging_manager.get_logger("Config")
    Main = logging_manager.get_logger("Main")


# 便捷的模块日志器别名
api_logger = ModuleLoggers.API
store_logger = ModuleLoggers.QuoteStore
config_logger = ModuleLoggers.Config
main_logger = ModuleLoggers.Main


def initialize_logging(use_config_file: bool = True):
    """初始化日志系统"""
    if use_config_file:
        try:
            logging_manager.configure_from_config_file()
            logger.debug("Logging system initialized from config file")
            return True
        except QuoteServiceError as e:
            # 配置文件初始化失败时回退到默认配置
            print(f"Failed to initialize logging from config file: {e}")
            print("Falling back to default configuration...")

    logging_manager.configure(LogConfig(enable_file=False))
    logger.debug("Logging system initialized with default config")
    return True


# 自动初始化（使用配置文件）
initialize_logging(use_config_file=True)
