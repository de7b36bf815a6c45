"""
统一的配置管理模块
整合底层配置操作和应用层类型安全访问
"""

import json
import logging
from typing import Any, Optional, Dict, TypeVar, Union
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigurationError, ErrorCodes
from .path_utils import CONFIG_DIR

# 获取配置专用日志器
config_logger = logging.getLogger("Config")

# 为泛型类型定义一个TypeVar
T = TypeVar('T')

# ============================================================================
# 配置数据类型定义
# ============================================================================

@dataclass
class LoggingModuleConfig:
    """模块日志配置"""
    level: str = "INFO"
    enabled: bool = True

@dataclass
class FileLoggingConfig:
    """文件日志配置"""
    enabled: bool = True
    directory: str = "log"
    filename: str = "quote_service.log"
    rotation: Optional[Dict[str, Any]] = None

@dataclass
class ConsoleLoggingConfig:
    """控制台日志配置"""
    enabled: bool = True

@dataclass
class LoggingConfig:
    """完整日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file_config: FileLoggingConfig = field(default_factory=FileLoggingConfig)
    console_config: ConsoleLoggingConfig = field(default_factory=ConsoleLoggingConfig)
    modules: Dict[str, LoggingModuleConfig] = field(default_factory=dict)

@dataclass
class ApiConfig:
    """API配置"""
    host: str = "0.0.0.0"
    port: int = 3000
    public_host: str = "localhost"  # 启动日志中示例URL使用的主机名
    log_level: str = "info"

@dataclass
class QuoteConfig:
    """语录数据配置"""
    data_file: Optional[str] = None  # 为空时使用内置语录
    random_seed: Optional[int] = None


# ============================================================================
# 统一配置管理器
# ============================================================================

class UnifiedConfigManager:
    """统一配置管理器 - 整合底层操作和应用层抽象"""

    def __init__(self, config_dir: Union[str, Path] = CONFIG_DIR):
        self._config_dir = Path(config_dir)
        self._config_data: Dict[str, Any] = {}

        # 类型化配置缓存
        self._typed_cache: Dict[str, Any] = {}

        # 初始化配置
        self._load_config()

    def _load_config(self) -> None:
        """加载配置文件"""
        merged_config = {}
        config_logger.info(f"Loading configuration from directory: {self._config_dir}")

        if not self._config_dir.is_dir():
            raise ConfigurationError(
                f"Configuration path is not a directory: {self._config_dir}",
                ErrorCodes.CONFIG_NOT_FOUND
            )

        # 按文件名排序加载，确保加载顺序一致
        config_files = sorted(self._config_dir.glob('*.json'))
        if not config_files:
            raise ConfigurationError(
                f"No configuration files (.json) found in: {self._config_dir}",
                ErrorCodes.CONFIG_NOT_FOUND
            )

        for config_file in config_files:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_INVALID_FORMAT
                ) from e
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to read configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_LOAD_ERROR
                ) from e

            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Configuration file {config_file.name} must contain a JSON object",
                    ErrorCodes.CONFIG_INVALID_FORMAT
                )
            merged_config.update(data)
            config_logger.debug(f"Loaded and merged: {config_file.name}")

        self._config_data = merged_config
        config_logger.info(f"Configuration loaded and merged from {len(config_files)} files.")
        # 清除类型化缓存
        self._typed_cache.clear()

    # ========================================================================
    # 底层访问方法
    # ========================================================================

    def get_nested(self, path: str, default: Optional[T] = None) -> Optional[T]:
        """获取嵌套配置值，支持点分隔路径"""
        keys = path.split('.')
        current = self._config_data

        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    # ========================================================================
    # 类型安全访问方法
    # ========================================================================

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置（类型安全）"""
        if 'logging_config' not in self._typed_cache:
            try:
                logging_data = self.get_nested('logging_config', {})

                # 解析文件日志配置
                file_data = logging_data.get('file_config', {})
                file_config = FileLoggingConfig(
                    enabled=file_data.get('enabled', True),
                    directory=file_data.get('directory', 'log'),
                    filename=file_data.get('filename', 'quote_service.log'),
                    rotation=file_data.get('rotation')
                )

                # 解析控制台日志配置
                console_data = logging_data.get('console_config', {})
                console_config = ConsoleLoggingConfig(
                    enabled=console_data.get('enabled', True)
                )

                # 解析模块配置
                modules = {}
                for module_name, module_data in logging_data.get('modules', {}).items():
                    modules[module_name] = LoggingModuleConfig(
                        level=module_data.get('level', 'INFO'),
                        enabled=module_data.get('enabled', True)
                    )

                defaults = LoggingConfig()
                self._typed_cache['logging_config'] = LoggingConfig(
                    level=logging_data.get('level', defaults.level),
                    format=logging_data.get('format', defaults.format),
                    date_format=logging_data.get('date_format', defaults.date_format),
                    file_config=file_config,
                    console_config=console_config,
                    modules=modules
                )
            except (AttributeError, TypeError) as e:
                config_logger.error(f"Failed to parse logging config: {e}")
                self._typed_cache['logging_config'] = LoggingConfig()

        return self._typed_cache['logging_config']

    def get_api_config(self) -> ApiConfig:
        """获取API配置（类型安全）"""
        if 'api_config' not in self._typed_cache:
            try:
                api_data = self.get_nested('api_config', {})
                self._typed_cache['api_config'] = ApiConfig(
                    host=api_data.get('host', '0.0.0.0'),
                    port=int(api_data.get('port', 3000)),
                    public_host=api_data.get('public_host', 'localhost'),
                    log_level=api_data.get('log_level', 'info')
                )
            except (AttributeError, TypeError, ValueError) as e:
                config_logger.error(f"Failed to parse api config: {e}")
                self._typed_cache['api_config'] = ApiConfig()

        return self._typed_cache['api_config']

    def get_quote_config(self) -> QuoteConfig:
        """获取语录数据配置（类型安全）"""
        if 'quote_config' not in self._typed_cache:
            try:
                quote_data = self.get_nested('quote_config', {})
                seed = quote_data.get('random_seed')
                self._typed_cache['quote_config'] = QuoteConfig(
                    data_file=quote_data.get('data_file') or None,
                    random_seed=int(seed) if seed is not None else None
                )
            except (AttributeError, TypeError, ValueError) as e:
                config_logger.error(f"Failed to parse quote config: {e}")
                self._typed_cache['quote_config'] = QuoteConfig()

        return self._typed_cache['quote_config']

    # ========================================================================
    # 便捷方法
    # ========================================================================

    def resolve_path(self, path: str) -> Path:
        """将配置中的相对路径解析为相对于配置目录的绝对路径"""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return (self._config_dir / candidate).resolve()


# ============================================================================
# 全局单例实例
# ============================================================================

# 创建统一配置管理器实例
config_manager = UnifiedConfigManager()
