"""
Main entry point for the Quote Service.
Provides command-line interface and server startup.
"""

import asyncio
import argparse
import json
import sys
from typing import Optional

import uvicorn

from utils import (
    main_logger, logging_manager, config_manager, UnifiedConfigManager, QuoteServiceError
)
from store import QuoteStore


EXAMPLE_PATHS = (
    "/api/quote",
    "/api/quotes",
    "/api/quote?category=inspiration",
)


class QuoteService:
    """语录服务主类"""

    def __init__(self, config: UnifiedConfigManager = config_manager):
        self.config = config
        self.quote_store: Optional[QuoteStore] = None

    def initialize(self):
        """加载语录集合（进程生命周期内只加载一次）"""
        main_logger.info("[Main] Initializing Quote Service...")
        self.quote_store = QuoteStore.from_config(self.config)
        main_logger.info(f"[Main] Quote Service initialized with {len(self.quote_store)} quotes")

    def log_startup_banner(self, port: int):
        """输出监听地址和示例URL"""
        base_url = f"http://{self.config.get_api_config().public_host}:{port}"
        main_logger.info(f"[Main] Quote server is running on {base_url}")
        main_logger.info("[Main] Try these URLs in your browser:")
        for path in EXAMPLE_PATHS:
            main_logger.info(f"[Main]   {base_url}{path}")

    async def start_api_server(self, host: str = None, port: int = None):
        """启动API服务器"""
        from api.app import create_app

        # 获取API配置
        api_config = self.config.get_api_config()

        # 使用配置文件的值，如果命令行参数未提供
        final_host = host if host is not None else api_config.host
        final_port = port if port is not None else api_config.port

        main_logger.info(f"[Main] Starting API server on {final_host}:{final_port}...")

        app = create_app(quote_store=self.quote_store, config=self.config)
        server = uvicorn.Server(uvicorn.Config(
            app,
            host=final_host,
            port=final_port,
            log_level=api_config.log_level
        ))

        self.log_startup_banner(final_port)
        try:
            await server.serve()
        except SystemExit as e:
            # 端口占用等启动失败时 uvicorn 直接退出，这里只记录，不恢复
            main_logger.error(f"[Main] Server error: exited with code {e.code} on {final_host}:{final_port}")
            raise

    def list_quotes(self, category: Optional[str] = None):
        """以JSON格式输出语录集合"""
        quotes = self.quote_store.list_quotes(category=category)
        print(json.dumps([quote.model_dump() for quote in quotes], indent=2, ensure_ascii=False))


def create_parser():
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        description="Quote Service - 静态语录HTTP服务",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python main.py                               # 使用配置启动服务（默认端口 3000）
  python main.py serve --host 127.0.0.1 --port 8080  # 指定监听地址
  python main.py list --category life          # 输出某个分类的语录
  python main.py --config-dir ./my-config serve  # 使用其他配置目录
        """
    )
    parser.add_argument('--config-dir', type=str, help='配置目录 (默认: 项目 config 目录)')

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    # API服务器
    serve_parser = subparsers.add_parser('serve', help='启动API服务器')
    serve_parser.add_argument('--host', help='监听地址 (默认: 配置文件 api_config.host)')
    serve_parser.add_argument('--port', type=int, help='监听端口 (默认: 配置文件 api_config.port)')

    # 输出语录
    list_parser = subparsers.add_parser('list', help='输出已加载的语录')
    list_parser.add_argument('--category', type=str, help='按分类过滤')

    return parser


async def main(argv=None):
    """主函数"""
    parser = create_parser()
    args = parser.parse_args(argv)
    command = args.command or 'serve'

    try:
        if args.config_dir:
            config = UnifiedConfigManager(args.config_dir)
            # 导入时已按默认配置目录初始化日志，这里按指定目录重新配置
            logging_manager.configure_from_config_file(config)
        else:
            config = config_manager

        service = QuoteService(config)
        service.initialize()

        if command == 'serve':
            await service.start_api_server(
                host=getattr(args, 'host', None),
                port=getattr(args, 'port', None)
            )

        elif command == 'list':
            service.list_quotes(args.category)

        else:
            parser.print_help()

    except KeyboardInterrupt:
        main_logger.info("[Main] Received keyboard interrupt")
    except QuoteServiceError as e:
        main_logger.error(f"[Main] Startup error: {e}")
        sys.exit(1)
    except Exception as e:
        main_logger.error(f"[Main] System error: {e}")
        sys.exit(1)


def run():
    """命令行入口"""
    asyncio.run(main())


if __name__ == "__main__":
    run()
