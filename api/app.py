"""
FastAPI application for the quote service.
Main application entry point for the API server.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from store import QuoteStore
from utils import (
    api_logger, config_manager, UnifiedConfigManager, LogContext,
    QuoteServiceError, EndpointNotFoundError, ErrorCodes, create_error_response
)

from .routes import router
from .middleware import setup_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    api_logger.info(f"[API] Starting Quote Service API with {len(app.state.quote_store)} quotes...")

    yield

    api_logger.info("[API] Shutting down Quote Service API...")


async def quote_service_error_handler(request: Request, exc: QuoteServiceError) -> JSONResponse:
    """业务异常 -> 对应状态码的单字段错误响应"""
    api_logger.warning(f"[API] {request.method} {request.url.path} - {exc}")
    return JSONResponse(status_code=exc.status_code, content=create_error_response(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """框架抛出的HTTP异常（主要是未匹配路由的404）"""
    if exc.status_code == 404:
        error = EndpointNotFoundError(
            f"No route for {request.url.path}",
            ErrorCodes.ENDPOINT_NOT_FOUND
        )
        api_logger.warning(f"[API] {error}")
        return JSONResponse(status_code=404, content=create_error_response(error))

    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


def create_app(quote_store: Optional[QuoteStore] = None,
               config: UnifiedConfigManager = config_manager) -> FastAPI:
    """创建FastAPI应用

    quote_store 为空时按配置加载语录集合。集合在启动时创建一次，
    之后以只读方式注入到各个路由。
    """
    if quote_store is None:
        with LogContext("API", "load_quotes"):
            quote_store = QuoteStore.from_config(config)

    application = FastAPI(
        title="Quote Service API",
        description="A minimal service serving static quotations",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan
    )
    application.state.quote_store = quote_store

    # 异常处理
    application.add_exception_handler(QuoteServiceError, quote_service_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # 设置中间件
    setup_middleware(application)

    # 添加路由
    application.include_router(router, prefix="/api")

    return application


# 创建FastAPI应用
app = create_app()
