"""
Middleware for the quote service API.
Provides method dispatch, CORS preflight, response headers, logging and
error handling.
"""

import time
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from utils import (
    api_logger, QuoteServiceError, MethodNotAllowedError, ErrorCodes, create_error_response
)


JSON_MEDIA_TYPE = "application/json"

ALLOWED_METHODS = ("GET", "OPTIONS")

# 所有响应都带的CORS头
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
}

# 预检请求额外的CORS头
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    "Access-Control-Allow-Headers": "Content-Type",
}


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        # 处理前记录请求信息
        api_logger.info(f"[API] {request.method} {request.url.path}")

        try:
            response = await call_next(request)

            # 记录响应信息
            process_time = time.time() - start_time
            api_logger.info(f"[API] {request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

            # 添加处理时间到响应头
            response.headers["X-Process-Time"] = str(process_time)

            return response

        except Exception as e:
            process_time = time.time() - start_time
            api_logger.error(f"[API] {request.method} {request.url.path} - ERROR - {process_time:.3f}s - {str(e)}")
            raise


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """统一响应头中间件：所有路由都返回JSON类型和宽松的CORS来源"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        response.headers["Content-Type"] = JSON_MEDIA_TYPE

        return response


class MethodGuardMiddleware(BaseHTTPMiddleware):
    """请求方法分发：OPTIONS 直接返回预检响应，非 GET 请求返回 405"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=PREFLIGHT_HEADERS, media_type=JSON_MEDIA_TYPE)

        if request.method not in ALLOWED_METHODS:
            error = MethodNotAllowedError(
                f"Method {request.method} is not allowed on {request.url.path}",
                ErrorCodes.METHOD_NOT_ALLOWED
            )
            api_logger.warning(f"[API] {error}")
            return JSONResponse(status_code=error.status_code, content=create_error_response(error))

        return await call_next(request)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """错误处理中间件：未处理的异常统一转为 500"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except QuoteServiceError as e:
            api_logger.error(f"[API] Service error: {e} - context: {e.context}", exc_info=True)
            return JSONResponse(status_code=e.status_code, content=create_error_response(e))

        except Exception as e:
            api_logger.error(f"[API] [{ErrorCodes.INTERNAL_ERROR}] Unexpected error: {str(e)}", exc_info=True)
            return JSONResponse(status_code=500, content=create_error_response())


def setup_middleware(app):
    """设置所有中间件"""
    # 添加中间件（后添加的在外层，顺序很重要）
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(MethodGuardMiddleware)
    app.add_middleware(ResponseHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)

    api_logger.info("[API] Middleware setup completed")
