"""
统一异常处理中间件

提供统一的异常处理机制，避免重复的错误处理代码
"""

import asyncio
import functools
import logging
import traceback
from typing import Any, Callable, Tuple, Type

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from core.exceptions import BaziError
from server.config.env_config import is_production

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    """统一错误响应体"""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "error_type": error_type
        }
    )


def internal_error_message(e: Exception, default_error: str = "服务器内部错误，请稍后重试") -> str:
    """生产环境不暴露详细错误信息"""
    return default_error if is_production() else f"错误: {str(e)}"


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """异常处理中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Any:
        try:
            return await call_next(request)
        except HTTPException:
            raise
        except BaziError as e:
            logger.warning(f"排盘失败: {e.message}")
            return error_response(400, e.message, e.error_type)
        except BusinessError as e:
            logger.warning(f"业务异常: {e.message}")
            return error_response(e.code, e.message, e.error_type)
        except ValueError as e:
            # 参数验证错误
            logger.warning(f"参数验证错误: {str(e)}")
            return error_response(400, str(e), "validation_error")
        except Exception as e:
            logger.error(f"未处理的异常: {str(e)}\n{traceback.format_exc()}")
            return error_response(500, internal_error_message(e), "internal_error")


# ==================== 自定义业务异常 ====================

class BusinessError(Exception):
    """
    业务异常基类

    用于表示业务逻辑错误，与系统错误区分开来。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "business_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class NotFoundError(BusinessError):
    """资源不存在错误"""
    def __init__(self, message: str = "资源不存在", resource: str = None):
        self.resource = resource
        super().__init__(message, code=404, error_type="not_found")


# ==================== API 错误处理装饰器 ====================

def api_error_handler(
    func: Callable = None,
    *,
    catch: Tuple[Type[Exception], ...] = (Exception,),
    default_error: str = "服务器内部错误",
    log_errors: bool = True
):
    """
    API 错误处理装饰器

    - BaziError（日期不存在、大运顺序异常）→ 400，error_type 取异常自带类型
    - BusinessError → 异常自带状态码
    - 其余 catch 中的异常 → 500

    使用示例：
    ```python
    @router.post("/bazi/report")
    @api_error_handler
    async def generate_report(request: BaziReportRequest):
        ...
    ```
    """
    def handle(fn_name: str, e: Exception) -> JSONResponse:
        if isinstance(e, BaziError):
            if log_errors:
                logger.warning(f"排盘失败 [{fn_name}]: {e.message}")
            return error_response(400, e.message, e.error_type)
        if isinstance(e, BusinessError):
            if log_errors:
                logger.warning(f"业务异常 [{fn_name}]: {e.message}")
            return error_response(e.code, e.message, e.error_type)
        if log_errors:
            logger.error(f"API 错误 [{fn_name}]: {e}", exc_info=True)
        return error_response(500, default_error if is_production() else str(e), "internal_error")

    handled = (BaziError, BusinessError) + tuple(catch)

    def decorator(fn):
        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except HTTPException:
                raise
            except handled as e:
                return handle(fn.__name__, e)

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except HTTPException:
                raise
            except handled as e:
                return handle(fn.__name__, e)

        if asyncio.iscoroutinefunction(fn):
            return async_wrapper
        return sync_wrapper

    # 支持 @api_error_handler 和 @api_error_handler(...) 两种用法
    if func is not None:
        return decorator(func)
    return decorator
