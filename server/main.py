#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口
"""

import json
import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response


# 自定义UTF-8 JSONResponse类，确保中文正确编码
class UTF8JSONResponse(Response):
    media_type = "application/json; charset=utf-8"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,  # 不转义非ASCII字符
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 优先加载 .env 文件（必须在读取配置之前）
from dotenv import load_dotenv

env_path = os.path.join(project_root, '.env')
if os.path.exists(env_path):
    load_dotenv(env_path, override=True)

from server.config.app_config import get_config
from core.calculators.bazi_logging import set_engine_log_level

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
set_engine_log_level(logging.DEBUG if config.debug else config.log_level)
logger = logging.getLogger(__name__)

from server.api.v1.bazi import router as bazi_router
from server.utils.exception_handler import ExceptionHandlerMiddleware

app = FastAPI(
    title="Bazi Report API",
    description="八字排盘与命理报告API服务",
    version="1.0.0",
    debug=config.debug,
    default_response_class=UTF8JSONResponse
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录请求日志，包括处理时间"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s"
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 统一异常处理中间件（最后添加，确保能捕获所有异常）
app.add_middleware(ExceptionHandlerMiddleware)

# 注册路由
app.include_router(bazi_router, prefix="/api/v1", tags=["八字报告"])


@app.get("/")
async def root():
    return {"message": "Bazi Report API", "docs": "/docs", "health": "/health"}


@app.get("/health")
async def health_check():
    """健康检查"""
    return {"status": "healthy", "env": config.env}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8001")),
        reload=config.debug,
    )
