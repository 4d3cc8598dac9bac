#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 测试钩子
- 全局配置
"""

import os
import random
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


class FixedRandom(random.Random):
    """
    固定取值的随机源

    randint / uniform 均返回区间内按 fraction 比例定位的值，
    fraction=0 取下界，fraction=1 取上界。
    """

    def __init__(self, fraction: float = 0.0):
        super().__init__(0)
        self.fraction = fraction

    def random(self):
        return self.fraction

    def randint(self, a, b):
        return a + int((b - a) * self.fraction)

    def uniform(self, a, b):
        return a + (b - a) * self.fraction


# ==================== 应用和客户端 Fixtures ====================

@pytest.fixture(scope="session")
def app():
    """创建 FastAPI 应用实例（整个测试会话共享）"""
    from server.main import app
    return app


@pytest.fixture(scope="session")
def client(app):
    """创建测试客户端（整个测试会话共享）"""
    from fastapi.testclient import TestClient
    return TestClient(app)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_report_request() -> Dict[str, Any]:
    """
    示例报告请求（2024年正月初一 午时，北京）

    Returns:
        请求字典（camelCase 字段）
    """
    return {
        "name": "测试",
        "gender": "male",
        "birthDate": "2024-02-10",
        "birthTime": "12:00",
        "isLunar": False,
        "useSolarTime": False,
        "birthLocation": {
            "longitude": 116.40,
            "latitude": 39.90,
            "province": "北京",
            "city": "北京",
        },
    }


@pytest.fixture(scope="function")
def sample_user_input(sample_report_request):
    from core.models import UserInput
    return UserInput.model_validate(sample_report_request)


@pytest.fixture(scope="function")
def seeded_rng() -> random.Random:
    return random.Random(20240210)


@pytest.fixture(scope="function")
def fixed_random():
    """返回 FixedRandom 类，按需构造"""
    return FixedRandom


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """添加自定义标记说明"""
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "api: API 测试")


def pytest_collection_modifyitems(config, items):
    """根据路径自动添加标记"""
    for item in items:
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        elif "api" in item.nodeid:
            item.add_marker(pytest.mark.api)

