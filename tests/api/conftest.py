#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tests/api/ 目录的 conftest：每个测试前清空报告历史
"""
import pytest


@pytest.fixture(autouse=True)
def empty_history():
    from server.services.report_history_service import get_history_repository
    get_history_repository().clear()
    yield
    get_history_repository().clear()
