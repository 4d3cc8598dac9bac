# -*- coding: utf-8 -*-
"""
报告历史服务
负责：
1. 保存已生成的报告（最新在前）
2. 超出上限时丢弃最旧记录
3. 按 ID 查询 / 删除

仅保存在进程内存中，服务重启后清空。
"""
import logging
import threading
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.models import BaziReport, UserInput
from server.config.app_config import get_config

logger = logging.getLogger(__name__)


class ReportRecord(BaseModel):
    """历史报告记录"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="记录 ID")
    created_at: datetime = Field(..., description="保存时间")
    user_input: UserInput
    report: BaziReport


class ReportHistoryRepository:
    """报告历史仓库（线程安全）"""

    def __init__(self, limit: Optional[int] = None):
        """
        Args:
            limit: 最多保留条数，默认读取 REPORT_HISTORY_LIMIT
        """
        self.limit = limit if limit is not None else get_config().report.history_limit
        self._records: List[ReportRecord] = []
        self._lock = threading.Lock()

    def save(self, user_input: UserInput, report: BaziReport) -> ReportRecord:
        record = ReportRecord(
            id=uuid.uuid4().hex,
            created_at=datetime.now(),
            user_input=user_input,
            report=report,
        )
        with self._lock:
            self._records.insert(0, record)
            dropped = self._records[self.limit:]
            del self._records[self.limit:]
        if dropped:
            logger.debug(f"历史报告超出上限 {self.limit}，丢弃 {len(dropped)} 条")
        return record

    def list(self) -> List[ReportRecord]:
        """全部记录，最新在前"""
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> Optional[ReportRecord]:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        return None

    def delete(self, record_id: str) -> bool:
        """删除记录，不存在时返回 False"""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    del self._records[index]
                    return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


# 全局单例
_repository: Optional[ReportHistoryRepository] = None


def get_history_repository() -> ReportHistoryRepository:
    """获取报告历史仓库（全局单例）"""
    global _repository
    if _repository is None:
        _repository = ReportHistoryRepository()
    return _repository
