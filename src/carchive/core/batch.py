#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
批量操作与进度回调

提供批量添加文件、进度回调和错误处理的通用工具。
"""

import os
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple


class ErrorPolicy(Enum):
    """错误处理策略"""
    RAISE = "raise"   # 立即抛出异常
    SKIP = "skip"     # 跳过失败文件，继续处理
    ABORT = "abort"   # 停止处理，保留已完成部分


@dataclass
class FileItem:
    """
    待添加的文件项
    
    name 为空时使用本地路径的文件名部分。
    """
    local_path: str
    name: Optional[str] = None
    
    @property
    def archive_name(self) -> str:
        """存入归档时使用的名称"""
        return self.name if self.name is not None else os.path.basename(self.local_path)


@dataclass
class ProgressInfo:
    """传递给进度回调函数的数据结构"""
    current: int              # 当前已处理文件数
    total: int                # 总文件数
    current_file: str         # 当前正在处理的文件路径
    bytes_processed: int      # 已处理字节数
    bytes_total: int          # 总字节数 (预估)
    elapsed_time: float       # 已耗时 (秒)
    
    @property
    def progress(self) -> float:
        """进度百分比 (0.0 - 1.0)"""
        if self.total == 0:
            return 0.0
        return self.current / self.total
    
    @property
    def rate(self) -> float:
        """处理速率 (bytes/second)"""
        if self.elapsed_time == 0:
            return 0.0
        return self.bytes_processed / self.elapsed_time


@dataclass
class BatchResult:
    """批量操作结果"""
    success_count: int = 0
    failed_count: int = 0
    skipped_count: int = 0
    total_bytes: int = 0
    elapsed_time: float = 0.0
    failed_files: List[Tuple[str, Exception]] = field(default_factory=list)
    skipped_files: List[str] = field(default_factory=list)
    
    @property
    def total_count(self) -> int:
        return self.success_count + self.failed_count + self.skipped_count


ProgressCallback = Callable[[ProgressInfo], None]


class ProgressTracker:
    """
    进度跟踪器
    
    封装进度计算和回调调用逻辑。
    """
    
    def __init__(
        self,
        total_files: int,
        total_bytes: int = 0,
        callback: Optional[ProgressCallback] = None,
        callback_interval: float = 0.0  # 最小回调间隔 (秒)
    ):
        self._total_files = total_files
        self._total_bytes = total_bytes
        self._callback = callback
        self._callback_interval = callback_interval
        
        self._current_file = 0
        self._processed_bytes = 0
        self._start_time = time.monotonic()
        self._last_callback_time: Optional[float] = None
    
    def update(self, file_path: str, bytes_processed: int = 0) -> None:
        """
        更新进度
        
        Args:
            file_path: 当前处理的文件路径
            bytes_processed: 本次处理的字节数
        """
        self._current_file += 1
        self._processed_bytes += bytes_processed
        
        if not self._callback:
            return
        now = time.monotonic()
        if (self._last_callback_time is not None
                and now - self._last_callback_time < self._callback_interval):
            return
        self._callback(ProgressInfo(
            current=self._current_file,
            total=self._total_files,
            current_file=file_path,
            bytes_processed=self._processed_bytes,
            bytes_total=self._total_bytes,
            elapsed_time=now - self._start_time
        ))
        self._last_callback_time = now
    
    def finish(self) -> float:
        """完成并返回总耗时"""
        return time.monotonic() - self._start_time


def collect_items(paths: Iterable[str]) -> Tuple[List[FileItem], List[str]]:
    """
    将命令行给出的路径分为普通文件和其他 (目录、不存在的路径等)
    
    归档核心不做文件系统判断，调用方应先用本函数过滤。
    
    Returns:
        (普通文件的 FileItem 列表, 被跳过的路径列表)
    """
    items: List[FileItem] = []
    skipped: List[str] = []
    for path in paths:
        if os.path.isfile(path):
            items.append(FileItem(local_path=path))
        else:
            skipped.append(path)
    return items, skipped


def estimate_total_bytes(items: List[FileItem]) -> int:
    """估算文件总大小，无法访问的文件按 0 计"""
    total = 0
    for item in items:
        try:
            total += os.path.getsize(item.local_path)
        except OSError:
            pass
    return total
