#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive 核心模块

提供二进制 I/O 封装、文件头/记录结构定义和记录编解码。
"""

from .binary_io import BinaryReader, BinaryWriter
from .schema import ArchiveHeader, RecordHeader, MAGIC, VERSION, HEADER_SIZE
from .record import RecordCodec, END_OF_ARCHIVE
from .batch import (
    FileItem, ProgressInfo, BatchResult, ProgressTracker,
    ErrorPolicy, collect_items, estimate_total_bytes
)

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "ArchiveHeader",
    "RecordHeader",
    "MAGIC",
    "VERSION",
    "HEADER_SIZE",
    "RecordCodec",
    "END_OF_ARCHIVE",
    # 批量操作
    "FileItem",
    "ProgressInfo",
    "BatchResult",
    "ProgressTracker",
    "ErrorPolicy",
    "collect_items",
    "estimate_total_bytes",
]
