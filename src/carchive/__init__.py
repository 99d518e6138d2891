#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive - 轻量级单文件压缩归档库

把多个命名的字节块逐条 zlib 压缩后顺序写入一个 CAR 归档，
文件名做简单的 XOR 混淆。
"""

__version__ = "0.1.0"

# 异常类
from .exceptions import (
    CarError,
    InvalidFormatError,
    TruncatedRecordError,
    ArchiveModeError,
    CompressionError,
    EntryNotFoundError,
)

# Archive
from .archive import Archive, ArchiveWriter, ArchiveReader

# 配置
from .config import CarConfig

# Hooks
from .hooks import (
    CompressionHook,
    NameCipherHook,
    ZlibCompressHook,
    XorNameHook,
)

__all__ = [
    # 版本
    "__version__",
    # 异常
    "CarError",
    "InvalidFormatError",
    "TruncatedRecordError",
    "ArchiveModeError",
    "CompressionError",
    "EntryNotFoundError",
    # Archive
    "Archive",
    "ArchiveWriter",
    "ArchiveReader",
    # 配置
    "CarConfig",
    # Hooks
    "CompressionHook",
    "NameCipherHook",
    "ZlibCompressHook",
    "XorNameHook",
]
