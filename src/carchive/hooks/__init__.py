#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive Hook 系统

提供数据块压缩与文件名混淆的可插拔接口。
"""

from .base import CompressionHook, NameCipherHook
from .compression import ZlibCompressHook, compress_bound
from .obfuscate import XorNameHook

__all__ = [
    # 抽象基类
    "CompressionHook",
    "NameCipherHook",
    # 内置实现
    "ZlibCompressHook",
    "XorNameHook",
    "compress_bound",
]
