#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive 异常定义

所有异常均继承自 CarError，便于统一捕获。
底层流的 I/O 失败 (OSError) 不做包装，原样抛出。
"""

from typing import Optional


class CarError(Exception):
    """carchive 基础异常"""
    pass


class InvalidFormatError(CarError):
    """
    文件格式无效异常
    
    当文件头魔法数、版本号或记录结构不符合预期时抛出。
    """
    def __init__(
        self,
        message: str,
        expected: Optional[str] = None,
        actual: Optional[str] = None
    ):
        self.expected = expected
        self.actual = actual
        if expected and actual:
            message = f"{message}: 期望 {expected}, 实际 {actual}"
        super().__init__(message)


class TruncatedRecordError(InvalidFormatError):
    """
    记录截断异常
    
    长度前缀已读取，但其承诺的字节不足时抛出。
    与"流正常结束"不同，这表示归档已损坏。
    """
    def __init__(self, field: str, expected_size: int, actual_size: int):
        self.field = field
        self.expected_size = expected_size
        self.actual_size = actual_size
        super().__init__(
            f"记录字段 '{field}' 被截断: "
            f"期望 {expected_size} 字节，实际只有 {actual_size} 字节"
        )


class ArchiveModeError(CarError):
    """
    模式错误异常
    
    在只读归档上执行写操作 (或反之) 时抛出。
    这是调用方的用法错误，而不是数据问题。
    """
    def __init__(self, operation: str, mode: str):
        self.operation = operation
        self.mode = mode
        super().__init__(f"'{operation}' 不能用于 {mode} 模式的归档")


class CompressionError(CarError):
    """
    压缩/解压失败异常
    
    底层 zlib 报错，或解压后长度与记录的原始大小不一致时抛出。
    """
    pass


class EntryNotFoundError(CarError, FileNotFoundError):
    """
    条目不存在异常
    
    扫描完整个归档仍未找到指定文件名时抛出。
    同时继承 FileNotFoundError，兼容按路径查找失败的常规处理方式。
    """
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"归档中不存在: {name}")
