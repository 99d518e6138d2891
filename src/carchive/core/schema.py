#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive 数据结构定义

定义文件头 ArchiveHeader 和记录元信息 RecordHeader。

布局:
    Header:  [magic: b'CAR'][version: b'v1']
    Record:  [name_length: u64][name: XOR 0x58][raw_size: u64]
             [packed_size: u64][payload: packed_size 字节, zlib]
"""

from dataclasses import dataclass
from typing import ClassVar

from .binary_io import BinaryReader, BinaryWriter
from ..exceptions import InvalidFormatError, TruncatedRecordError


# ==================== 常量定义 ====================

MAGIC = b'CAR'
VERSION = b'v1'
HEADER_SIZE = len(MAGIC) + len(VERSION)


# ==================== 文件头 ====================

@dataclass(frozen=True)
class ArchiveHeader:
    """
    文件头 (5 bytes)
    
    位于流开头，且只出现一次。无长度前缀，无结束符。
    不保存任何状态，verify() 可以反复调用。
    """
    SIZE: ClassVar[int] = HEADER_SIZE
    
    magic: bytes = MAGIC
    version: bytes = VERSION
    
    def pack(self) -> bytes:
        """序列化为字节"""
        return self.magic + self.version
    
    def write(self, writer: BinaryWriter) -> int:
        """写入文件头"""
        return writer.write_bytes(self.pack())
    
    @classmethod
    def verify(cls, reader: BinaryReader) -> 'ArchiveHeader':
        """
        从当前位置读取并校验文件头
        
        Raises:
            InvalidFormatError: 流过短、魔法数或版本号不匹配
        """
        try:
            data = reader.read_bytes(cls.SIZE, "header")
        except TruncatedRecordError as e:
            raise InvalidFormatError(
                "读取归档文件头时遇到流结束",
                expected=f"{cls.SIZE} 字节",
                actual=f"{e.actual_size} 字节"
            ) from e
        
        magic, version = data[:len(MAGIC)], data[len(MAGIC):]
        if magic != MAGIC:
            raise InvalidFormatError(
                "输入不是 CAR 归档",
                expected=repr(MAGIC),
                actual=repr(magic)
            )
        if version != VERSION:
            raise InvalidFormatError(
                "不支持的 CAR 版本",
                expected=repr(VERSION),
                actual=repr(version)
            )
        return cls(magic, version)


# ==================== 记录元信息 ====================

@dataclass(frozen=True)
class RecordHeader:
    """
    单条记录的元信息
    
    解码时不立即解压，payload 仍留在流中 offset 处，
    由调用方决定读取还是跳过。
    """
    name: str
    raw_size: int      # 解压后的原始大小
    packed_size: int   # 压缩数据块大小
    offset: int        # 压缩数据块在流中的起始位置
    
    @property
    def end(self) -> int:
        """下一条记录的起始位置"""
        return self.offset + self.packed_size
