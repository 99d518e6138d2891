#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
二进制 I/O 封装

提供 BinaryWriter 和 BinaryReader 类，封装所有底层流操作，
使上层模块不需要直接操作文件指针。

所有整数字段固定为无符号 64 位 Little-Endian。
"""

import struct
from typing import BinaryIO, Optional

from ..exceptions import TruncatedRecordError


# 长度/大小字段的编码格式
SIZE_FORMAT = '<Q'
SIZE_FIELD_BYTES = struct.calcsize(SIZE_FORMAT)


class BinaryWriter:
    """
    二进制写入器
    
    封装所有底层写操作，提供类型化的写入方法。
    只追加写入，不支持回写。
    """
    
    def __init__(self, stream: BinaryIO):
        """
        初始化写入器
        
        Args:
            stream: 可写的二进制流 (调用方持有，本类不会关闭)
        """
        self._stream = stream
        self._written = 0
    
    @property
    def bytes_written(self) -> int:
        """本写入器累计写入的字节数"""
        return self._written
    
    def write_bytes(self, data: bytes) -> int:
        """
        写入原始字节
        
        Args:
            data: 要写入的字节
            
        Returns:
            写入的字节数
        """
        written = self._stream.write(data)
        # 部分流 (如旧式文件对象) 的 write() 返回 None
        if written is None:
            written = len(data)
        self._written += written
        return written
    
    def write_size(self, value: int) -> int:
        """写入长度/大小字段 (u64, Little-Endian)"""
        return self.write_bytes(struct.pack(SIZE_FORMAT, value))
    
    def write_sized_bytes(self, data: bytes) -> int:
        """
        写入长度前缀字节串
        
        格式: [长度: u64][字节]
        
        Returns:
            写入的总字节数
        """
        return self.write_size(len(data)) + self.write_bytes(data)


class BinaryReader:
    """
    二进制读取器
    
    封装所有底层读操作，提供类型化的读取方法。
    要求流可 seek，以便跳过数据块和重新从头扫描。
    """
    
    def __init__(self, stream: BinaryIO):
        """
        初始化读取器
        
        Args:
            stream: 可读、可 seek 的二进制流 (调用方持有，本类不会关闭)
        """
        self._stream = stream
    
    @property
    def position(self) -> int:
        """当前读取位置"""
        return self._stream.tell()
    
    def read_bytes(self, size: int, field: str = "bytes") -> bytes:
        """
        读取指定字节数
        
        Args:
            size: 要读取的字节数
            field: 字段名，用于错误信息
            
        Returns:
            读取的字节
            
        Raises:
            TruncatedRecordError: 流中剩余字节不足
        """
        # 先核对剩余字节，损坏的长度字段不能直接交给 read()
        remaining = self._remaining()
        if size > remaining:
            raise TruncatedRecordError(field, size, remaining)
        data = self._stream.read(size)
        if len(data) < size:
            raise TruncatedRecordError(field, size, len(data))
        return data
    
    def _remaining(self) -> int:
        """当前位置到流末尾的字节数"""
        start = self._stream.tell()
        end = self._stream.seek(0, 2)
        self._stream.seek(start)
        return max(end - start, 0)
    
    def read_size(self, field: str = "size") -> int:
        """读取长度/大小字段 (u64, Little-Endian)"""
        return struct.unpack(SIZE_FORMAT, self.read_bytes(SIZE_FIELD_BYTES, field))[0]
    
    def try_read_size(self, field: str = "size") -> Optional[int]:
        """
        读取长度字段，流已正常结束时返回 None
        
        只有一个字节都读不到才算正常结束；读到部分字节视为截断。
        
        Returns:
            字段值，或 None (流结束)
        """
        data = self._stream.read(SIZE_FIELD_BYTES)
        if not data:
            return None
        if len(data) < SIZE_FIELD_BYTES:
            raise TruncatedRecordError(field, SIZE_FIELD_BYTES, len(data))
        return struct.unpack(SIZE_FORMAT, data)[0]
    
    def read_sized_bytes(self, field: str = "bytes") -> bytes:
        """
        读取长度前缀字节串
        
        格式: [长度: u64][字节]
        """
        length = self.read_size(f"{field}_length")
        return self.read_bytes(length, field)
    
    def seek(self, position: int) -> None:
        """移动到指定位置"""
        self._stream.seek(position)
    
    def skip(self, size: int) -> None:
        """
        跳过指定字节
        
        seek 越过流末尾不会报错，因此先核对剩余字节，
        以发现被截断的数据块。
        
        Args:
            size: 要跳过的字节数
        """
        remaining = self._remaining()
        if size > remaining:
            raise TruncatedRecordError("payload", size, remaining)
        self._stream.seek(self._stream.tell() + size)
