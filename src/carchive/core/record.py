#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
记录编解码

负责单条记录 (混淆文件名 + 大小字段 + 压缩数据块) 的读写。
"""

import logging
from typing import Optional

from .binary_io import BinaryReader, BinaryWriter
from .schema import RecordHeader
from ..exceptions import InvalidFormatError
from ..hooks.base import CompressionHook, NameCipherHook
from ..hooks.compression import ZlibCompressHook
from ..hooks.obfuscate import XorNameHook

logger = logging.getLogger(__name__)


# decode() 在流正常结束时的返回值
END_OF_ARCHIVE = None


class RecordCodec:
    """
    记录编解码器
    
    无状态，只依赖传入的读写器位置。decode() 不解压数据块，
    只计数或跳过的扫描不需要付出解压成本。
    """
    
    def __init__(
        self,
        compression: Optional[CompressionHook] = None,
        name_cipher: Optional[NameCipherHook] = None
    ):
        """
        Args:
            compression: 数据块压缩钩子 (默认 zlib)
            name_cipher: 文件名混淆钩子 (默认 XOR 0x58)
        """
        self._compression = compression or ZlibCompressHook()
        self._name_cipher = name_cipher or XorNameHook()
    
    def encode(self, writer: BinaryWriter, name: str, payload: bytes) -> RecordHeader:
        """
        写入一条记录
        
        先压缩再写入，压缩失败时流中不会留下半条记录。
        
        Args:
            writer: 目标写入器
            name: 文件名
            payload: 未压缩的文件内容
            
        Returns:
            写入记录的元信息 (offset 为相对本写入器起点的位置)
        """
        encoded_name = self._name_cipher.encode(name.encode('utf-8'))
        packed = self._compression.compress(payload)
        
        writer.write_sized_bytes(encoded_name)
        writer.write_size(len(payload))
        writer.write_size(len(packed))
        offset = writer.bytes_written
        writer.write_bytes(packed)
        
        logger.debug(
            "写入记录 %r: %d -> %d 字节", name, len(payload), len(packed)
        )
        return RecordHeader(name, len(payload), len(packed), offset)
    
    def decode(self, reader: BinaryReader) -> Optional[RecordHeader]:
        """
        读取一条记录的元信息
        
        返回后读取位置停在数据块开头，调用方必须接着调用
        read_payload() 或 skip_payload()。
        
        Returns:
            RecordHeader，流已正常结束时返回 END_OF_ARCHIVE
            
        Raises:
            TruncatedRecordError: 记录在中途被截断
            InvalidFormatError: 文件名不是合法的 UTF-8
        """
        name_length = reader.try_read_size("name_length")
        if name_length is None:
            return END_OF_ARCHIVE
        
        encoded_name = reader.read_bytes(name_length, "name")
        raw_size = reader.read_size("raw_size")
        packed_size = reader.read_size("packed_size")
        
        try:
            name = self._name_cipher.decode(encoded_name).decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidFormatError(f"记录文件名无法解码: {e}") from e
        
        return RecordHeader(name, raw_size, packed_size, reader.position)
    
    def read_payload(self, reader: BinaryReader, header: RecordHeader) -> bytes:
        """读取并解压当前记录的数据块"""
        packed = reader.read_bytes(header.packed_size, "payload")
        return self._compression.decompress(packed, header.raw_size)
    
    def skip_payload(self, reader: BinaryReader, header: RecordHeader) -> None:
        """跳过当前记录的数据块，不读取也不解压"""
        reader.skip(header.packed_size)
