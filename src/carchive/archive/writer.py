#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档写入器

把文件逐条追加到调用方提供的输出流。只追加，不回写。
"""

import logging
from typing import BinaryIO, Callable, Iterable, Optional, Union

from ..core.batch import (
    BatchResult, ErrorPolicy, FileItem, ProgressInfo, ProgressTracker,
    estimate_total_bytes
)
from ..core.binary_io import BinaryWriter
from ..core.record import RecordCodec
from ..core.schema import ArchiveHeader, RecordHeader
from ..hooks.base import CompressionHook, NameCipherHook

logger = logging.getLogger(__name__)


class ArchiveWriter:
    """
    归档写入器 (写模式句柄)
    
    构造时立即写入文件头。流由调用方持有，本类不会关闭它。
    
    Examples:
        >>> buf = io.BytesIO()
        >>> writer = ArchiveWriter(buf)
        >>> header = writer.add_file("hello", io.BytesIO(b"hello, world"))
        >>> writer.file_count
        1
    """
    
    mode = "write"
    
    def __init__(
        self,
        stream: BinaryIO,
        compression: Optional[CompressionHook] = None,
        name_cipher: Optional[NameCipherHook] = None
    ):
        """
        Args:
            stream: 可写的二进制输出流
            compression: 数据块压缩钩子 (默认 zlib)
            name_cipher: 文件名混淆钩子 (默认 XOR 0x58)
        """
        self._writer = BinaryWriter(stream)
        self._codec = RecordCodec(compression, name_cipher)
        self._file_count = 0
        
        ArchiveHeader().write(self._writer)
        logger.debug("已写入归档文件头")
    
    @property
    def file_count(self) -> int:
        """已追加的记录数"""
        return self._file_count
    
    def get_file_count(self) -> int:
        """已追加的记录数，O(1)"""
        return self._file_count
    
    @property
    def bytes_written(self) -> int:
        """已写入的总字节数 (含文件头)"""
        return self._writer.bytes_written
    
    def add_file(
        self,
        name: str,
        content: Union[BinaryIO, bytes, bytearray, memoryview]
    ) -> RecordHeader:
        """
        追加一个文件
        
        内容会被完整读入内存后压缩。不检查重名，重名时
        读取端按流中顺序取第一条。
        
        Args:
            name: 存入归档的文件名
            content: 二进制输入流，或直接给出的字节
            
        Returns:
            写入记录的元信息
            
        Raises:
            CompressionError: 压缩失败
            OSError: 读取内容或写入输出流失败
        """
        if isinstance(content, (bytes, bytearray, memoryview)):
            data = bytes(content)
        else:
            data = content.read()
        
        header = self._codec.encode(self._writer, name, data)
        self._file_count += 1
        return header
    
    def add_bytes(self, name: str, data: bytes) -> RecordHeader:
        """以字节形式追加一个文件"""
        return self.add_file(name, data)
    
    def add_files_batch(
        self,
        items: Iterable[FileItem],
        on_error: Union[str, ErrorPolicy] = ErrorPolicy.RAISE,
        progress_callback: Optional[Callable[[ProgressInfo], None]] = None
    ) -> BatchResult:
        """
        批量添加本地文件
        
        Args:
            items: FileItem 列表或迭代器
            on_error: 错误处理策略 ('raise', 'skip', 'abort')
            progress_callback: 进度回调函数
            
        Returns:
            BatchResult 批量操作结果
        """
        policy = ErrorPolicy(on_error)
        items = list(items)
        
        tracker = ProgressTracker(
            total_files=len(items),
            total_bytes=estimate_total_bytes(items),
            callback=progress_callback
        )
        result = BatchResult()
        
        for item in items:
            try:
                with open(item.local_path, 'rb') as f:
                    header = self.add_file(item.archive_name, f)
            except Exception as e:
                if policy is ErrorPolicy.RAISE:
                    raise
                logger.warning("添加 %s 失败: %s", item.local_path, e)
                result.failed_count += 1
                result.failed_files.append((item.local_path, e))
                if policy is ErrorPolicy.ABORT:
                    break
                tracker.update(item.local_path, 0)
                continue
            
            result.success_count += 1
            result.total_bytes += header.raw_size
            tracker.update(item.local_path, header.raw_size)
        
        result.elapsed_time = tracker.finish()
        return result
