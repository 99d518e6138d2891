#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档读取器

从调用方提供的可 seek 输入流中读取归档。
默认不维护索引：每次查询都从头校验文件头并顺序扫描。
"""

import io
import logging
from typing import BinaryIO, Dict, Iterator, List, Optional

from ..core.binary_io import BinaryReader
from ..core.record import RecordCodec, END_OF_ARCHIVE
from ..core.schema import ArchiveHeader, RecordHeader
from ..hooks.base import CompressionHook, NameCipherHook
from ..exceptions import EntryNotFoundError

logger = logging.getLogger(__name__)


class ArchiveReader:
    """
    归档读取器 (读模式句柄)
    
    支持两种查询方式:
    - 扫描模式 (默认): 每次查询重新 seek 到开头、校验文件头、逐条扫描
    - 索引模式 (indexed=True): 打开时扫描一次，建立 文件名 -> 记录 的映射
    
    两种方式下，重名文件都以流中第一条为准。
    所有查询都会移动流的读取位置，同一个流不能被并发使用。
    """
    
    mode = "read"
    
    def __init__(
        self,
        stream: BinaryIO,
        compression: Optional[CompressionHook] = None,
        name_cipher: Optional[NameCipherHook] = None,
        indexed: bool = False
    ):
        """
        初始化读取器，立即校验文件头
        
        Args:
            stream: 可读、可 seek 的二进制输入流
            compression: 数据块解压钩子 (默认 zlib)
            name_cipher: 文件名混淆钩子 (默认 XOR 0x58)
            indexed: 是否在打开时建立内存索引
            
        Raises:
            InvalidFormatError: 文件头无效
        """
        self._reader = BinaryReader(stream)
        self._codec = RecordCodec(compression, name_cipher)
        self._index: Optional[Dict[str, RecordHeader]] = None
        self._indexed_count = 0
        
        self._rewind()
        if indexed:
            self.rebuild_index()
    
    @property
    def indexed(self) -> bool:
        """是否使用内存索引"""
        return self._index is not None
    
    def _rewind(self) -> None:
        """回到流开头并重新校验文件头"""
        self._reader.seek(0)
        ArchiveHeader.verify(self._reader)
    
    def iter_records(self) -> Iterator[RecordHeader]:
        """
        按流中顺序遍历所有记录的元信息
        
        只解码元信息，数据块通过 seek 跳过。
        
        Raises:
            InvalidFormatError: 文件头无效或记录被截断
        """
        self._rewind()
        while True:
            header = self._codec.decode(self._reader)
            if header is END_OF_ARCHIVE:
                return
            yield header
            # 调用方可能在 yield 期间读取过数据块
            self._reader.seek(header.offset)
            self._codec.skip_payload(self._reader, header)
    
    def rebuild_index(self) -> int:
        """
        重新扫描并建立内存索引
        
        Returns:
            记录总数 (含重名)
        """
        index: Dict[str, RecordHeader] = {}
        count = 0
        for header in self.iter_records():
            index.setdefault(header.name, header)
            count += 1
        self._index = index
        self._indexed_count = count
        logger.debug("已建立索引: %d 条记录, %d 个文件名", count, len(index))
        return count
    
    def get_file_count(self) -> int:
        """
        归档中的记录数
        
        扫描模式下每次调用都是 O(n)。
        """
        if self._index is not None:
            return self._indexed_count
        return sum(1 for _ in self.iter_records())
    
    def _find(self, name: str) -> Optional[RecordHeader]:
        if self._index is not None:
            return self._index.get(name)
        for header in self.iter_records():
            if header.name == name:
                return header
        return None
    
    def exists(self, name: str) -> bool:
        """检查文件名是否存在"""
        return self._find(name) is not None
    
    def get_entry(self, name: str) -> RecordHeader:
        """
        获取指定文件名的记录元信息
        
        Raises:
            EntryNotFoundError: 文件名不存在
        """
        header = self._find(name)
        if header is None:
            raise EntryNotFoundError(name)
        return header
    
    def read(self, name: str) -> bytes:
        """
        读取文件内容
        
        Args:
            name: 文件名
            
        Returns:
            解压后的原始内容
            
        Raises:
            EntryNotFoundError: 文件名不存在
            CompressionError: 解压失败或大小不符
            InvalidFormatError: 归档损坏
        """
        header = self.get_entry(name)
        self._reader.seek(header.offset)
        return self._codec.read_payload(self._reader, header)
    
    def get_as_string(
        self,
        name: str,
        encoding: str = 'utf-8',
        errors: str = 'strict'
    ) -> str:
        """读取文件内容并解码为字符串"""
        return self.read(name).decode(encoding, errors)
    
    def open(self, name: str) -> io.BytesIO:
        """以文件对象方式打开"""
        return io.BytesIO(self.read(name))
    
    def list_all(self) -> List[str]:
        """
        按流中顺序列出所有文件名
        
        重名文件会出现多次。
        """
        return [header.name for header in self.iter_records()]
