#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Archive 统一入口

在构造时根据 mode 选定写句柄或读句柄，之后不再改变。
"""

from typing import BinaryIO, Optional, Union

from .reader import ArchiveReader
from .writer import ArchiveWriter
from ..core.schema import RecordHeader
from ..exceptions import ArchiveModeError
from ..hooks.base import CompressionHook, NameCipherHook


Handle = Union[ArchiveWriter, ArchiveReader]


class Archive:
    """
    归档
    
    绑定一个调用方持有的流，处于写模式 ('w') 或读模式 ('r') 之一。
    不匹配当前模式的操作抛出 ArchiveModeError。
    需要静态区分模式时，直接使用 ArchiveWriter / ArchiveReader。
    
    Examples:
        >>> buf = io.BytesIO()
        >>> header = Archive(buf, 'w').add_file("hello", io.BytesIO(b"hello, world"))
        >>> Archive(buf, 'r').get_as_string("hello")
        'hello, world'
    """
    
    def __init__(
        self,
        stream: BinaryIO,
        mode: str = 'r',
        compression: Optional[CompressionHook] = None,
        name_cipher: Optional[NameCipherHook] = None,
        indexed: bool = False
    ):
        """
        Args:
            stream: 'w' 模式为输出流；'r' 模式为可 seek 的输入流
            mode: 'w' 写入新归档 (立即写文件头)，'r' 读取 (立即校验文件头)
            compression: 数据块压缩钩子
            name_cipher: 文件名混淆钩子
            indexed: 读模式下是否建立内存索引
            
        Raises:
            ValueError: mode 不是 'r' 或 'w'
            InvalidFormatError: 读模式下文件头无效
        """
        if mode == 'w':
            self._handle: Handle = ArchiveWriter(stream, compression, name_cipher)
        elif mode == 'r':
            self._handle = ArchiveReader(stream, compression, name_cipher, indexed)
        else:
            raise ValueError(f"mode 必须是 'r' 或 'w': {mode!r}")
    
    @property
    def mode(self) -> str:
        return self._handle.mode
    
    @property
    def handle(self) -> Handle:
        """底层的读/写句柄"""
        return self._handle
    
    def _writer(self, operation: str) -> ArchiveWriter:
        if not isinstance(self._handle, ArchiveWriter):
            raise ArchiveModeError(operation, self.mode)
        return self._handle
    
    def _reader(self, operation: str) -> ArchiveReader:
        if not isinstance(self._handle, ArchiveReader):
            raise ArchiveModeError(operation, self.mode)
        return self._handle
    
    def add_file(self, name: str, content: Union[BinaryIO, bytes]) -> RecordHeader:
        """追加一个文件 (仅写模式)"""
        return self._writer("add_file").add_file(name, content)
    
    def get_file_count(self) -> int:
        """写模式返回已追加数；读模式扫描归档计数"""
        return self._handle.get_file_count()
    
    def read(self, name: str) -> bytes:
        """读取文件内容 (仅读模式)"""
        return self._reader("read").read(name)
    
    def get_as_string(self, name: str, encoding: str = 'utf-8') -> str:
        """读取文件内容并解码为字符串 (仅读模式)"""
        return self._reader("get_as_string").get_as_string(name, encoding)
