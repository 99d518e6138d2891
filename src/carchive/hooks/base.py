#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hook 基类定义

定义数据块压缩和文件名混淆的抽象接口。
"""

from abc import ABC, abstractmethod


class CompressionHook(ABC):
    """
    压缩算法钩子
    
    负责单个数据块的压缩与解压。实现必须是纯函数式的：
    每次调用分配新的缓冲区，不在调用之间共享状态。
    """
    
    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """
        压缩数据
        
        Args:
            data: 原始数据
            
        Returns:
            压缩后的数据
            
        Raises:
            CompressionError: 压缩失败
        """
        pass
    
    @abstractmethod
    def decompress(self, data: bytes, raw_size: int) -> bytes:
        """
        解压数据
        
        Args:
            data: 压缩后的数据
            raw_size: 记录中声明的原始大小，解压结果必须与之相等
            
        Returns:
            解压后的数据
            
        Raises:
            CompressionError: 解压失败或长度不符
        """
        pass


class NameCipherHook(ABC):
    """
    文件名混淆钩子
    
    encode/decode 必须互逆。这不是加密，只用于避免
    文件名以明文出现在归档中。
    """
    
    @abstractmethod
    def encode(self, name: bytes) -> bytes:
        """混淆文件名字节"""
        pass
    
    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """还原文件名字节"""
        pass
