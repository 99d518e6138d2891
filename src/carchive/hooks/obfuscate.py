#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内置文件名混淆 Hook
"""

from .base import NameCipherHook


# 默认密钥 (ASCII 'X')，与已有归档兼容
NAME_XOR_KEY = 0x58


class XorNameHook(NameCipherHook):
    """
    单字节 XOR 混淆
    
    每个字节与固定 key 异或，encode 与 decode 是同一操作。
    注意：这不是安全的加密，仅用于防止直接查看文件名。
    """
    
    def __init__(self, key: int = NAME_XOR_KEY):
        """
        Args:
            key: XOR 密钥 (0-255)，默认 0x58 ('X')
        """
        if not 0 <= key <= 0xFF:
            raise ValueError(f"XOR 密钥必须在 0-255 之间: {key}")
        self._key = key
        self._table = bytes(b ^ key for b in range(256))
    
    @property
    def key(self) -> int:
        return self._key
    
    def _xor(self, data: bytes) -> bytes:
        return data.translate(self._table)
    
    def encode(self, name: bytes) -> bytes:
        return self._xor(name)
    
    def decode(self, data: bytes) -> bytes:
        return self._xor(data)
