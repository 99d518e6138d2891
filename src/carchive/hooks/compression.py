#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内置 zlib 数据块压缩 Hook
"""

import zlib

from .base import CompressionHook
from ..exceptions import CompressionError


def compress_bound(size: int) -> int:
    """
    压缩结果的大小上限

    与 zlib 的 compressBound() 公式一致。
    """
    return size + (size >> 12) + (size >> 14) + (size >> 25) + 13


class ZlibCompressHook(CompressionHook):
    """
    使用 zlib (deflate) 压缩数据块
    
    压缩级别固定为 zlib 默认值，不对外暴露。
    """
    
    def compress(self, data: bytes) -> bytes:
        """压缩数据，结果不超过 compress_bound(len(data))"""
        try:
            packed = zlib.compress(data, zlib.Z_DEFAULT_COMPRESSION)
        except zlib.error as e:
            raise CompressionError(f"压缩失败: {e}") from e
        
        bound = compress_bound(len(data))
        if len(packed) > bound:
            raise CompressionError(
                f"压缩结果 {len(packed)} 字节超出上限 {bound} 字节"
            )
        return packed
    
    def decompress(self, data: bytes, raw_size: int) -> bytes:
        """解压数据，最多产出 raw_size 字节"""
        decompressor = zlib.decompressobj()
        try:
            # 多留 1 字节，用于发现实际数据比声明的更长
            raw = decompressor.decompress(data, raw_size + 1)
        except (zlib.error, OverflowError) as e:
            raise CompressionError(f"解压失败: {e}") from e
        
        if not decompressor.eof:
            raise CompressionError("解压失败: 压缩数据不完整或超出声明大小")
        if decompressor.unused_data:
            raise CompressionError(
                f"解压失败: 数据块末尾多出 {len(decompressor.unused_data)} 字节"
            )
        if len(raw) != raw_size:
            raise CompressionError(
                f"解压后大小不符: 期望 {raw_size} 字节，实际 {len(raw)} 字节"
            )
        return raw
