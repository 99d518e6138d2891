#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供共享 fixtures 和测试工具。
"""

import io
from typing import Dict, Iterable, Tuple

import pytest

from carchive import ArchiveWriter


# ==================== 自定义 Markers ====================

def pytest_configure(config):
    """注册自定义 markers"""
    config.addinivalue_line("markers", "slow: 耗时较长的测试")


# ==================== 工具函数 ====================

def build_archive(entries: Iterable[Tuple[str, bytes]]) -> bytes:
    """按顺序写入 (文件名, 内容) 并返回归档字节"""
    buf = io.BytesIO()
    writer = ArchiveWriter(buf)
    for name, data in entries:
        writer.add_file(name, io.BytesIO(data))
    return buf.getvalue()


# ==================== 基础 Fixtures ====================

@pytest.fixture
def buffer() -> io.BytesIO:
    """同时用于写入和读取的内存流"""
    return io.BytesIO()


@pytest.fixture
def sample_entries() -> Dict[str, bytes]:
    """测试用文件集"""
    return {
        "hero.txt": b"Hero data content",
        "config.json": b'{"name": "test", "value": 123}',
        "data.bin": bytes(range(256)),
        "empty.txt": b"",
        "中文文件.txt": "这是中文内容测试".encode("utf-8"),
    }


@pytest.fixture
def sample_archive(sample_entries) -> io.BytesIO:
    """包含 sample_entries 的归档"""
    return io.BytesIO(build_archive(sample_entries.items()))


@pytest.fixture
def sample_files(tmp_path, sample_entries) -> tuple:
    """
    在磁盘上创建测试文件
    
    Returns:
        (目录路径, 文件内容字典)
    """
    for name, content in sample_entries.items():
        (tmp_path / name).write_bytes(content)
    return tmp_path, sample_entries
