#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Archive 模块

提供归档的写入、读取和统一入口。
"""

from .writer import ArchiveWriter
from .reader import ArchiveReader
from .archive import Archive

__all__ = ["Archive", "ArchiveWriter", "ArchiveReader"]
