#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive 配置

命令行工具的默认值来自环境变量，命令行参数优先。

环境变量:
    CARCHIVE_OUTPUT     默认输出文件名 (output.car)
    CARCHIVE_LOG_LEVEL  日志级别 (WARNING)
    CARCHIVE_INDEXED    读取归档时是否建立内存索引 (false)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


DEFAULT_OUTPUT = "output.car"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CarConfig:
    """
    命令行工具配置
    
    Attributes:
        output_path: 新归档的输出路径
        log_level: logging 级别名称
        indexed_reads: 读取归档时是否建立内存索引
    """
    output_path: str = DEFAULT_OUTPUT
    log_level: str = DEFAULT_LOG_LEVEL
    indexed_reads: bool = False
    
    @classmethod
    def from_env(cls) -> 'CarConfig':
        """从环境变量加载配置"""
        log_level = os.getenv("CARCHIVE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning("未知的日志级别 %r，使用 %s", log_level, DEFAULT_LOG_LEVEL)
            log_level = DEFAULT_LOG_LEVEL
        
        return cls(
            output_path=os.getenv("CARCHIVE_OUTPUT", DEFAULT_OUTPUT),
            log_level=log_level,
            indexed_reads=os.getenv("CARCHIVE_INDEXED", "false").lower() in _TRUE_VALUES,
        )
