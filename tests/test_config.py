#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
CarConfig 测试
"""

import pytest

from carchive.config import CarConfig, DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CARCHIVE_OUTPUT", "CARCHIVE_LOG_LEVEL", "CARCHIVE_INDEXED"):
        monkeypatch.delenv(name, raising=False)


class TestCarConfig:
    def test_defaults(self):
        config = CarConfig.from_env()
        
        assert config == CarConfig()
        assert config.output_path == DEFAULT_OUTPUT == "output.car"
        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.indexed_reads is False
    
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CARCHIVE_OUTPUT", "backup.car")
        monkeypatch.setenv("CARCHIVE_LOG_LEVEL", "debug")
        monkeypatch.setenv("CARCHIVE_INDEXED", "yes")
        
        config = CarConfig.from_env()
        
        assert config.output_path == "backup.car"
        assert config.log_level == "DEBUG"
        assert config.indexed_reads is True
    
    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("CARCHIVE_LOG_LEVEL", "LOUD")
        
        assert CarConfig.from_env().log_level == DEFAULT_LOG_LEVEL
    
    def test_frozen(self):
        with pytest.raises(AttributeError):
            CarConfig().output_path = "x"
