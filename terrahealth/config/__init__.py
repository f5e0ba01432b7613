# -*- coding: utf-8 -*-
"""
配置模块

功能：
- 从环境变量加载运行配置
"""

from .loader import Settings, load_settings

__all__ = [
    'Settings',
    'load_settings',
]
