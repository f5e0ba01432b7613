# -*- coding: utf-8 -*-
"""
运行配置加载模块

功能：
- 从环境变量读取运行配置（不使用配置文件）
- 定义清晰的数据结构（Settings）
- 非法取值时回退到默认值并给出警告
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

REGION_ENV = 'TERRAHEALTH_REGION'
LOG_LEVEL_ENV = 'TERRAHEALTH_LOG_LEVEL'

DEFAULT_LOG_LEVEL = 'WARNING'
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """运行配置"""
    region: Optional[str] = None          # AWS 区域，None 表示交给 boto3 默认链解析
    log_level: str = DEFAULT_LOG_LEVEL    # 日志级别


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    从环境变量加载运行配置

    Args:
        environ: 环境变量映射（默认 os.environ，测试时可传入字典）

    Returns:
        Settings 对象
    """
    if environ is None:
        environ = os.environ

    region = environ.get(REGION_ENV, '').strip() or None

    log_level = environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(f"{LOG_LEVEL_ENV}={log_level} 不是有效的日志级别，使用默认值 {DEFAULT_LOG_LEVEL}")
        log_level = DEFAULT_LOG_LEVEL

    return Settings(region=region, log_level=log_level)
