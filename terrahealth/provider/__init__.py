# -*- coding: utf-8 -*-
"""
AWS Provider 模块

功能：
- 抽象 EC2Service 和 CloudWatchService 接口
- 提供基于 boto3 默认凭证链的会话创建
"""

from .interfaces import CloudWatchService, EC2Service
from .session import create_session

__all__ = [
    'CloudWatchService',
    'EC2Service',
    'create_session',
]
