# -*- coding: utf-8 -*-
"""
AWS API 客户端模块

功能：
- 封装 EC2 客户端创建与实例查询
"""

from .ec2 import EC2Handler, check_instances

__all__ = [
    'EC2Handler',
    'check_instances',
]
