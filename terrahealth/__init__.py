# -*- coding: utf-8 -*-
"""
TerraHealth CLI

功能：
- 列出 AWS EC2 实例 ID
- 查询 EC2 实例 CPU 使用率（CloudWatch）
"""

__version__ = '0.1.0'
