# -*- coding: utf-8 -*-
"""
CloudWatch 指标模块

功能：
- 构建 EC2 CPU 使用率查询
- 调用 GetMetricData 获取原始指标数据
"""

from .client import (
    CloudWatchHandler,
    build_cpu_utilization_query,
    fetch_cpu_utilization,
    new_cloudwatch_client,
)

__all__ = [
    'CloudWatchHandler',
    'build_cpu_utilization_query',
    'fetch_cpu_utilization',
    'new_cloudwatch_client',
]
