# -*- coding: utf-8 -*-
"""
AWS CloudWatch 指标查询模块

功能：
- 构建 EC2 CPU 使用率指标查询请求
- 调用 GetMetricData 并原样返回响应
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import boto3

from terrahealth.provider.interfaces import CloudWatchService
from terrahealth.provider.session import create_session

logger = logging.getLogger(__name__)

# 固定查询参数
QUERY_ID = 'cpuUtilization'
NAMESPACE = 'AWS/EC2'
METRIC_NAME = 'CPUUtilization'
WINDOW = timedelta(hours=24)
PERIOD = 3600  # 1 小时
STATISTIC = 'Average'
UNIT = 'Percent'


def new_cloudwatch_client(session: boto3.Session) -> Any:
    """
    使用已有会话创建 CloudWatch 客户端

    Args:
        session: boto3 会话

    Returns:
        CloudWatch 客户端
    """
    return session.client('cloudwatch')


def build_cpu_utilization_query(instance_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    构建 GetMetricData 请求参数

    时间范围为最近 24 小时，统计周期 1 小时，Average / Percent。

    Args:
        instance_id: EC2 实例 ID
        now: 查询结束时间（默认：当前 UTC 时间）

    Returns:
        可直接传给 get_metric_data 的参数字典
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return {
        'StartTime': now - WINDOW,
        'EndTime': now,
        'MetricDataQueries': [
            {
                'Id': QUERY_ID,
                'MetricStat': {
                    'Metric': {
                        'Namespace': NAMESPACE,
                        'MetricName': METRIC_NAME,
                        'Dimensions': [
                            {'Name': 'InstanceId', 'Value': instance_id},
                        ],
                    },
                    'Period': PERIOD,
                    'Stat': STATISTIC,
                    'Unit': UNIT,
                },
                'ReturnData': True,
            },
        ],
    }


def fetch_cpu_utilization(instance_id: str, client: Any) -> Dict[str, Any]:
    """
    获取实例 CPU 使用率指标

    只发起一次请求：不重试、不处理 NextToken、不做单位换算。
    CloudWatch 调用异常原样抛出，由调用方处理。

    Args:
        instance_id: EC2 实例 ID
        client: CloudWatch 客户端

    Returns:
        GetMetricData 原始响应
    """
    query = build_cpu_utilization_query(instance_id)
    logger.debug(f"查询 CPU 使用率: {NAMESPACE}/{METRIC_NAME} InstanceId={instance_id}")
    return client.get_metric_data(**query)


class CloudWatchHandler(CloudWatchService):
    """
    CloudWatch 服务实现

    功能：
    - 使用 boto3 默认凭证链创建 CloudWatch 客户端
    - 获取实例 CPU 使用率
    """

    def __init__(self, region: Optional[str] = None):
        self.region = region

    def new_client(self) -> Any:
        session = create_session(self.region)
        client = new_cloudwatch_client(session)
        logger.debug(f"CloudWatch 客户端初始化成功，区域: {session.region_name}")
        return client

    def fetch_cpu_utilization(self, instance_id: str, client: Any) -> Dict[str, Any]:
        return fetch_cpu_utilization(instance_id, client)
