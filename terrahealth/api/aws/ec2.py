# -*- coding: utf-8 -*-
"""
EC2 API 客户端模块

功能：
- 封装 EC2 客户端创建
- 调用 DescribeInstances 并打印实例 ID
"""

import logging
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from terrahealth.exceptions import ServiceError
from terrahealth.provider.interfaces import EC2Service
from terrahealth.provider.session import create_session

logger = logging.getLogger(__name__)


def check_instances(client: Any) -> None:
    """
    列出所有 EC2 实例并逐行打印实例 ID

    只发起一次不带过滤条件的 DescribeInstances 请求，不处理分页。
    按 Reservation → Instance 的返回顺序输出，不排序、不去重。

    Args:
        client: EC2 客户端

    Raises:
        ServiceError: DescribeInstances 调用失败
    """
    try:
        response = client.describe_instances()
    except (ClientError, BotoCoreError) as e:
        logger.debug(f"DescribeInstances 失败: {e}", exc_info=True)
        raise ServiceError("Error describing EC2 instances", cause=e) from e

    count = 0
    for reservation in response.get('Reservations', []):
        for instance in reservation.get('Instances', []):
            print(f"Instance ID: {instance['InstanceId']}")
            count += 1

    logger.debug(f"获取到 {count} 个实例")


class EC2Handler(EC2Service):
    """
    EC2 服务实现

    功能：
    - 使用 boto3 默认凭证链创建 EC2 客户端
    - 列出实例 ID
    """

    def __init__(self, region: Optional[str] = None):
        """
        初始化 EC2Handler

        Args:
            region: AWS 区域（可选，为 None 时由 boto3 默认链解析）
        """
        self.region = region

    def new_session(self) -> Any:
        session = create_session(self.region)
        client = session.client('ec2')
        logger.debug(f"EC2 客户端初始化成功，区域: {session.region_name}")
        return client

    def check_instances(self, client: Any) -> None:
        check_instances(client)
