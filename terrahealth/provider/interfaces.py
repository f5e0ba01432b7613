# -*- coding: utf-8 -*-
"""
AWS 服务接口定义

功能：
- 定义 EC2Service 和 CloudWatchService 接口
- 命令分发只依赖接口，不关心具体实现（真实客户端或测试替身）
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class EC2Service(ABC):
    """
    EC2 服务接口

    功能：
    - 创建 EC2 客户端
    - 列出实例 ID
    """

    @abstractmethod
    def new_session(self) -> Any:
        """
        创建 EC2 客户端

        Returns:
            EC2 客户端（boto3 client 或兼容对象）

        Raises:
            SessionError: 无法解析凭证或区域
        """
        pass

    @abstractmethod
    def check_instances(self, client: Any) -> None:
        """
        列出所有实例并逐行打印实例 ID

        Args:
            client: new_session() 返回的 EC2 客户端

        Raises:
            ServiceError: DescribeInstances 调用失败
        """
        pass


class CloudWatchService(ABC):
    """
    CloudWatch 服务接口

    功能：
    - 创建 CloudWatch 客户端
    - 获取实例 CPU 使用率指标
    """

    @abstractmethod
    def new_client(self) -> Any:
        """
        创建 CloudWatch 客户端

        Raises:
            SessionError: 无法解析凭证或区域
        """
        pass

    @abstractmethod
    def fetch_cpu_utilization(self, instance_id: str, client: Any) -> Dict[str, Any]:
        """
        获取实例最近 24 小时的 CPU 使用率

        Args:
            instance_id: EC2 实例 ID
            client: new_client() 返回的 CloudWatch 客户端

        Returns:
            GetMetricData 原始响应
        """
        pass
