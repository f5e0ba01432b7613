# -*- coding: utf-8 -*-
"""
TerraHealth CLI 主程序入口

功能：
- 解析命令行参数并分发到对应的 AWS 服务
- 列出 EC2 实例 ID（check-aws / getInstances）
- 查询实例 CPU 使用率（fetchCpuUtilization <instanceId>）

用法：
    terrahealth check-aws
    terrahealth getInstances
    terrahealth fetchCpuUtilization i-1234567890abcdef0
"""

import logging
import sys
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from terrahealth.api.aws.ec2 import EC2Handler
from terrahealth.cloudwatch.client import CloudWatchHandler
from terrahealth.config.loader import load_settings
from terrahealth.exceptions import (
    ServiceError,
    SessionError,
    TerraHealthError,
    UnknownCommandError,
    UsageError,
)
from terrahealth.provider.interfaces import CloudWatchService, EC2Service

logger = logging.getLogger(__name__)

USAGE = "Usage: terrahealth <command>"
FETCH_CPU_USAGE = "Usage: terrahealth fetchCpuUtilization <instanceId>"

LIST_INSTANCES_COMMANDS = ('check-aws', 'getInstances')
FETCH_CPU_COMMAND = 'fetchCpuUtilization'


class App:
    """
    命令分发器

    功能：
    - 持有注入的 EC2Service / CloudWatchService（真实实现或测试替身）
    - 根据 argv[1] 调用对应服务，错误统一向上抛出
    """

    def __init__(self, ec2_service: EC2Service, cloudwatch_service: CloudWatchService):
        self.ec2_service = ec2_service
        self.cloudwatch_service = cloudwatch_service

    def run(self, argv: List[str]) -> None:
        """
        执行一条命令

        Args:
            argv: 完整参数列表（argv[0] 为程序名）

        Raises:
            UsageError: 缺少命令或参数个数错误
            UnknownCommandError: 未知命令
            SessionError: 创建 AWS 会话失败
            ServiceError: AWS 服务调用失败
        """
        logger.info(f"TerraHealth {argv}")
        if len(argv) < 2:
            raise UsageError(USAGE)

        command = argv[1]
        if command in LIST_INSTANCES_COMMANDS:
            self._list_instances()
        elif command == FETCH_CPU_COMMAND:
            if len(argv) != 3:
                raise UsageError(FETCH_CPU_USAGE)
            self._fetch_cpu_utilization(argv[2])
        else:
            raise UnknownCommandError(command)

    def _list_instances(self) -> None:
        try:
            client = self.ec2_service.new_session()
        except (SessionError, BotoCoreError, ClientError) as e:
            raise SessionError("Error creating AWS session", cause=e) from e

        self.ec2_service.check_instances(client)

    def _fetch_cpu_utilization(self, instance_id: str) -> None:
        try:
            client = self.cloudwatch_service.new_client()
        except (SessionError, BotoCoreError, ClientError) as e:
            raise SessionError("Error creating AWS session", cause=e) from e

        try:
            output = self.cloudwatch_service.fetch_cpu_utilization(instance_id, client)
        except (ClientError, BotoCoreError) as e:
            raise ServiceError("Error fetching CPU utilization", cause=e) from e

        print(output)


def setup_logging(level: str) -> None:
    """配置日志（输出到 stderr，不与命令结果混在一起）"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # 减少 SDK 日志
    logging.getLogger('botocore').setLevel(logging.WARNING)
    logging.getLogger('boto3').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    """
    主函数

    Args:
        argv: 参数列表（默认 sys.argv）

    Returns:
        退出码：成功 0，失败 1
    """
    if argv is None:
        argv = sys.argv

    settings = load_settings()
    setup_logging(settings.log_level)

    app = App(
        ec2_service=EC2Handler(region=settings.region),
        cloudwatch_service=CloudWatchHandler(region=settings.region),
    )

    try:
        app.run(argv)
    except TerraHealthError as e:
        logger.debug(f"命令执行失败: {e}", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
