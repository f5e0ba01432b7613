# -*- coding: utf-8 -*-
"""
AWS 会话创建模块

功能：
- 使用 boto3 默认凭证链创建会话
- 校验区域和凭证是否可解析
"""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError

from terrahealth.exceptions import SessionError

logger = logging.getLogger(__name__)


def create_session(region: Optional[str] = None) -> boto3.Session:
    """
    创建 AWS 会话

    区域解析顺序：region 参数 → boto3 默认链（AWS_REGION / AWS_DEFAULT_REGION / ~/.aws/config）

    Args:
        region: AWS 区域（可选）

    Returns:
        boto3.Session 对象

    Raises:
        SessionError: 无法确定区域、找不到凭证或 botocore 配置错误
    """
    try:
        session = boto3.Session(region_name=region)
        region_name = session.region_name
        credentials = session.get_credentials()
    except BotoCoreError as e:
        logger.debug(f"创建 AWS 会话失败: {e}", exc_info=True)
        raise SessionError("invalid AWS configuration", cause=e) from e

    if not region_name:
        raise SessionError("could not determine AWS region")
    if credentials is None:
        raise SessionError("no AWS credentials found")

    logger.debug(f"AWS 会话创建成功，区域: {region_name}")
    return session
