# -*- coding: utf-8 -*-
"""
TerraHealth 异常定义模块

功能：
- 定义命令分发和 AWS 调用过程中使用的异常
- 统一错误消息格式（message: cause）

异常层级：
    TerraHealthError
    ├── UsageError            参数缺失或格式错误
    ├── UnknownCommandError   未知命令
    ├── SessionError          凭证 / 区域解析失败
    └── ServiceError          AWS 服务拒绝或未响应请求
"""

from typing import Optional


class TerraHealthError(Exception):
    """
    TerraHealth 基础异常

    Attributes:
        message: 错误消息
        cause: 原始异常（可选）
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class UsageError(TerraHealthError):
    """命令行参数缺失或格式错误"""


class UnknownCommandError(TerraHealthError):
    """未注册的命令"""

    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command}")
        self.command = command


class SessionError(TerraHealthError):
    """创建 AWS 会话失败（无凭证或无法确定区域）"""


class ServiceError(TerraHealthError):
    """AWS 服务调用失败"""
