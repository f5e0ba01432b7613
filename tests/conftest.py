"""
tests/conftest.py - pytest 公共 fixture

AWS 环境隔离和服务替身。

Usage:
    def test_something(mock_ec2_service, mock_cloudwatch_service):
        app = App(mock_ec2_service, mock_cloudwatch_service)
"""

from unittest.mock import MagicMock

import pytest

from terrahealth.provider.interfaces import CloudWatchService, EC2Service

TEST_REGION = "us-west-2"
TEST_INSTANCE_ID = "i-1234567890abcdef0"


# =============================================================================
# 环境设置
# =============================================================================


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch, tmp_path):
    """测试用 AWS 环境变量，隔离本机 ~/.aws 配置"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    for name in ("AWS_REGION", "AWS_PROFILE", "AWS_DEFAULT_PROFILE", "TERRAHEALTH_REGION", "TERRAHEALTH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# 服务替身
# =============================================================================


@pytest.fixture
def mock_ec2_service():
    """EC2Service 替身"""
    service = MagicMock(spec=EC2Service)
    service.new_session.return_value = MagicMock(name="ec2_client")
    return service


@pytest.fixture
def mock_cloudwatch_service():
    """CloudWatchService 替身"""
    service = MagicMock(spec=CloudWatchService)
    service.new_client.return_value = MagicMock(name="cloudwatch_client")
    service.fetch_cpu_utilization.return_value = {"MetricDataResults": []}
    return service


@pytest.fixture
def mock_ec2_client():
    """EC2 客户端替身（单个实例）"""
    client = MagicMock()
    client.describe_instances.return_value = {
        "Reservations": [
            {
                "Instances": [
                    {"InstanceId": TEST_INSTANCE_ID},
                ]
            }
        ]
    }
    return client
