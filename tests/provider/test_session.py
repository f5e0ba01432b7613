"""
tests/provider/test_session.py - AWS 会话创建测试
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ProfileNotFound

from terrahealth.exceptions import SessionError
from terrahealth.provider.session import create_session


class TestCreateSession:
    """create_session 测试"""

    def test_explicit_region(self):
        session = create_session("eu-west-1")

        assert session.region_name == "eu-west-1"

    def test_region_from_default_chain(self):
        session = create_session()

        assert session.region_name == "us-west-2"

    def test_region_from_shared_config(self, monkeypatch, tmp_path):
        config = tmp_path / "config"
        config.write_text("[default]\nregion = ap-northeast-1\n")
        monkeypatch.setenv("AWS_CONFIG_FILE", str(config))
        monkeypatch.delenv("AWS_DEFAULT_REGION")

        session = create_session()

        assert session.region_name == "ap-northeast-1"

    def test_missing_region(self, monkeypatch):
        monkeypatch.delenv("AWS_DEFAULT_REGION")

        with pytest.raises(SessionError) as exc_info:
            create_session()

        assert str(exc_info.value) == "could not determine AWS region"

    def test_missing_credentials(self):
        mock_session = MagicMock()
        mock_session.region_name = "us-west-2"
        mock_session.get_credentials.return_value = None

        with patch("terrahealth.provider.session.boto3.Session", return_value=mock_session):
            with pytest.raises(SessionError) as exc_info:
                create_session()

        assert str(exc_info.value) == "no AWS credentials found"

    def test_unknown_profile(self, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "does-not-exist")

        with pytest.raises(SessionError) as exc_info:
            create_session()

        assert isinstance(exc_info.value.cause, ProfileNotFound)
        assert "does-not-exist" in str(exc_info.value)
