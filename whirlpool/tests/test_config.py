"""
설정 / 로깅 테스트
"""

import logging

import pytest

from ..config import Settings, settings
from ..constants import RPC_ENDPOINTS
from ..logging_config import setup_logger


class TestSettings:
    """Settings 테스트"""

    def test_rpc_url_for_cluster(self):
        assert settings.rpc_url_for_cluster("devnet") == RPC_ENDPOINTS["devnet"]

    def test_default_cluster_uses_rpc_url(self):
        assert settings.rpc_url_for_cluster() == Settings.RPC_URL

    def test_unknown_cluster(self):
        with pytest.raises(ValueError):
            settings.rpc_url_for_cluster("localnet-x")


class TestSetupLogger:
    """setup_logger 테스트"""

    def test_idempotent_handlers(self):
        logger = setup_logger("whirlpool.test_logger", level=logging.DEBUG)
        again = setup_logger("whirlpool.test_logger", level=logging.DEBUG)
        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
