"""Tests for configuration module"""
import os
from pathlib import Path
from unittest.mock import patch
import pytest
from pydantic import ValidationError

from config import Config


class TestConfig:
    """Test configuration validation and parsing"""

    def test_default_config(self):
        """Test default configuration values"""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.environment == "production"
        assert config.service_name == "k8s-container-metrics"
        assert config.service_version == "1.0.0"
        assert config.cluster_name is None
        assert config.include_pod_labels is True
        assert config.is_development is False

    def test_environment_override(self):
        """Test configuration override from environment variables"""
        env_vars = {
            "LOG_LEVEL": "debug",
            "LOG_FILE": "/tmp/k8s-container-metrics/app.log",
            "ENVIRONMENT": "Development",
            "SERVICE_NAME": "cluster-receiver",
            "SERVICE_VERSION": "2.3.4",
            "CLUSTER_NAME": "prod-eu",
            "INCLUDE_POD_LABELS": "false",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = Config()

        assert config.log_level == "DEBUG"
        assert config.log_file == Path("/tmp/k8s-container-metrics/app.log")
        assert config.environment == "development"
        assert config.is_development is True
        assert config.service_name == "cluster-receiver"
        assert config.service_version == "2.3.4"
        assert config.cluster_name == "prod-eu"
        assert config.include_pod_labels is False

    def test_validation_log_level(self):
        """Test that unknown log levels are rejected"""
        with patch.dict(os.environ, {"LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError):
                Config()

    def test_validation_environment(self):
        """Test that unknown environments are rejected"""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Config()

    def test_blank_cluster_name(self):
        """Test that a blank cluster name is treated as unset"""
        with patch.dict(os.environ, {"CLUSTER_NAME": "  "}, clear=True):
            config = Config()

        assert config.cluster_name is None

    def test_otlp_scope(self):
        """Test OTLP instrumentation scope"""
        config = Config(service_name="receiver", service_version="0.1.0")

        assert config.get_otlp_scope() == {"name": "receiver", "version": "0.1.0"}
