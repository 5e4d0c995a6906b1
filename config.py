"""Configuration for the Kubernetes container metrics translator"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Environment based settings for logging, pod dimensions and OTLP output"""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file, console only when unset")
    environment: Literal["production", "development"] = Field(
        default="production", description="JSON logs in production, console logs in development"
    )

    # OTLP instrumentation scope
    service_name: str = Field(default="k8s-container-metrics", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")

    # Pod dimensions
    cluster_name: Optional[str] = Field(default=None, description="Cluster name added to pod dimensions")
    include_pod_labels: bool = Field(default=True, description="Copy pod labels into pod dimensions")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('environment', mode='before')
    @classmethod
    def normalize_environment(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('cluster_name')
    @classmethod
    def blank_cluster_name(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def get_otlp_scope(self) -> dict:
        """Instrumentation scope name and version for OTLP output"""
        return {
            "name": self.service_name,
            "version": self.service_version,
        }
