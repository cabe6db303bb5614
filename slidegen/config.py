"""
Slide Generation Configuration Management

Centralized configuration for the slide generation core. Values are
resolved with the following precedence:
1. Environment variables (highest priority)
2. Config file values (`slidegen:` section of .slidedeck/config.yaml)
3. Default values (lowest priority)

Configuration problems are reported through an explicit validation step
(`SlideGenConfig.validate()`) instead of warnings at import time. The
presentation assembler checks the returned status before making any
network call.

Usage:
    >>> from slidegen.config import SlideGenConfig
    >>>
    >>> config = SlideGenConfig.load_from_yaml('.slidedeck/config.yaml')
    >>> status = config.validate()
    >>> if not status.ok:
    >>>     print(status.errors)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from slidegen.errors import ConfigurationError

DEFAULT_CONFIG_PATH = ".slidedeck/config.yaml"

DEFAULT_GENERATION_URL = "https://magicslides-tools-api.onrender.com/api/v2/create_ppt_from_summary"
DEFAULT_ACCOUNT_INFO_URL = "https://www.magicslides.app/api/fetch-account-info-using-accountid"
DEFAULT_TRANSCRIPT_URL = "https://youtube-transcripts-main.onrender.com/get-youtube-transcript"
DEFAULT_INFERENCE_URL = (
    "https://video-and-audio-description-qh4z.onrender.com/api/v1/fetch-slide-generation-data"
)
DEFAULT_PRICING_URL = "https://www.magicslides.app/pricing"

DEFAULT_ALLOWED_PLANS = ("essential", "paid", "premium")


@dataclass
class ConfigStatus:
    """Result of validating a configuration.

    Attributes:
        errors: Problems that make every generation call impossible
        warnings: Problems that only affect some calls
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class SlideGenConfig:
    """Configuration for the slide generation pipeline.

    Attributes:
        generation_url: Presentation generation endpoint
        account_info_url: Account/entitlement lookup endpoint
        transcript_url: YouTube transcript endpoint
        inference_url: Parameter-inference endpoint
        pricing_url: Upgrade link shown when a plan is not allowed
        account_id: Fallback caller identity when a call does not supply one
        default_template: Template used when neither hints nor inference pick one
        allowed_plans: Plans permitted to generate presentations
        service_timeout: Timeout in seconds for transcript, account and inference calls
        generation_timeout: Timeout in seconds for the final generation call
    """
    generation_url: str = DEFAULT_GENERATION_URL
    account_info_url: str = DEFAULT_ACCOUNT_INFO_URL
    transcript_url: str = DEFAULT_TRANSCRIPT_URL
    inference_url: str = DEFAULT_INFERENCE_URL
    pricing_url: str = DEFAULT_PRICING_URL
    account_id: Optional[str] = None
    default_template: str = "bullet-point1"
    allowed_plans: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_PLANS))
    service_timeout: float = 30.0
    generation_timeout: float = 60.0

    @classmethod
    def load_from_yaml(cls, config_path: Optional[str] = None) -> "SlideGenConfig":
        """Load configuration from a YAML file, falling back to env vars and defaults.

        Args:
            config_path: Path to config YAML (default: SLIDEGEN_CONFIG or .slidedeck/config.yaml)

        Returns:
            SlideGenConfig with every field resolved
        """
        section: Dict[str, Any] = {}
        path = config_path or os.environ.get("SLIDEGEN_CONFIG") or DEFAULT_CONFIG_PATH

        config_file = Path(path)
        if config_file.exists():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}")
            if not isinstance(data, dict):
                raise ConfigurationError(f"Config file {path} must contain a mapping")
            section = data.get("slidegen", {}) or {}
            if not isinstance(section, dict):
                raise ConfigurationError(f"'slidegen' section in {path} must be a mapping")

        return cls.load_from_dict(section)

    @classmethod
    def load_from_dict(cls, section: Dict[str, Any]) -> "SlideGenConfig":
        """Load configuration from a dictionary (the `slidegen:` YAML section)."""
        allowed_plans = cls._resolve_value(
            section.get("allowed_plans"), "SLIDEGEN_ALLOWED_PLANS", list(DEFAULT_ALLOWED_PLANS)
        )
        if isinstance(allowed_plans, str):
            allowed_plans = [p.strip() for p in allowed_plans.split(",") if p.strip()]

        return cls(
            generation_url=cls._resolve_value(
                section.get("generation_url"), "SLIDEGEN_GENERATION_URL", DEFAULT_GENERATION_URL
            ),
            account_info_url=cls._resolve_value(
                section.get("account_info_url"), "SLIDEGEN_ACCOUNT_INFO_URL", DEFAULT_ACCOUNT_INFO_URL
            ),
            transcript_url=cls._resolve_value(
                section.get("transcript_url"), "SLIDEGEN_TRANSCRIPT_URL", DEFAULT_TRANSCRIPT_URL
            ),
            inference_url=cls._resolve_value(
                section.get("inference_url"), "SLIDEGEN_INFERENCE_URL", DEFAULT_INFERENCE_URL
            ),
            pricing_url=cls._resolve_value(
                section.get("pricing_url"), "SLIDEGEN_PRICING_URL", DEFAULT_PRICING_URL
            ),
            account_id=cls._resolve_value(
                section.get("account_id"), "SLIDEGEN_ACCOUNT_ID", None
            ),
            default_template=cls._resolve_value(
                section.get("default_template"), "SLIDEGEN_DEFAULT_TEMPLATE", "bullet-point1"
            ),
            allowed_plans=[str(p).lower() for p in allowed_plans],
            service_timeout=cls._resolve_seconds(
                section.get("service_timeout"), "SLIDEGEN_SERVICE_TIMEOUT", 30.0
            ),
            generation_timeout=cls._resolve_seconds(
                section.get("generation_timeout"), "SLIDEGEN_GENERATION_TIMEOUT", 60.0
            ),
        )

    @classmethod
    def _resolve_seconds(cls, config_value: Any, env_var: str, default: float) -> float:
        """Resolve a timeout and convert it to seconds."""
        value = cls._resolve_value(config_value, env_var, default)
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{env_var} must be a number of seconds, got '{value}'")

    @staticmethod
    def _resolve_value(config_value: Any, env_var: str, default: Any) -> Any:
        """Resolve a value with precedence ENV > config > default.

        Empty environment variables are treated as unset.
        """
        env_value = os.getenv(env_var)
        if env_value:
            return env_value
        if config_value is not None:
            return config_value
        return default

    def validate(self) -> ConfigStatus:
        """Check the configuration without touching the network.

        Returns:
            ConfigStatus; `ok` is False when no generation call can succeed
        """
        status = ConfigStatus()

        for name in ("generation_url", "account_info_url", "inference_url", "transcript_url"):
            value = getattr(self, name)
            if not value:
                status.errors.append(f"{name} is not configured")
            elif not value.startswith(("http://", "https://")):
                status.errors.append(f"{name} must be an http(s) URL, got '{value}'")

        if not self.allowed_plans:
            status.errors.append("allowed_plans is empty; no account could generate presentations")

        if self.service_timeout <= 0 or self.generation_timeout <= 0:
            status.errors.append("timeouts must be positive")

        if not self.account_id:
            status.warnings.append(
                "SLIDEGEN_ACCOUNT_ID is not set; every create_ppt_from_text call must pass an account ID"
            )

        return status

    def resolve_account_id(self, account_id: Optional[str]) -> Optional[str]:
        """Return the caller-supplied account ID, or the configured fallback."""
        if account_id and account_id.strip():
            return account_id.strip()
        return self.account_id
