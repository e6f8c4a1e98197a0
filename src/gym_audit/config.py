from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
import json
import os

from gym_audit.constants import (
    DEFAULT_CONCURRENCY,
    DEFAULT_DATA_DIR,
    DEFAULT_DOCS_DIR,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_SITEMAP_URL,
    DEFAULT_USER_AGENT,
)

load_dotenv()  # Loads variables from .env file

FACILITIES_STRATEGIES = ("core", "open")


def env_log_level() -> str:
    """Log level named by LOG_LEVEL, INFO when unset."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class AuditConfig:
    """Configuration for one audit run."""
    sitemap_url: str = DEFAULT_SITEMAP_URL
    user_agent: str = DEFAULT_USER_AGENT
    concurrency: int = DEFAULT_CONCURRENCY
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    facilities_strategy: str = "core"  # 'core' or 'open'
    data_dir: str = DEFAULT_DATA_DIR
    docs_dir: str = DEFAULT_DOCS_DIR
    log_level: str = "INFO"

    def __post_init__(self):
        if self.facilities_strategy not in FACILITIES_STRATEGIES:
            raise ValueError(
                f"Unknown facilities strategy {self.facilities_strategy!r}; "
                f"expected one of {', '.join(FACILITIES_STRATEGIES)}"
            )
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")

    @classmethod
    def from_env(cls) -> "AuditConfig":
        """Load configuration from environment variables.

        Returns:
            AuditConfig: Configuration instance with values from environment
        """
        return cls(
            sitemap_url=os.getenv("GYM_AUDIT_SITEMAP_URL", DEFAULT_SITEMAP_URL),
            user_agent=os.getenv("GYM_AUDIT_USER_AGENT", DEFAULT_USER_AGENT),
            concurrency=int(os.getenv("GYM_AUDIT_CONCURRENCY", str(DEFAULT_CONCURRENCY))),
            timeout=float(os.getenv("GYM_AUDIT_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))),
            facilities_strategy=os.getenv("GYM_AUDIT_FACILITIES_STRATEGY", "core"),
            data_dir=os.getenv("GYM_AUDIT_DATA_DIR", DEFAULT_DATA_DIR),
            docs_dir=os.getenv("GYM_AUDIT_DOCS_DIR", DEFAULT_DOCS_DIR),
            log_level=env_log_level(),
        )


@dataclass
class AuditThresholds:
    """Configurable thresholds for the page heuristics."""

    # Imagery
    min_meaningful_images: int = 8
    min_modern_images: int = 1
    min_lazy_images: int = 3

    # Facilities (open-list strategy)
    min_facility_terms: int = 10
    facility_sample_size: int = 8

    # Join route
    top_cta_window: int = 30  # Controls before this index count as "early"

    # Club description
    min_description_length: int = 120
    min_appeal_hits: int = 2
    min_benefit_hits: int = 1

    # Relevance gate
    relevance_body_chars: int = 3000

    @classmethod
    def from_env(cls) -> "AuditThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with GYM_AUDIT_THRESHOLD_
        e.g., GYM_AUDIT_THRESHOLD_MIN_MEANINGFUL_IMAGES=10

        Returns:
            AuditThresholds with values from environment
        """
        thresholds = cls()
        prefix = "GYM_AUDIT_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_value = os.getenv(f"{prefix}{field_name.upper()}")

            if env_value is not None:
                try:
                    setattr(thresholds, field_name, int(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "AuditThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            AuditThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                setattr(thresholds, field_name, int(threshold_config[field_name]))

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary.

        Returns:
            Dictionary of all threshold values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }


# Global default thresholds instance
default_thresholds = AuditThresholds()


def load_thresholds(path: Optional[str] = None) -> AuditThresholds:
    """Thresholds from a JSON file when given, else from the environment.

    Raises:
        FileNotFoundError: If a path is given but no such file exists
    """
    if path:
        if not Path(path).is_file():
            raise FileNotFoundError(f"Thresholds file not found: {path}")
        return AuditThresholds.from_file(path)
    return AuditThresholds.from_env()
