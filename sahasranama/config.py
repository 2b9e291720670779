"""Configuration loader for the Sahasranama text pipeline."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Concluding line of the stotra; rendered verbatim, never annotated.
DEFAULT_COLOPHON_PATTERN = r"एवं\s+श्रीललिता\s+देव्या\s+नाम्नां\s+साहस्रकं\s+जगुः"


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Lalita Sahasranama"
    version: str = "1.0.0"
    language: str = "sa"


class SourceMetadata(BaseModel):
    """Attribution for a known commentary source."""

    author: str
    period: str = "Unknown"
    source: str | None = None  # Title of the work; falls back to the section label


def _default_known_sources() -> dict[str, SourceMetadata]:
    return {
        "sanskritdocuments": SourceMetadata(author="Sanskrit Documents", period="Modern"),
        "bhaskararaya": SourceMetadata(
            author="Bhāskararāya",
            period="18th century",
            source="Saubhāgya-bhāskara",
        ),
        "bhaskaraya": SourceMetadata(
            author="Bhāskararāya",
            period="18th century",
            source="Saubhāgya-bhāskara",
        ),
        "vravi": SourceMetadata(
            author="V. Ravi",
            period="Modern",
            source="Contemporary Translation",
        ),
    }


class AnnotationConfig(BaseModel):
    """Verse annotation configuration."""

    colophon_pattern: str = DEFAULT_COLOPHON_PATTERN
    # Display name -> file stem under paths.commentaries_dir
    sources: dict[str, str] = Field(
        default_factory=lambda: {
            "Bhaskaraya": "bhaskaraya",
            "V. Ravi": "vravi",
            "Sanskrit Documents": "sanskritdocuments",
        }
    )


class ExtractionConfig(BaseModel):
    """Markdown corpus extraction configuration."""

    known_sources: dict[str, SourceMetadata] = Field(default_factory=_default_known_sources)
    placeholder_commentary: str = "[Needs commentary]"


class PathsConfig(BaseModel):
    """Input and output paths configuration."""

    verses_path: str = "./data/sanskrit.txt"
    commentaries_dir: str = "./data/commentaries"
    corpus_path: str = "./data/meanings.md"
    output_dir: str = "./data/processed"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    annotation: AnnotationConfig = Field(default_factory=AnnotationConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override log level from environment
    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
