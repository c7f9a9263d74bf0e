import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator


class PathsConfig(BaseModel):
    base_dir: str = Field(default=".")
    log_dir: str = Field(default="logs")

class LoggingConfig(BaseModel):
    level: str = Field(default_factory=lambda: os.getenv("VIDEO_LAB_LOG_LEVEL", "INFO"))
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="10 days")
    file_stem: str = Field(default="video_lab", min_length=1)

class GenerationConfig(BaseModel):
    short_max_minutes: float = Field(default=5.0, gt=0)
    medium_split_minutes: float = Field(default=10.0, gt=0)
    long_min_minutes: float = Field(default=15.0, gt=0)
    short_section_count: int = Field(default=3, ge=1)
    medium_section_count: int = Field(default=4, ge=1)
    medium_long_section_count: int = Field(default=5, ge=1)
    long_section_count: int = Field(default=6, ge=1)
    long_extra_every_minutes: float = Field(default=10.0, gt=0)
    max_section_count: int = Field(default=8, ge=1)
    default_section_count: int = Field(default=4, ge=1)
    default_runtime_minutes: float = Field(default=8.0, gt=0)
    max_runtime_minutes: float = Field(default=180.0, gt=0)
    min_chapter_seconds: int = Field(default=10, ge=1)
    end_screen_seconds: int = Field(default=20, ge=1)

    @model_validator(mode="after")
    def _check_bands(self) -> "GenerationConfig":
        if not self.short_max_minutes <= self.medium_split_minutes <= self.long_min_minutes:
            raise ValueError("Runtime bands must satisfy short_max <= medium_split <= long_min")
        counts = [
            self.short_section_count,
            self.medium_section_count,
            self.medium_long_section_count,
            self.long_section_count,
        ]
        if counts != sorted(counts):
            raise ValueError("Section counts must not decrease as the runtime band grows")
        if self.max_section_count < self.long_section_count:
            raise ValueError("max_section_count must be >= long_section_count")
        if not 1 <= self.default_section_count <= self.max_section_count:
            raise ValueError("default_section_count must be between 1 and max_section_count")
        return self

class ServerConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

class AppConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

class ConfigManager:
    """
    Manages loading and validation of application configuration.
    """
    def __init__(self, config_path: str = "config/settings.yaml", config: Optional[AppConfig] = None):
        self.config_path = Path(config_path)
        self.config: AppConfig = config if config is not None else self._load_config()

    def _load_config(self) -> AppConfig:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found at {self.config_path}")

        with open(self.config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        return AppConfig(**raw_config)

    @property
    def paths(self) -> PathsConfig:
        return self.config.paths

    @property
    def logging(self) -> LoggingConfig:
        return self.config.logging

    @property
    def generation(self) -> GenerationConfig:
        return self.config.generation

    @property
    def server(self) -> ServerConfig:
        return self.config.server
