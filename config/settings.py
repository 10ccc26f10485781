"""
RecruitTrack Configuration Settings
"""
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Paths (use RECRUIT_ prefix)
    data_path: Path = Field(
        default=Path("./data/recruittrack.json"),
        alias="RECRUIT_DATA_PATH",
        description="JSON file the address book is loaded from and saved to"
    )
    backup_path: str = Field(
        default="",
        alias="RECRUIT_BACKUP_PATH",
        description="Directory for rolling backups of the data file (empty disables backups)"
    )
    backup_count: int = Field(
        default=2,
        alias="RECRUIT_BACKUP_COUNT",
        description="Number of backups to keep"
    )

    # Duplicate detection rule (see recruit.services.person.IdentityPolicy)
    duplicate_policy: Literal["name", "name_ignore_case"] = Field(
        default="name",
        alias="RECRUIT_DUPLICATE_POLICY",
        description="How two records are judged to be the same person"
    )

    # Populate a first-run session with example contacts
    seed_sample_data: bool = Field(
        default=True,
        alias="RECRUIT_SEED_SAMPLE_DATA",
        description="Start with sample contacts when no data file exists"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="RECRUIT_LOG_LEVEL")
    log_file: str = Field(
        default="",
        alias="RECRUIT_LOG_FILE",
        description="Optional log file; logs always go to stderr"
    )

    @property
    def backups_enabled(self) -> bool:
        """Check if rolling backups are configured."""
        return bool(self.backup_path) and self.backup_count > 0


settings = Settings()
