"""
Configuration and settings management.
"""
import os


class Config:
    """Application configuration."""

    # Working list storage
    DB_PATH: str = os.getenv("VEHICLE_IMPORTER_DB", "./vehicle_importer.db")

    # Export
    EXPORT_DIR: str = os.getenv("VEHICLE_IMPORTER_EXPORT_DIR", ".")
    FILE_PREFIX: str = "whipair-import"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE_PATH: str = os.getenv("LOG_FILE_PATH", "vehicle_importer.log")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration before exporting."""
        if not os.path.isdir(cls.EXPORT_DIR):
            raise FileNotFoundError(f"Export directory not found: {cls.EXPORT_DIR}")

# Global config instance
config = Config()
