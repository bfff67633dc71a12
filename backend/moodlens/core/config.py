"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "moodlens"
    debug: bool = False

    # Calendar day bucketing for record timestamps (IANA zone name)
    display_timezone: str = "UTC"

    # Week history
    history_weeks: int = 8
    history_page_size: int = 4

    # Line chart canvas (pixels)
    chart_width: float = 320.0
    chart_height: float = 180.0
    chart_axis_width: float = 32.0
    chart_top_margin: float = 12.0

    # Pie chart
    pie_radius: float = 80.0


settings = Settings()
