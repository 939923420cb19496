from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "analysis_client"
    db_username: str = "analysis_client"
    db_password: str = "secret"

    cache_backend: str = "postgres"
    cache_connect_timeout_seconds: float = 5.0
    document_slot_name: str = "markdown"

    default_locale: str = "zh-CN"

    max_file_size_mb: int = 10
    accepted_file_types: list[str] = ["text/plain"]
    accepted_file_extensions: list[str] = [".txt"]

    options_debounce_seconds: float = 2.0
    render_yield_seconds: float = 0.0
    abort_marker: str = "Analysis aborted"
    outline_active_threshold_px: float = 100.0

    static_base_url: str = "http://localhost:8000"
    static_timeout_seconds: int = 10

    engine: str = "example"

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024
