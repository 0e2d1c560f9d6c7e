"""Application settings loaded from environment variables via pydantic-settings.

Values are read from (highest priority first):

  1. Environment variables, e.g. ``CGD_DATA=/srv/cgd``
  2. A ``.env`` file in the working directory
  3. The defaults below

Field names map to upper-cased env vars automatically (``cgd_data`` ->
``CGD_DATA``).
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.errors import ConfigurationError


class Settings(BaseSettings):
    """cgd settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Storage ===
    # Empty string = "use ~/cgd".  The directory must already exist.
    cgd_data: str = ""

    # === Batch resolution ===
    cgd_max_concurrency: int = 8
    cgd_request_timeout: float = 20.0  # seconds, per resolver call

    # === App Config ===
    app_env: str = "development"
    log_level: str = "WARNING"

    @property
    def data_dir(self) -> Path:
        """The configured data directory, whether or not it exists."""
        if self.cgd_data:
            return Path(self.cgd_data).expanduser()
        return Path.home() / "cgd"

    def resolve_data_dir(self) -> Path:
        """Return the data directory after checking that it is usable.

        Raises
        ------
        ConfigurationError
            If the path does not exist, is not a directory, or cannot be
            inspected.
        """
        path = self.data_dir
        try:
            if not path.exists():
                raise ConfigurationError(
                    f"Data directory does not exist: {path} "
                    "(set the CGD_DATA environment variable to choose one)"
                )
            if not path.is_dir():
                raise ConfigurationError(f"Data directory is not a directory: {path}")
        except OSError as exc:
            raise ConfigurationError(f"Cannot open data directory {path}: {exc}") from exc
        return path
