from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()

ENV_PREFIX = "SENZING_TOOLS_"


@dataclass(frozen=True)
class Settings:
    input_url: str
    file_type: str
    log_level: str
    http_timeout_seconds: float


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def load_config_file(path: str) -> bool:
    # Values already present in the environment win over the file.
    return load_dotenv(path, override=False)


def get_settings() -> Settings:
    return Settings(
        input_url=_env("INPUT_URL", ""),
        file_type=_env("FILE_TYPE", "").upper(),
        log_level=_env("LOG_LEVEL", "INFO"),
        http_timeout_seconds=float(_env("HTTP_TIMEOUT_SECONDS", "30")),
    )
