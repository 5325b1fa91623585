import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "PROMPTDECK_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    strict: bool = False
    runs_dir: str = "runs"
    log_level: LogLevel = "WARNING"
    log_json: bool = False


def load_settings(env: dict[str, str] | None = None, *, dotenv: bool = True) -> Settings:
    """Build settings from ``PROMPTDECK_*`` environment variables.

    A ``.env`` file in the working directory is loaded first unless
    ``dotenv`` is false. Pass ``env`` to read from a mapping instead of
    ``os.environ``.
    """
    if dotenv:
        load_dotenv()
    source = os.environ if env is None else env

    data: dict[str, str] = {}
    for field in Settings.model_fields:
        value = source.get(f"{ENV_PREFIX}{field.upper()}")
        if value is not None and value != "":
            data[field] = value.upper() if field == "log_level" else value
    return Settings.model_validate(data)
