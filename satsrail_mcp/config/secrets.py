import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

API_KEY_ENV = "SATSRAIL_API_KEY"


@dataclass(frozen=True)
class Secrets:
    satsrail_api_key: str = field(default="", repr=False)

    def has_api_key(self) -> bool:
        return bool(self.satsrail_api_key)


def load_secrets(env_path: Path = Path(".env")) -> Secrets:
    """Load secrets from environment variables and .env file."""
    load_dotenv(env_path)

    return Secrets(
        satsrail_api_key=os.environ.get(API_KEY_ENV, "").strip(),
    )
