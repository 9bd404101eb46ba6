from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://app.satsrail.com"


@dataclass(frozen=True)
class ServerConfig:
    name: str = "satsrail"
    version: str = "1.0.0"


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_BASE_URL


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    file: str | None = None  # stderr only unless set
    max_bytes: int = 5_242_880
    backup_count: int = 3


@dataclass(frozen=True)
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
