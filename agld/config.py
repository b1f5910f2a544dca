import logging
import os
import re
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")

# Pre-AGLD_ environment names, still honoured
LEGACY_RPC_URL_ENV = "SEPOLIA_RPC_URL"
LEGACY_CONTRACT_ADDRESS_ENV = "ARTIINA_NFT_ADDRESS"


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by AGLD_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("AGLD_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "Artiina Gold Authentication API"
    version: str = "1.0.0"
    description: str = "Resolves BeadIds into on-chain authenticity records"
    documentation_url: str = "https://docs.artiina.com"


class LedgerConfig(BaseModel):
    """Blockchain node and contract configuration.

    Both ``rpc_url`` and ``contract_address`` are optional at startup. The
    service stays reachable without them and answers bead lookups with an
    "unconfigured" error until both are provided.
    """

    rpc_url: str = ""
    contract_address: str | None = None
    network: str = "sepolia"  # Reported in responses, never used for routing
    timeout: float = 10.0  # Seconds per eth_call
    block: str = "latest"  # Block tag passed to eth_call

    @field_validator("contract_address", mode="before")
    @classmethod
    def validate_contract_address(cls, value: Any) -> Any:
        if value is None:
            return None
        value = str(value).strip()
        if not value:
            return None
        if not _ADDRESS_PATTERN.match(value):
            raise ValueError(f"Invalid contract address: {value!r}")
        return value

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Ledger timeout must be positive")
        return value

    @property
    def is_configured(self) -> bool:
        """True when both the RPC endpoint and the contract address are set."""
        return bool(self.rpc_url) and self.contract_address is not None


class CorsConfig(BaseModel):
    """CORS configuration (nested in Config, uses env_nested_delimiter)."""

    allow_origins: list[str] = ["*"]


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from AGLD_LOG_FILE env var."""
        return os.environ.get("AGLD_LOG_FILE")


class Config(BaseSettings):
    server: Server = Server()
    ledger: LedgerConfig = LedgerConfig()
    cors: CorsConfig = CorsConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "AGLD_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows AGLD_LEDGER__RPC_URL override
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def apply_legacy_env(self) -> Self:
        """Fill ledger settings from the legacy env names.

        Only applies when the AGLD_-prefixed settings left the field empty, so
        existing SEPOLIA_RPC_URL / ARTIINA_NFT_ADDRESS deployments keep working.
        """
        rpc_url = self.ledger.rpc_url or os.environ.get(LEGACY_RPC_URL_ENV, "")
        contract_address = self.ledger.contract_address or os.environ.get(
            LEGACY_CONTRACT_ADDRESS_ENV
        )
        if rpc_url != self.ledger.rpc_url or contract_address != self.ledger.contract_address:
            self.ledger = LedgerConfig(
                rpc_url=rpc_url,
                contract_address=contract_address,
                network=self.ledger.network,
                timeout=self.ledger.timeout,
                block=self.ledger.block,
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - AGLD_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup, before other modules
    are imported to ensure all loggers pick up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
