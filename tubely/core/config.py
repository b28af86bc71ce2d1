"""
Configuration management for the Tubely thumbnail service.

This module handles all configuration settings including the HTTP server,
token verification, the video metadata database, and system parameters.
"""

import os
import json
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict, field
from pathlib import Path


JWT_SECRET_ENV_VAR = "TUBELY_JWT_SECRET"


@dataclass
class ServerConfig:
    """HTTP server configuration"""

    api_host: str = "0.0.0.0"  # Bind address
    api_port: int = 8091
    public_host: str = "localhost"  # Host written into derived thumbnail URLs
    enable_api: bool = True
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class AuthConfig:
    """Bearer token verification settings"""

    jwt_secret: str = ""
    jwt_issuer: str = "tubely-access"
    jwt_algorithm: str = "HS256"


@dataclass
class DatabaseConfig:
    """Video metadata database configuration"""

    path: str = "tubely.db"


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: Optional[str] = "tubely.log"
    timezone: str = "UTC"


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or "config.json"
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.server = ServerConfig()
        self.auth = AuthConfig()
        self.database = DatabaseConfig()
        self.system = SystemConfig()

        # Load configuration
        self.load_config()

        # Secret from the environment wins over the file, but is never saved
        self._apply_environment()

    def load_config(self) -> None:
        """Load configuration from file"""
        config_path = Path(self.config_file)

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    config_data = json.load(f)

                if "server" in config_data:
                    self.server = ServerConfig(**config_data["server"])

                if "auth" in config_data:
                    self.auth = AuthConfig(**config_data["auth"])

                if "database" in config_data:
                    self.database = DatabaseConfig(**config_data["database"])

                if "system" in config_data:
                    self.system = SystemConfig(**config_data["system"])

                self.logger.info(f"Configuration loaded from {config_path}")

            except Exception as e:
                self.logger.error(f"Error loading config from {config_path}: {e}")
        else:
            self.logger.info(f"Config file {config_path} not found, using defaults")
            self.save_config()  # Save default config

    def _apply_environment(self) -> None:
        secret = os.getenv(JWT_SECRET_ENV_VAR)
        if secret:
            self.auth.jwt_secret = secret
            self.logger.debug(f"JWT secret taken from {JWT_SECRET_ENV_VAR}")

    def save_config(self) -> None:
        """Save current configuration to file"""
        try:
            with open(self.config_file, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except Exception as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {"server": asdict(self.server), "auth": asdict(self.auth), "database": asdict(self.database), "system": asdict(self.system)}
