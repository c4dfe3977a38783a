# Apache Software License 2.0
#
# Copyright (c) ZenML GmbH 2025. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Runtime settings loaded from config files, with environment overrides."""

import os
from typing import Optional

from pydantic import BaseModel, Field

from src.utils.yaml_config import get_config, lookup

ENVIRONMENTS = ("development", "production")
CONFIG_PREFIX = "serve"


class AppSettings(BaseModel):
    """Settings shared by the CLI and the API."""

    name: str = "iris-species-predictor"
    version: str = "0.1.0"
    environment: str = "development"
    title: str = "Iris Species Predictor"
    description: str = ""
    delay_seconds: float = Field(1.0, ge=0)
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_settings(environment: Optional[str] = None) -> AppSettings:
    """Build AppSettings from YAML config and environment variables.

    Args:
        environment: Config environment (development or production). Falls back
            to the APP_ENVIRONMENT variable, then to the common defaults.

    Returns:
        The resolved settings.

    Raises:
        ValueError: If PREDICTION_DELAY_SECONDS is set but not a number.
    """
    environment = environment or os.environ.get("APP_ENVIRONMENT")
    if environment:
        cfg = get_config(CONFIG_PREFIX, environment)
    else:
        cfg = get_config()

    defaults = AppSettings()
    values = {
        "name": lookup(cfg, "app.name", defaults.name),
        "version": str(lookup(cfg, "app.version", defaults.version)),
        "environment": lookup(cfg, "app.environment", defaults.environment),
        "title": lookup(cfg, "app.title", defaults.title),
        "description": lookup(cfg, "app.description", defaults.description),
        "delay_seconds": lookup(cfg, "prediction.delay_seconds", defaults.delay_seconds),
        "host": lookup(cfg, "server.host", defaults.host),
        "port": lookup(cfg, "server.port", defaults.port),
        "log_level": lookup(cfg, "logging.level", defaults.log_level),
        "log_format": lookup(cfg, "logging.format", defaults.log_format),
    }

    delay_override = os.environ.get("PREDICTION_DELAY_SECONDS")
    if delay_override is not None:
        try:
            values["delay_seconds"] = float(delay_override)
        except ValueError:
            raise ValueError(
                f"PREDICTION_DELAY_SECONDS must be a number, got '{delay_override}'"
            )

    log_level = os.environ.get("LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.upper()

    return AppSettings(**values)
