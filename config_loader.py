# config_loader.py
"""
Lädt die Eureka-Client-Konfiguration.

Reihenfolge: JSON-Datei, darüber Umgebungsvariablen EUREKA_CLIENT_<FELD>
(Feldname ohne Groß-/Kleinschreibung, z.B. EUREKA_CLIENT_REGISTRYFETCHINTERVALSECONDS=15;
Maps als JSON, z.B. EUREKA_CLIENT_AVAILABILITYZONES='{"us-east-1": "us-east-1a"}').

EUREKA_SERVER_URL ist hier die Service-URL der Default-Zone
(z.B. http://localhost:8761/eureka/), nicht der .../eureka/apps/-Endpunkt.
"""
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError
from pydantic_settings import SettingsError

from client_config import DEFAULT_ZONE
from models import ClientConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "eureka_client.json"


class ConfigError(Exception):
    """Konfiguration konnte nicht geladen oder validiert werden."""


class EnvironmentClientConfig(ClientConfig):
    """ClientConfig, bei der Umgebungsvariablen Vorrang vor übergebenen Werten haben."""

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings,
                                   dotenv_settings, file_secret_settings):
        return (env_settings, init_settings)


def _unwrap(document: Dict[str, Any]) -> Dict[str, Any]:
    # Erlaubt sowohl {"eureka": {"client": {...}}} als auch die flache Form
    eureka = document.get("eureka")
    if isinstance(eureka, dict) and isinstance(eureka.get("client"), dict):
        return dict(eureka["client"])
    return dict(document)


def read_config_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        logger.warning(f"Konfigurationsdatei '{path}' nicht gefunden. Verwende Standardwerte.")
        return {}
    try:
        with open(path, "r") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Ungültiges JSON in der Konfigurationsdatei '{path}': {e}") from e
    if not isinstance(document, dict):
        raise ConfigError(f"Konfigurationsdatei '{path}' muss ein JSON-Objekt enthalten.")
    logger.info(f"Konfiguration aus '{path}' geladen.")
    return _unwrap(document)


def load_client_config(path: Optional[str] = None) -> ClientConfig:
    if path is None:
        path = os.getenv("EUREKA_CLIENT_CONFIG_FILE", CONFIG_FILE)

    values = read_config_file(path)

    server_url = os.getenv("EUREKA_SERVER_URL")
    if server_url:
        service_urls = dict(values.get("serviceUrl") or {})
        service_urls[DEFAULT_ZONE] = server_url
        values["serviceUrl"] = service_urls

    try:
        config = EnvironmentClientConfig(**values)
    except (ValidationError, SettingsError) as e:
        raise ConfigError(f"Ungültige Eureka-Client-Konfiguration: {e}") from e

    logger.info(f"Region: {config.region}, Zonen mit Service-URLs: {', '.join(config.serviceUrl)}")
    return config
