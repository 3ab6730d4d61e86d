# models.py
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from pydantic import Field, SecretStr, field_serializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from client_config import DEFAULT_REGION, DEFAULT_URL, DEFAULT_ZONE, EurekaClientConfig
from zone_resolver import resolve_availability_zones, resolve_service_urls

MINUTES = 60


class ClientConfig(BaseSettings, EurekaClientConfig):
    """
    Eigenschaften des Eureka-Clients (eureka.client.*).
    Wird einmal beim Laden erzeugt und danach nur noch gelesen.
    Bindet nur explizit übergebene Werte; Umgebungsvariablen liest config_loader.
    """
    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        validate_default=True,
        env_prefix="EUREKA_CLIENT_",
        case_sensitive=False,
    )

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings,
                                   dotenv_settings, file_secret_settings):
        return (init_settings,)

    enabled: bool = True

    registryFetchIntervalSeconds: int = 30
    instanceInfoReplicationIntervalSeconds: int = 30
    initialInstanceInfoReplicationIntervalSeconds: int = 40
    eurekaServiceUrlPollIntervalSeconds: int = 5 * MINUTES

    proxyPort: Optional[str] = None
    proxyHost: Optional[str] = None
    proxyUserName: Optional[str] = None
    proxyPassword: Optional[SecretStr] = None

    eurekaServerReadTimeoutSeconds: int = 8
    eurekaServerConnectTimeoutSeconds: int = 5
    backupRegistryImpl: Optional[str] = None
    eurekaServerTotalConnections: int = 200
    eurekaServerTotalConnectionsPerHost: int = 50

    # Nur relevant, wenn die Server-Liste per DNS ermittelt wird
    eurekaServerURLContext: Optional[str] = None
    eurekaServerPort: Optional[str] = None
    eurekaServerDNSName: Optional[str] = None

    region: str = DEFAULT_REGION
    eurekaConnectionIdleTimeoutSeconds: int = 30
    registryRefreshSingleVipAddress: Optional[str] = None

    heartbeatExecutorThreadPoolSize: int = 2
    heartbeatExecutorExponentialBackOffBound: int = 10
    cacheRefreshExecutorThreadPoolSize: int = 2
    cacheRefreshExecutorExponentialBackOffBound: int = 10

    # Zone -> kommaseparierte URLs
    serviceUrl: Mapping[str, str] = Field(default_factory=dict)

    gZipContent: bool = True
    useDnsForFetchingServiceUrls: bool = False
    registerWithEureka: bool = True
    preferSameZoneEureka: bool = True
    logDeltaDiff: bool = False
    disableDelta: bool = False
    fetchRemoteRegionsRegistry: Optional[str] = None

    # Region -> kommaseparierte Zonen
    availabilityZones: Mapping[str, str] = Field(default_factory=dict)

    filterOnlyUpInstances: bool = True
    fetchRegistry: bool = True
    dollarReplacement: str = "_-"
    escapeCharReplacement: str = "__"

    @field_validator("serviceUrl", mode="before")
    @classmethod
    def seed_default_zone(cls, value):
        # Default-Zone bleibt immer vorhanden, eigene Einträge überschreiben sie
        if value is None:
            value = {}
        if not isinstance(value, Mapping):
            return value
        return {DEFAULT_ZONE: DEFAULT_URL, **value}

    @field_validator("serviceUrl", "availabilityZones", mode="after")
    @classmethod
    def freeze_map(cls, value):
        return MappingProxyType(dict(value))

    @field_serializer("serviceUrl", "availabilityZones")
    def dump_map(self, value):
        return dict(value)

    def get_service_url_map(self) -> Dict[str, str]:
        return dict(self.serviceUrl)

    def get_availability_zone_map(self) -> Dict[str, str]:
        return dict(self.availabilityZones)

    def get_region(self) -> str:
        return self.region

    def get_availability_zones(self, region: str) -> List[str]:
        return resolve_availability_zones(self, region)

    def get_eureka_server_service_urls(self, my_zone: str) -> List[str]:
        return resolve_service_urls(self, my_zone)

    def should_gzip_content(self) -> bool:
        return self.gZipContent

    def should_use_dns_for_fetching_service_urls(self) -> bool:
        return self.useDnsForFetchingServiceUrls

    def should_register_with_eureka(self) -> bool:
        return self.registerWithEureka

    def should_prefer_same_zone_eureka(self) -> bool:
        return self.preferSameZoneEureka

    def should_log_delta_diff(self) -> bool:
        return self.logDeltaDiff

    def should_disable_delta(self) -> bool:
        return self.disableDelta

    def fetch_registry_for_remote_regions(self) -> Optional[str]:
        return self.fetchRemoteRegionsRegistry

    def should_filter_only_up_instances(self) -> bool:
        return self.filterOnlyUpInstances

    def should_fetch_registry(self) -> bool:
        return self.fetchRegistry
