# client_config.py
from abc import ABC, abstractmethod
from typing import List, Optional

DEFAULT_PREFIX = "/eureka"
DEFAULT_URL = "http://localhost:8761" + DEFAULT_PREFIX + "/"
DEFAULT_ZONE = "defaultZone"
DEFAULT_REGION = "us-east-1"


class EurekaClientConfig(ABC):
    """
    Lese-Schnittstelle, auf die sich ein Discovery-Client verlässt.
    Die Implementierung (siehe models.ClientConfig) bestimmt, woher die Werte kommen.
    """

    @abstractmethod
    def get_region(self) -> str: ...

    @abstractmethod
    def get_availability_zones(self, region: str) -> List[str]:
        """Geordnete Liste der Zonen einer Region."""

    @abstractmethod
    def get_eureka_server_service_urls(self, my_zone: str) -> List[str]:
        """Geordnete Liste der Eureka-Server-URLs für die eigene Zone."""

    @abstractmethod
    def should_gzip_content(self) -> bool: ...

    @abstractmethod
    def should_use_dns_for_fetching_service_urls(self) -> bool: ...

    @abstractmethod
    def should_register_with_eureka(self) -> bool: ...

    @abstractmethod
    def should_prefer_same_zone_eureka(self) -> bool: ...

    @abstractmethod
    def should_log_delta_diff(self) -> bool: ...

    @abstractmethod
    def should_disable_delta(self) -> bool: ...

    @abstractmethod
    def should_filter_only_up_instances(self) -> bool: ...

    @abstractmethod
    def should_fetch_registry(self) -> bool: ...

    @abstractmethod
    def fetch_registry_for_remote_regions(self) -> Optional[str]: ...
