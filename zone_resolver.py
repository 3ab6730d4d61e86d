# zone_resolver.py
import logging
from typing import List, Optional

from client_config import DEFAULT_REGION, DEFAULT_ZONE, EurekaClientConfig

logger = logging.getLogger(__name__)


def _require_key(value: Optional[str], name: str) -> str:
    if value is None:
        raise ValueError(f"{name} darf nicht None sein")
    return value


def split_values(value: str) -> List[str]:
    """
    Trennt eine kommaseparierte Liste exakt am Komma.
    Kein Trimmen, keine Deduplizierung. "" ergibt [""], leere Einträge am Ende entfallen.
    """
    if value == "":
        return [""]
    parts = value.split(",")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def region_is_mapped(config, region: str) -> bool:
    return config.availabilityZones.get(_require_key(region, "region")) is not None


def zone_has_service_urls(config, zone: str) -> bool:
    return bool(config.serviceUrl.get(_require_key(zone, "zone")))


def resolve_availability_zones(config, region: str) -> List[str]:
    """
    Liefert die Availability Zones einer Region.
    Unbekannte Regionen werden still auf den Schlüssel "defaultZone" abgebildet.
    """
    value = config.availabilityZones.get(_require_key(region, "region"))
    if value is None:
        logger.debug(f"Region '{region}' nicht konfiguriert, verwende '{DEFAULT_ZONE}'.")
        value = DEFAULT_ZONE
    return split_values(value)


def resolve_service_urls(config, zone: str) -> List[str]:
    """
    Liefert die Service-URLs einer Zone in Textreihenfolge.
    Fehlt die Zone oder ist ihr Wert leer, wird die Default-Zone verwendet.
    Gibt es auch dafür keinen Wert, ist das Ergebnis eine leere Liste.
    """
    service_urls = config.serviceUrl.get(_require_key(zone, "zone"))
    if not service_urls:
        logger.debug(f"Keine Service-URLs für Zone '{zone}', verwende '{DEFAULT_ZONE}'.")
        service_urls = config.serviceUrl.get(DEFAULT_ZONE)
    if service_urls is not None:
        return split_values(service_urls)
    return []


def _zone_offset(instance_zone: Optional[str], prefer_same_zone: bool, avail_zones: List[str]) -> int:
    for i, zone in enumerate(avail_zones):
        if instance_zone is not None and (zone.lower() == instance_zone.strip().lower()) == prefer_same_zone:
            return i
    logger.warning(
        f"Konnte keine Zone anhand der Präferenz wählen. Eigene Zone: {instance_zone}, "
        f"preferSameZone: {prefer_same_zone}. Verwende {avail_zones[0]}."
    )
    return 0


def get_service_urls_from_config(config: EurekaClientConfig, instance_zone: Optional[str],
                                 prefer_same_zone: bool) -> List[str]:
    """
    Baut die geordnete URL-Liste, die ein Client der Reihe nach probiert:
    zuerst die gewählte Zone, danach alle übrigen Zonen der Region im Kreis.
    Die Region wird getrimmt und kleingeschrieben nachgeschlagen; Schlüssel in
    availabilityZones mit Großbuchstaben (z.B. "US-EAST-1") werden hier also nicht gefunden
    und führen zur Default-Zone. get_availability_zones() selbst nutzt den Schlüssel unverändert.
    """
    region = (config.get_region() or DEFAULT_REGION).strip().lower()
    avail_zones = config.get_availability_zones(region)
    if not avail_zones:
        avail_zones = [DEFAULT_ZONE]

    my_zone_offset = _zone_offset(instance_zone, prefer_same_zone, avail_zones)
    ordered_urls = list(config.get_eureka_server_service_urls(avail_zones[my_zone_offset]))

    current_offset = (my_zone_offset + 1) % len(avail_zones)
    while current_offset != my_zone_offset:
        ordered_urls.extend(config.get_eureka_server_service_urls(avail_zones[current_offset]))
        current_offset = (current_offset + 1) % len(avail_zones)

    if not ordered_urls:
        raise ValueError("invalid serviceUrl specified")
    return ordered_urls
