# client.py
import argparse
import json
import logging
import sys

from config_loader import ConfigError, load_client_config
from zone_resolver import get_service_urls_from_config

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Eureka-Client-Konfiguration anzeigen und Zonen auflösen.")
    parser.add_argument("--config", default=None, help="Pfad zur JSON-Konfigurationsdatei")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Gesamte Konfiguration ausgeben")

    zones = commands.add_parser("zones", help="Availability Zones einer Region")
    zones.add_argument("region", nargs="?", default=None)

    urls = commands.add_parser("urls", help="Service-URLs einer Zone")
    urls.add_argument("zone")

    ordered = commands.add_parser("ordered", help="Geordnete Service-URLs für die eigene Zone")
    ordered.add_argument("instance_zone", nargs="?", default=None)
    ordered.add_argument("--no-prefer-same-zone", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_client_config(args.config)
    except ConfigError as e:
        print(f"Fehler: {e}")
        return 1

    if args.command == "show":
        print(json.dumps(config.model_dump(mode="json"), indent=2))
    elif args.command == "zones":
        region = args.region or config.get_region()
        for zone in config.get_availability_zones(region):
            print(zone)
    elif args.command == "urls":
        for url in config.get_eureka_server_service_urls(args.zone):
            print(url)
    elif args.command == "ordered":
        prefer_same_zone = config.should_prefer_same_zone_eureka() and not args.no_prefer_same_zone
        try:
            urls = get_service_urls_from_config(config, args.instance_zone, prefer_same_zone)
        except ValueError as e:
            print(f"Fehler: {e}")
            return 1
        for url in urls:
            print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
