from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
import logging
import os

import uvicorn

from config_loader import load_client_config
from metrics_exporter import MetricsStore, generate_prometheus_metrics
from models import ClientConfig
from zone_resolver import (
    get_service_urls_from_config,
    region_is_mapped,
    resolve_availability_zones,
    resolve_service_urls,
    zone_has_service_urls,
)

logger = logging.getLogger(__name__)


def create_app(config: ClientConfig, metrics_store: Optional[MetricsStore] = None) -> FastAPI:
    if config is None:
        raise ValueError("config darf nicht None sein")
    if metrics_store is None:
        metrics_store = MetricsStore()

    app = FastAPI()
    app.state.config = config
    app.state.metrics_store = metrics_store

    @app.get("/config")
    def show_config():
        return config.model_dump(mode="json")

    @app.get("/zones/{region}")
    def availability_zones(region: str):
        fallback = not region_is_mapped(config, region)
        metrics_store.record_lookup("availability_zones", fallback)
        return {
            "region": region,
            "zones": resolve_availability_zones(config, region),
            "fallback": fallback
        }

    @app.get("/service-urls/{zone}")
    def service_urls(zone: str):
        fallback = not zone_has_service_urls(config, zone)
        metrics_store.record_lookup("service_urls", fallback)
        return {
            "zone": zone,
            "serviceUrls": resolve_service_urls(config, zone),
            "fallback": fallback
        }

    @app.get("/service-urls")
    def ordered_service_urls(instanceZone: Optional[str] = None, preferSameZone: Optional[bool] = None):
        if preferSameZone is None:
            preferSameZone = config.should_prefer_same_zone_eureka()
        try:
            urls = get_service_urls_from_config(config, instanceZone, preferSameZone)
        except ValueError as e:
            logger.error(f"Keine Service-URLs für Zone {instanceZone}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "region": config.get_region(),
            "instanceZone": instanceZone,
            "preferSameZone": preferSameZone,
            "serviceUrls": urls
        }

    @app.get("/metrics", response_class=PlainTextResponse)
    def metrics():
        return PlainTextResponse(
            generate_prometheus_metrics(metrics_store),
            media_type="text/plain; version=0.0.4; charset=utf-8"
        )

    return app


app = create_app(load_client_config())

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    uvicorn.run(app, host=os.getenv("WEBSERVER_HOST", "0.0.0.0"), port=int(os.getenv("WEBSERVER_PORT", "8000")))
