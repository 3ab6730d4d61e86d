# metrics_exporter.py
import threading
from typing import Any, Dict

LOOKUP_KINDS = ("availability_zones", "service_urls")


class MetricsStore:
    def __init__(self):
        self._lock = threading.Lock()
        self.lookups_total = {kind: 0 for kind in LOOKUP_KINDS}
        self.default_zone_fallbacks_total = {kind: 0 for kind in LOOKUP_KINDS}

    def record_lookup(self, kind: str, fallback: bool):
        if kind not in LOOKUP_KINDS:
            raise ValueError(f"Unbekannte Lookup-Art: {kind}")
        with self._lock:
            self.lookups_total[kind] += 1
            if fallback:
                self.default_zone_fallbacks_total[kind] += 1

    def get_metrics_data(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "lookups_total": self.lookups_total.copy(),
                "default_zone_fallbacks_total": self.default_zone_fallbacks_total.copy()
            }


def generate_prometheus_metrics(metrics_store_instance: MetricsStore) -> str:
    """
    Generiert die Metriken im Prometheus-Textformat.
    """
    if metrics_store_instance is None:
        raise ValueError("metrics_store_instance darf nicht None sein")

    metrics_data = metrics_store_instance.get_metrics_data()
    output = []

    output.append("# HELP python_eureka_zone_lookups_total Total number of zone and service URL lookups.")
    output.append("# TYPE python_eureka_zone_lookups_total counter")
    for kind, count in metrics_data["lookups_total"].items():
        output.append(f"python_eureka_zone_lookups_total{{kind=\"{kind}\"}} {count}")

    output.append("\n# HELP python_eureka_default_zone_fallbacks_total Lookups answered from the default zone.")
    output.append("# TYPE python_eureka_default_zone_fallbacks_total counter")
    for kind, count in metrics_data["default_zone_fallbacks_total"].items():
        output.append(f"python_eureka_default_zone_fallbacks_total{{kind=\"{kind}\"}} {count}")

    return "\n".join(output) + "\n"
