"""In-memory counters rendered for the Prometheus /metrics endpoint."""

from typing import Dict

HELP = {
    "orders_submitted_total": "Total number of orders submitted to the order API",
    "coupons_applied_total": "Total number of coupons applied to an order",
    "coupons_rejected_total": "Total number of orders rejected for an invalid coupon",
    "payment_links_opened_total": "Total number of payment links opened",
}


class MetricsCollector:
    def __init__(self):
        self._counters: Dict[str, int] = {name: 0 for name in HELP}

    def increment(self, metric_name: str, value: int = 1) -> None:
        if metric_name in self._counters:
            self._counters[metric_name] += value

    def get(self, metric_name: str) -> int:
        return self._counters[metric_name]

    def reset(self) -> None:
        for name in self._counters:
            self._counters[name] = 0

    def get_prometheus_text(self) -> str:
        lines = []
        for name, value in self._counters.items():
            lines.append(f"# HELP {name} {HELP[name]}")
            lines.append(f"# TYPE {name} counter")
            lines.append(f"{name} {value}")
            lines.append("")
        return "\n".join(lines)


# Global metrics instance
metrics = MetricsCollector()
