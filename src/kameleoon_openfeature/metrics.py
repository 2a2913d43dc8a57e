"""OpenTelemetry フラグ評価メトリクス定義"""

from __future__ import annotations

from opentelemetry import metrics

_meter = metrics.get_meter("kameleoon_openfeature", version="0.1.0")

flag_evaluation_total = _meter.create_counter(
    name="flag_evaluation_total",
    description="Total number of flag evaluations",
    unit="1",
)

flag_evaluation_errors_total = _meter.create_counter(
    name="flag_evaluation_errors_total",
    description="Total number of flag evaluations that returned an error",
    unit="1",
)
