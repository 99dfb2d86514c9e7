import logging
from time import perf_counter
from flask import Blueprint, g, request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

logger = logging.getLogger(__name__)

metrics_bp = Blueprint("metrics", __name__)

HTTP_LABELS = ["method", "route", "status"]

HTTP_REQUESTS = Counter(
    "movies_http_requests_total",
    "HTTP requests served, by route pattern",
    HTTP_LABELS,
)
HTTP_LATENCY = Histogram(
    "movies_http_request_duration_seconds",
    "Time spent handling a request",
    ["route"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.05, 0.25),
)
HTTP_SERVER_ERRORS = Counter(
    "movies_http_server_errors_total",
    "Responses with a 5xx status",
    ["route"],
)
STORE_OPERATIONS = Counter(
    "movies_http_store_operations_total",
    "Movie store operations, by outcome",
    ["operation", "outcome"],
)


def count_store_op(operation: str, outcome: str = "ok"):
    STORE_OPERATIONS.labels(operation, outcome).inc()


def _route() -> str:
    # the rule, so /getby/<name> is one series rather than one per movie
    rule = request.url_rule
    return rule.rule if rule is not None else "unmatched"


@metrics_bp.before_app_request
def _start_clock():
    g.request_started = perf_counter()

@metrics_bp.after_app_request
def _observe(resp):
    started = g.pop("request_started", None)
    if started is None:
        return resp
    try:
        route = _route()
        HTTP_LATENCY.labels(route).observe(perf_counter() - started)
        HTTP_REQUESTS.labels(request.method, route, str(resp.status_code)).inc()
        if resp.status_code >= 500:
            HTTP_SERVER_ERRORS.labels(route).inc()
    except Exception:
        logger.warning("Failed to record metrics for %s", request.path, exc_info=True)
    return resp

@metrics_bp.get("/metrics")
def metrics():
    return generate_latest(), 200, {"Content-Type": CONTENT_TYPE_LATEST}
