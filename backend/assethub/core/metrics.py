"""Prometheus metrics for the AssetHub management API.

Metrics are exposed at the /metrics endpoint.

Metrics Categories:
- HTTP request metrics (latency, count, in progress)
- Management operations per entity kind (create, update, delete, ...)
- Label generation results per generator
"""

from prometheus_client import Counter, Gauge, Histogram, Info

# Application info
APP_INFO = Info("assethub_app", "AssetHub application information")

# HTTP Request metrics
HTTP_REQUESTS_TOTAL = Counter(
    "assethub_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "assethub_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "assethub_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

# Management operations
MANAGEMENT_OPERATIONS_TOTAL = Counter(
    "assethub_management_operations_total",
    "Management operations by entity kind",
    ["entity", "operation", "outcome"],  # outcome: success, not_found, conflict, invalid
)

# Labels
LABELS_GENERATED_TOTAL = Counter(
    "assethub_labels_generated_total",
    "Label generation requests",
    ["generator", "outcome"],  # outcome: generated, missing
)


def set_app_info(version: str, environment: str) -> None:
    """Set application info metric."""
    APP_INFO.info({"version": version, "environment": environment})


def record_management_operation(entity: str, operation: str, outcome: str = "success") -> None:
    """Count one facade operation.

    Args:
        entity: Entity kind (asset, asset_type, device_type, ...).
        operation: create, update, delete, get, list or label.
        outcome: success, not_found, conflict or invalid.
    """
    MANAGEMENT_OPERATIONS_TOTAL.labels(entity=entity, operation=operation, outcome=outcome).inc()


def record_label_generated(generator: str, generated: bool) -> None:
    outcome = "generated" if generated else "missing"
    LABELS_GENERATED_TOTAL.labels(generator=generator, outcome=outcome).inc()


def normalize_endpoint(path: str, known_prefixes: tuple[str, ...] = ()) -> str:
    """Collapse entity tokens in a request path to keep label cardinality bounded.

    ``/api/assets/forklift-7/label/qrcode`` becomes
    ``/api/assets/{token}/label/{generator}``.
    """
    parts = path.split("/")
    normalized = []
    previous = ""
    for part in parts:
        if previous == "label" and part:
            normalized.append("{generator}")
        elif previous in known_prefixes and part and part not in ("label", "configuration"):
            normalized.append("{token}")
        else:
            normalized.append(part)
        previous = part
    return "/".join(normalized)
