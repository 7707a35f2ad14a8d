"""Service metrics for the greeting service."""

from opentelemetry import metrics

# Get meter for creating instruments
meter = metrics.get_meter(__name__)

# HTTP Request Metrics
http_request_duration = meter.create_histogram(
    name="http_request_duration_seconds",
    description="Duration of HTTP requests in seconds",
    unit="s",
)

http_requests_total = meter.create_counter(
    name="http_requests_total",
    description="Total number of HTTP requests",
)

http_request_errors = meter.create_counter(
    name="http_request_errors_total",
    description="Total number of HTTP request errors",
)

# User store metrics
users_created_total = meter.create_counter(
    name="users_created_total",
    description="Total number of users created",
)

users_active = meter.create_up_down_counter(
    name="users_active",
    description="Number of users currently held in memory",
)


def record_http_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record HTTP request metrics."""
    labels = {"method": method, "endpoint": endpoint, "status_code": str(status_code)}

    http_request_duration.record(duration, labels)
    http_requests_total.add(1, labels)

    if status_code >= 400:
        http_request_errors.add(1, labels)


def record_user_created():
    """Record when a user is created."""
    users_created_total.add(1)
    users_active.add(1)


def record_user_deleted():
    """Record when a user is deleted."""
    users_active.add(-1)
