"""Prometheus metrics for monitoring reward queries and points issued"""

from prometheus_client import Counter, Histogram

# Query metrics
rewards_query_counter = Counter(
    "rewards_query_total",
    "Total reward summary queries served",
    ["scope", "outcome"],  # single | all ; success | not_found | error
)

customer_not_found_counter = Counter(
    "customer_not_found_total",
    "Reward lookups for customers without transactions",
)

# Points distribution per computed summary
points_awarded_histogram = Histogram(
    "reward_points_awarded",
    "Total points in each computed reward summary",
    buckets=[0, 50, 100, 250, 500, 1000, 2500],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_query(scope: str, outcome: str) -> None:
    """Count a served reward query by scope and outcome"""
    rewards_query_counter.labels(scope=scope, outcome=outcome).inc()
    if outcome == "not_found":
        customer_not_found_counter.inc()


def record_points(total_points: int) -> None:
    """Record points of one computed summary for distribution analysis"""
    points_awarded_histogram.observe(total_points)
