"""
Prometheus metrics for the licensee manager.

Custom metrics for the status lifecycle and office reassignment.
"""

from prometheus_client import Counter, Histogram

# Status lifecycle metrics
licensee_status_transitions_total = Counter(
    "licensee_status_transitions_total",
    "Accepted licensee status changes",
    ["old_status", "new_status", "caller"],
)

licensee_transition_rejections_total = Counter(
    "licensee_transition_rejections_total",
    "Rejected licensee status change requests",
    ["reason"],
)

# Sweep metrics
expiration_sweeps_total = Counter(
    "expiration_sweeps_total",
    "Completed expiration sweeps",
)

expiration_sweep_failures_total = Counter(
    "expiration_sweep_failures_total",
    "Per-licensee failures recorded during expiration sweeps",
)

expiration_sweep_expired_licensees = Histogram(
    "expiration_sweep_expired_licensees",
    "Licensees moved to Expired by a single sweep",
    buckets=[0, 1, 5, 10, 50, 100, 500, 1000],
)

# Office metrics
offices_deactivated_total = Counter(
    "offices_deactivated_total",
    "Offices deactivated",
)

offices_reactivated_total = Counter(
    "offices_reactivated_total",
    "Offices reactivated",
)

licensees_reassigned_total = Counter(
    "licensees_reassigned_total",
    "Licensees moved to a replacement office during deactivation",
)
