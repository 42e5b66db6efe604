from prometheus_client import Counter

# Business Metrics
orders_created_total = Counter(
    "orders_created_total",
    "Total order creation attempts",
    ["status"] # Labels: 'success', 'rejected'
)

orders_user_lookup_total = Counter(
    "orders_user_lookup_total",
    "User service lookups performed before order creation",
    ["result"] # Labels: 'found', 'not_found', 'error'
)

orders_status_updates_total = Counter(
    "orders_status_updates_total",
    "Total order status updates applied"
)

orders_deleted_total = Counter(
    "orders_deleted_total",
    "Total order delete requests processed"
)
