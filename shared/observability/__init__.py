from .setup import setup_observability, configure_logging
from .metrics import (
    orders_created_total,
    orders_user_lookup_total,
    orders_status_updates_total,
    orders_deleted_total
)
