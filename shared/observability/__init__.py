from .setup import setup_observability
from .metrics import (
    inventory_product_mutations_total,
    inventory_validation_failures_total,
    inventory_storage_errors_total,
)
