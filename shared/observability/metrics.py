from prometheus_client import Counter

# Business Metrics
inventory_product_mutations_total = Counter(
    "inventory_product_mutations_total",
    "Total successful product mutations",
    ["operation"]  # Labels: 'create', 'update', 'delete', 'adjust_quantity'
)

inventory_validation_failures_total = Counter(
    "inventory_validation_failures_total",
    "Total rejected product payloads",
    ["field"]  # Labels: 'name', 'price', 'quantity', ...
)

inventory_storage_errors_total = Counter(
    "inventory_storage_errors_total",
    "Total unexpected faults raised by the product store"
)
