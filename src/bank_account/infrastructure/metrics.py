from prometheus_client import Counter


ACCOUNT_OPERATIONS_TOTAL = Counter(
    "account_operations_total",
    "Total number of account operations",
    ["operation_type", "status"],
)

ACCOUNT_DECLINED_TOTAL = Counter(
    "account_declined_total",
    "Total number of declined account operations",
    ["error_code"],
)
