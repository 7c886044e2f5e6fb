"""
Domain Constants

Centrally manages constants shared across the sizing engine: the fixed
environments, the domain catalog, per-unit capacities and pricing.
"""

# Fixed deployment stages (canonical iteration order)
ENVIRONMENTS = ["dev", "tst", "pre", "prd"]

# Default environment scaling factors
DEFAULT_ENV_SCALING = {
    "dev": 0.1,
    "tst": 0.3,
    "pre": 0.7,
    "prd": 1.0,
}

# Recommended scaling factor range (inclusive)
SCALING_RANGE = (0.1, 2.0)

# Business domains and their subdomains (canonical iteration order)
DOMAIN_CATALOG = {
    "cust": {
        "name": "Customer",
        "subdomains": [
            "marketing",
            "customer_engagement_and_personalisation",
            "customer_management",
            "sales",
            "loyalty",
        ],
    },
    "comm": {
        "name": "Commercial",
        "subdomains": [
            "trading_and_revenue_management",
            "network_and_scheduling",
            "commercial_partnerships",
            "passenger_reservation_and_management",
            "product_and_offer_management",
        ],
    },
    "corp": {
        "name": "Corporate",
        "subdomains": [
            "people",
            "facilities",
            "finance_and_risk",
            "legal_and_compliance",
        ],
    },
    "aops": {
        "name": "Airline Operations",
        "subdomains": [
            "airport_operations",
            "engineering_and_safety",
            "scheduling_and_crew_rostering",
            "aircraft_and_crew_management",
            "flight_operations",
        ],
    },
    "hols": {
        "name": "easyJet Holidays",
        "subdomains": [
            "search_compare",
            "itinerary",
            "scheduling",
            "payment",
            "availability",
            "booking",
            "notification",
            "support",
        ],
    },
}

# Default traffic profile applied to every domain
DEFAULT_PROFILE = {
    "messages_per_sec": 100,
    "message_size_kb": 1,
    "retention_days": 7,
    "replication_factor": 3,
    "partitions": 6,
    "peak_multiplier": 2,
    "compression_ratio": 0.7,
    "enabled": True,
}

ALLOWED_REPLICATION_FACTORS = (1, 3, 5)

# What a single capacity unit (ECKU) handles
THROUGHPUT_MBPS_PER_UNIT = 10
STORAGE_GB_PER_UNIT = 100
PARTITIONS_PER_UNIT = 1000

SECONDS_PER_DAY = 86400

# Billing month convention: 24h x 30 days (not calendar accurate)
HOURS_PER_MONTH = 24 * 30

# Hourly rate per capacity unit (GBP / ECKU / hour)
ECKU_PRICING = {
    "basic": 0.12,
    "standard": 0.18,
    "dedicated": 0.25,
}

CURRENCY_SYMBOL = "£"

# Connectors
DEFAULT_CONNECTOR_SLOTS = 8
DEFAULT_CONNECTOR_MONTHLY_COST = 100.0

UNIFIED_CLUSTER_NAME = "Unified Cluster"

EXPORT_FILENAME = "kafka-sizing-calculator.csv"
EXPORT_MIME_TYPE = "text/csv"
