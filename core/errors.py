"""
Common Error Constants

Centralized error messages shared by routers and services.
"""

# Cart errors
ERROR_VARIANT_REQUIRED = "variantId is required"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Storefront errors
ERROR_STOREFRONT_NOT_CONFIGURED = "SHOPIFY_STORE_DOMAIN and SHOPIFY_STOREFRONT_TOKEN must be set"
ERROR_REDIS_NOT_CONFIGURED = "UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_INTERNAL = "Internal server error"


class ConfigurationError(ValueError):
    """Required environment settings are missing or invalid."""
