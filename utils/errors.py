# utils/errors.py


class TagCheckError(Exception):
    """Base error for a compliance run."""

    stage = "unknown"

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(TagCheckError):
    """Required environment configuration is missing or invalid."""

    stage = "configuration"


class CatalogFetchError(TagCheckError):
    """Listing products from the Shopify Admin API failed."""

    stage = "fetch_products"


class NotificationError(TagCheckError):
    """The email API rejected or failed to deliver the report."""

    stage = "send_report"
