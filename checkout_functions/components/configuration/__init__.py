"""
Configuration component - Parse merchant configuration metafields.
"""

from checkout_functions.domain.errors import (
    ConfigurationIssue,
    ConfigurationMalformedError,
)

from .component import dump_configuration, load_configuration
from .models import DeliveryConfiguration, FunctionConfiguration, PaymentConfiguration

__all__ = [
    # Entry points
    "load_configuration",
    "dump_configuration",
    # Models
    "FunctionConfiguration",
    "DeliveryConfiguration",
    "PaymentConfiguration",
    # Errors
    "ConfigurationIssue",
    "ConfigurationMalformedError",
]
