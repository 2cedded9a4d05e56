"""Metafield slots that carry function configuration."""

DELIVERY_CUSTOMIZATION_NAMESPACE = "$app:delivery-customization"
PAYMENT_CUSTOMIZATION_NAMESPACE = "$app:payment-customization"
CONFIGURATION_KEY = "function-configuration"
CONFIGURATION_TYPE = "json"
