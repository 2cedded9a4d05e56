"""Checkout functions - config-driven delivery and payment customizations."""
