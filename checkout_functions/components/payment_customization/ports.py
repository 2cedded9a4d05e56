"""
Payment customization component ports.

Diagnostics are the only outbound dependency. Below-threshold carts are
reported here and nowhere else.
"""

from __future__ import annotations

from checkout_functions.ports.diagnostics import DiagnosticsPort

__all__ = ["DiagnosticsPort"]
