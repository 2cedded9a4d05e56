"""
Delivery customization component ports.

The component only reports to a diagnostics stream; the protocol is shared
with the payment component and the runner.
"""

from __future__ import annotations

from checkout_functions.ports.diagnostics import DiagnosticsPort

__all__ = ["DiagnosticsPort"]
