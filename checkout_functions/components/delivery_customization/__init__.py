"""
Delivery customization component - Rename delivery options by postal code.
"""

from .component import (
    TITLE_SEPARATOR,
    compute_title,
    find_renames,
    group_matches_zip,
    project_renames,
    run,
)
from .models import RenameMatch
from .ports import DiagnosticsPort

__all__ = [
    # Entry point
    "run",
    # Rule evaluation
    "find_renames",
    "group_matches_zip",
    "compute_title",
    "project_renames",
    # Models
    "RenameMatch",
    # Ports
    "DiagnosticsPort",
    # Constants
    "TITLE_SEPARATOR",
]
