"""Utility functions for vidstrip."""

from .deps import (
    check_system_dependencies,
    ensure_available,
    print_dependency_status,
    probe_available,
)

__all__ = [
    # Dependency checking
    "check_system_dependencies",
    "ensure_available",
    "print_dependency_status",
    "probe_available",
]
