"""Mini README: Core package initializer for the fleet budget tracker.

Exposes the logger factory alongside the store so the CLI and tests can
import the main entry points from one place without knowing the module
layout underneath.
"""

from .fleet import FleetStore
from .logging_utils import get_logger

__all__ = ["FleetStore", "get_logger"]
