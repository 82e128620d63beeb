"""Mini README: Interface package exposing the interactive fleet menu."""

from .menu import FleetMenu, render_report

__all__ = ["FleetMenu", "render_report"]
