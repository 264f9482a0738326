"""Textual UI for pastelboard."""

from pastelboard.ui.app import PastelApp

__all__ = ["PastelApp"]
