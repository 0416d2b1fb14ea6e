"""Core package initializer for Legible.

Downstream code imports from the submodules directly:
    from legible.core.calculator import ReadabilityCalculator
    from legible.core.settings import load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
