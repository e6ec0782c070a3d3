# -*- coding: utf-8 -*-
"""Bezier, B-spline and NURBS evaluation for an interactive spline editor."""

from importlib.metadata import PackageNotFoundError, version

from loguru import logger

try:
    __version__ = version("splinedit")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

# library logging is opt-in: logger.enable("splinedit")
logger.disable("splinedit")
