"""
Literature reader backend
Serves the reading interface, the literature catalog and the run-code proxy
"""

from .config import Settings
from .server import create_app

__all__ = ["Settings", "create_app"]
