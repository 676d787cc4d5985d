"""
Hold'em Server - FastAPI layer over the scoring core
"""

from holdem.server.app import app, create_app

__all__ = ["app", "create_app"]
