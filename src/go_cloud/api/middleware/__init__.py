"""
Middleware package for the go-cloud API.

Provides:
- request_logging.py: Request logging middleware
"""

from .request_logging import install_request_logging

__all__ = ["install_request_logging"]
