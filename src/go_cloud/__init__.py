"""
go-cloud - minimal HTTP service with liveness and readiness probes.

This package provides:
- The HTTP API (root identity, /healthz, /readyz)
- Request logging middleware
- Graceful, time-bounded shutdown on SIGINT/SIGTERM
- A small CLI for serving and probing the service
"""

__version__ = "1.0.0"
