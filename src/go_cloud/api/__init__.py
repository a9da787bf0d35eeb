"""
go-cloud HTTP API Service

Architecture:
- server.py: FastAPI application setup
- config.py: Service configuration management
- models.py: Pydantic response models
- health.py: Liveness and readiness endpoints
- version.py: Root identity endpoint
- errors.py: Plain-text error responses
- lifecycle.py: Server runner with bounded graceful shutdown
- middleware/: Request logging
"""
