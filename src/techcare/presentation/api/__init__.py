"""REST API presentation layer for TechCare.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── access_gate.py        # Bearer token gate for non-public routes
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Error to HTTP response mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas

The application instance lives in ``techcare.presentation.api.app``.
"""
