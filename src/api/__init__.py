"""
Auth Widget Configurator - API Layer

Provides a REST interface to the configurator core.
All endpoints are facades over the services in ServiceContainer.

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic schemas
- middleware/ : Error handling
"""

from api.main import create_app

__all__ = ["create_app"]
