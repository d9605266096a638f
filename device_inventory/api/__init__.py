"""
API layer for the Device Inventory service.

Exposes the HTTP endpoints under /api (auth, devices) plus the error
handlers that shape every failure into the response envelope.
"""
from .auth_controller import router as auth_router
from .device_controller import router as device_router
from .health_controller import router as health_router
from .error_handlers import register_exception_handlers


__all__ = ["auth_router", "device_router", "health_router", "register_exception_handlers"]
