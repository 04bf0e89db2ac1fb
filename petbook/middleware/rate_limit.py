"""
Rate limiting global con slowapi.

El límite por defecto (RATE_LIMIT, p. ej. "120/minute") se aplica a todas las
rutas mediante SlowAPIMiddleware, con la IP remota como clave.
Con RATE_LIMIT_ENABLED=false (tests) el limiter no hace nada.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from ..config import get_settings

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)
