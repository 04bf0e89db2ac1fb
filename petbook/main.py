from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging

from .config import get_settings
from .db import connect, pets_collection
from .exceptions import PetBookError, ValidationError
from .middleware.rate_limit import limiter
from .routers import pets

settings = get_settings()

# Configurar logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # un único cliente por proceso; motor gestiona el pool internamente
    client = connect()
    app.state.pets = pets_collection(client)
    logger.info("%s gateway started (env=%s)", settings.app_name, settings.env)
    yield
    client.close()
    logger.info("MongoDB client closed")


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(PetBookError)
async def handle_petbook_error(request: Request, exc: PetBookError):
    if isinstance(exc, ValidationError):
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.error("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


# Configuración de CORS según entorno
if settings.env == "dev":
    cors_origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    cors_regex = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"
else:
    # Producción: solo el frontend configurado
    frontend_url = settings.frontend_base_url
    cors_origins = [frontend_url] if frontend_url else []
    cors_regex = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=cors_regex,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    expose_headers=["Content-Type"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.env, "db": settings.db_name, "collection": settings.collection_name}


# Routers
app.include_router(pets.router, prefix="/pets", tags=["pets"])
