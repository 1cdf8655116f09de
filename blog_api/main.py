import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_api import database
from blog_api.config import settings
from blog_api.exceptions import UserNotFoundError
from blog_api.logging_config import setup_logging
from blog_api.middleware import TimingMiddleware
from blog_api.routers import posts, users

logger = logging.getLogger(__name__)

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    if settings.CREATE_TABLES:
        await database.create_tables()
    logger.info("Blog API started (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await database.engine.dispose()


app = FastAPI(
    title="Blog API",
    description="Users and posts for a minimal blogging backend",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UserNotFoundError)
async def user_not_found_handler(request: Request, exc: UserNotFoundError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "User not found"})


# Routers
app.include_router(posts.router)
app.include_router(users.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
