"""
Script Forge API -- FastAPI application entry point.
Turns natural-language automation requests into production-ready script packages.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import config
from src.routes import export, generate, options
from src.utils.logger import logger

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logging. The provider is optional at startup; calls fail cleanly without it."""
    logger.info("Script Forge API starting up...")
    if not config.LLM_API_KEY:
        logger.warning("LLM_API_KEY not set -- /api/generate will report engine faults")
    logger.info(f"Script Forge API ready (model={config.MODEL_NAME}).")
    yield
    logger.info("Script Forge API stopped.")


app = FastAPI(
    title="Script Forge API",
    description="AI script engineering -- script, tests, Dockerfile, CI/CD and failure simulations from one request.",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in config.CORS_ORIGINS],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(generate.router, prefix="/api/generate", tags=["generate"])
app.include_router(export.router, prefix="/api/export", tags=["export"])
app.include_router(options.router, prefix="/api/options", tags=["options"])


@app.get("/health")
async def health():
    """Health check with provider status."""
    return {
        "status": "ok",
        "service": "scriptforge-api",
        "version": VERSION,
        "dependencies": {
            "llm_provider": "configured" if config.LLM_API_KEY else "not_configured",
        },
    }


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "data": None,
            "message": "Internal server error",
            "error": "INTERNAL_ERROR",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=config.DEBUG,
    )
