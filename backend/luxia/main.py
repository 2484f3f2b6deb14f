import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from luxia.config import Settings, settings as default_settings
from luxia.exceptions import LuxiaError
from luxia.routers import diagnostics, search
from luxia.services.hotel_search_service import HotelSearchService
from luxia.services.llm_client import LLMClient
from luxia.services.serp_client import SerpApiClient

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app(settings: Settings = default_settings) -> FastAPI:
    llm_client = LLMClient(settings)
    serp_client = SerpApiClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"LuXIA server listening on http://{settings.host}:{settings.port}")
        logger.info(f"Groq API key: {'configured' if llm_client.configured else 'MISSING'}")
        logger.info(
            "SerpAPI key: "
            f"{'configured' if serp_client.configured else 'not configured (fallback links active)'}"
        )

        yield

        await llm_client.close()
        await serp_client.close()

    app = FastAPI(
        title="LuXIA",
        description="AI hotel suggestions with booking links",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.llm_client = llm_client
    app.state.serp_client = serp_client
    app.state.hotel_search_service = HotelSearchService(settings, llm_client, serp_client)

    # Must be registered before CORSMiddleware so CORS wraps it
    @app.middleware("http")
    async def unexpected_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
            return JSONResponse(status_code=500, content={"error": str(exc)})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(search.router, prefix="/api/search", tags=["search"])
    app.include_router(diagnostics.router, tags=["diagnostics"])

    @app.exception_handler(LuxiaError)
    async def luxia_error_handler(request: Request, exc: LuxiaError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        content = {"error": exc.message}
        if exc.raw is not None:
            content["raw"] = exc.raw
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = [
            f"{'.'.join(str(part) for part in err['loc'][1:])}: {err['msg']}"
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"error": "; ".join(messages)})

    @app.get("/")
    async def health_check():
        return {"status": "ok", "service": "luxia"}

    return app


configure_logging(default_settings.log_level)

app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_config=None)


if __name__ == "__main__":
    run()
