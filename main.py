"""
Second Brain API Server

Knowledge capture endpoints plus the retrieval pipeline: the public brain
query, heuristic summaries/tags, and the chat assistant.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from second_brain.api.config import APIConfig
from second_brain.api.handlers.chat import router as chat_router
from second_brain.api.handlers.health import check_health
from second_brain.api.handlers.knowledge import router as knowledge_router
from second_brain.api.handlers.process import router as process_router
from second_brain.api.handlers.query import router as query_router
from second_brain.api.handlers.seed import router as seed_router
from second_brain.api.middleware.request_logger import RequestLoggerMiddleware
from second_brain.api.models.errors import error_body
from second_brain.core.chat_service import ChatService
from second_brain.core.heuristics import TagSuggester
from second_brain.core.knowledge_service import KnowledgeService
from second_brain.core.llm_connector import LLMConnector
from second_brain.core.providers.factory import create_connector
from second_brain.core.retriever import RANKING_STRATEGIES, TwoStageRetriever, insertion_order
from second_brain.core.synthesizer import AnswerSynthesizer
from second_brain.lib.logger import setup_logging
from second_brain.storage.knowledge_store import DocumentStore
from second_brain.storage.sqlite_store import SQLiteKnowledgeStore

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# Sentinel: "build the connector from config" as opposed to an explicit None.
_FROM_CONFIG = object()


def _validation_message(exc: RequestValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(problems) or "Invalid request"


def create_app(
    config: APIConfig | None = None,
    store: DocumentStore | None = None,
    connector: LLMConnector | None | object = _FROM_CONFIG,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Loaded configuration (default: config/api.yaml)
        store: Document store; a SQLite store at storage.db_path when omitted
        connector: Model connector; built from the llm section when omitted,
            pass None explicitly to disable chat
    """
    config = config or APIConfig()

    setup_logging(
        log_level=config.get("logging.level", "INFO"),
        log_file=config.get("logging.file"),
        structured=config.get("logging.structured", False),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Wire collaborators on startup, release them on shutdown."""
        logger.info("Starting Second Brain API server")

        app_store = store or SQLiteKnowledgeStore(db_path=config.db_path)
        app_connector = create_connector(config) if connector is _FROM_CONFIG else connector

        ranking_name = config.get("retrieval.ranking", "insertion")
        ranking = RANKING_STRATEGIES.get(ranking_name)
        if ranking is None:
            logger.warning(f"Unknown retrieval.ranking '{ranking_name}', using insertion order")
            ranking = insertion_order

        retriever = TwoStageRetriever(app_store, ranking=ranking)
        synthesizer = AnswerSynthesizer()

        app.state.store = app_store
        app.state.connector = app_connector
        app.state.retriever = retriever
        app.state.synthesizer = synthesizer
        app.state.tag_suggester = TagSuggester()
        app.state.knowledge_service = KnowledgeService(
            app_store, default_user_id=config.default_user_id
        )
        app.state.chat_service = ChatService(
            retriever, connector=app_connector, synthesizer=synthesizer
        )

        logger.info("Retrieval pipeline initialized")

        yield

        logger.info("Shutting down API server")
        if app_connector is not None:
            await app_connector.close()

    app = FastAPI(
        title="Second Brain API",
        description="Personal knowledge capture with lexical retrieval and templated answers",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.config = config

    if config.get("cors.enabled", True):
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.get("cors.allow_origins", ["*"]),
            allow_credentials=True,
            allow_methods=config.get("cors.allow_methods", ["GET", "POST", "OPTIONS"]),
            allow_headers=config.get("cors.allow_headers", ["Content-Type", "Authorization"]),
        )
        logger.info("CORS enabled")

    if config.get("logging.log_requests", True):
        app.add_middleware(RequestLoggerMiddleware)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Flatten HTTPException detail into ``{"error": ...}``."""
        return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and parameters are plain 400s."""
        message = _validation_message(exc)
        logger.warning(f"Invalid request on {request.url.path}: {message}")
        return JSONResponse(status_code=400, content=error_body(message))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content=error_body(str(exc)))

    @app.get("/")
    async def root():
        """API root endpoint."""
        return {
            "message": "Second Brain API",
            "version": VERSION,
            "docs": "/docs",
            "endpoints": {
                "query": "/api/public/brain/query",
                "process": "/api/ai/process",
                "knowledge": "/api/knowledge",
                "graph": "/api/knowledge/graph",
                "chat": "/api/chat",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        return await check_health(
            config,
            getattr(request.app.state, "store", None),
            getattr(request.app.state, "connector", None),
            VERSION,
        )

    app.include_router(query_router)
    app.include_router(process_router)
    app.include_router(knowledge_router)
    app.include_router(chat_router)
    app.include_router(seed_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = app.state.config
    server_config = config.get("server", {})

    uvicorn.run(
        "main:app",
        host=server_config.get("host", "0.0.0.0"),
        port=server_config.get("port", 8000),
        reload=server_config.get("reload", False),
        workers=1 if server_config.get("reload", False) else server_config.get("workers", 1),
        log_level=config.get("logging.level", "info").lower(),
    )
