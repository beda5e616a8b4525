import logging
import time
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from . import __version__
from .core.config import Config
from .core.errors import DocumentNotFoundError, GlossaryError, TermNotFoundError
from .core.middleware import log_requests, global_exception_handler
from .core.validation import validate_query, validate_term
from .modules import echo_router
from .services.document import get_page, render_page
from .services.glossary import get_glossary

logger = logging.getLogger(__name__)


def _glossary_or_500():
    try:
        return get_glossary()
    except GlossaryError as e:
        logger.error(f"Failed to load glossary: {e}")
        raise HTTPException(status_code=500, detail="Glossary unavailable")


def create_app() -> FastAPI:
    app = FastAPI(title="Using Git", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    @app.exception_handler(Exception)
    async def _global_exception_handler(request, exc):
        return await global_exception_handler(request, exc)

    @app.get("/", response_class=HTMLResponse)
    async def how_to_doc():
        """Serve the how-to document inside the page shell."""
        try:
            fragment = get_page()
        except DocumentNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return render_page(fragment)

    @app.get("/glossary")
    async def list_glossary(q: Optional[str] = Query(None)):
        """List all glossary terms, or the entries matching ``q``."""
        query = validate_query(q)
        glossary = _glossary_or_500()
        if query is None:
            terms = glossary.terms()
            return {"count": len(terms), "terms": terms}
        results = [entry.to_dict() for entry in glossary.search(query)]
        return {"query": query, "count": len(results), "results": results}

    @app.get("/glossary.html", response_class=HTMLResponse)
    async def glossary_page():
        glossary = _glossary_or_500()
        return render_page(glossary.to_html(), title=f"{Config.PAGE_TITLE}: glossary", output_id="glossary")

    @app.get("/glossary/{term}")
    async def glossary_term(term: str):
        term = validate_term(term)
        glossary = _glossary_or_500()
        try:
            return glossary.lookup(term).to_dict()
        except TermNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.get("/health")
    async def health_check():
        """Check that the document and glossary can be read."""
        health_start_time = time.time()

        try:
            Config.validate()
            get_page()
            glossary = get_glossary()

            health_duration = time.time() - health_start_time

            return {
                "status": "healthy",
                "service": "gitdoc",
                "timestamp": datetime.now().isoformat(),
                "glossary_terms": len(glossary),
                "response_time_ms": round(health_duration * 1000, 2)
            }
        except (ValueError, DocumentNotFoundError, GlossaryError) as e:
            health_duration = time.time() - health_start_time
            logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

            return {
                "status": "unhealthy",
                "service": "gitdoc",
                "timestamp": datetime.now().isoformat(),
                "error": str(e),
                "response_time_ms": round(health_duration * 1000, 2)
            }

    namespaces = Config.demo_namespaces()
    for namespace in namespaces:
        app.include_router(echo_router(namespace))

    @app.get("/api")
    async def api_info():
        """Return basic service information."""
        return {
            "service": "Using Git",
            "version": __version__,
            "endpoints": {
                "how_to_doc": "/",
                "glossary": "/glossary",
                "glossary_term": "/glossary/{term}",
                "glossary_html": "/glossary.html",
                "health": "/health",
                "modules": [f"/modules/{namespace}/" for namespace in namespaces],
            },
            "timestamp": datetime.now().isoformat(),
            "description": "How-to guide for version control with Git, plus its glossary"
        }

    return app


app = create_app()
