import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from .namespace import NS, validate_namespace
from ..services.document import render_page
from ..templating import render


logger = logging.getLogger(__name__)

MODULE_PREFIX = "/modules"


def echo_ui(namespace: str, text: str = "", output: str = "") -> str:
    """Text input, button and text output, all under ``namespace``."""
    return render(
        "echo.html",
        ns=NS(namespace),
        action=f"{MODULE_PREFIX}/{namespace}/echo",
        text=text,
        output=output,
    )


def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def echo_router(namespace: str) -> APIRouter:
    """Build one instance of the echo module, mounted at ``/modules/{namespace}``.

    Each call gets its own click counter, so instances never share state.
    A plain form post gets the module page back with the output filled in;
    the page script posts for JSON and fills the output element itself.
    """
    validate_namespace(namespace)
    ns = NS(namespace)
    router = APIRouter(prefix=f"{MODULE_PREFIX}/{namespace}", tags=[f"module:{namespace}"])
    state = {"clicks": 0}

    def module_page(text: str = "", output: str = "") -> str:
        return render_page(echo_ui(namespace, text, output), title=f"Echo module: {namespace}", output_id=ns("module"))

    @router.get("/", response_class=HTMLResponse)
    async def page():
        return module_page()

    @router.post("/echo")
    async def echo(request: Request, text: str = Form("")):
        state["clicks"] += 1
        logger.debug(f"[{namespace}] echo #{state['clicks']}: {text!r}")
        if _wants_html(request):
            return HTMLResponse(module_page(text, output=text))
        return {
            "namespace": namespace,
            "output_id": ns("output"),
            "output": text,
            "clicks": state["clicks"],
        }

    return router
