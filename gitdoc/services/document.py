import logging
from pathlib import Path

from ..core.config import Config
from ..core.errors import DocumentNotFoundError
from ..templating import render


logger = logging.getLogger(__name__)


def include_html(path: str | Path) -> str:
    """Read an HTML fragment from disk as-is.

    Raises:
        DocumentNotFoundError: If the file does not exist.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.error(f"HTML document not found: {path}")
        raise DocumentNotFoundError(str(path))


def get_page() -> str:
    return include_html(Config.DOC_PATH)


def render_page(fragment: str, title: str | None = None, output_id: str = "how_to_doc") -> str:
    """Wrap a trusted HTML fragment in the fluid page shell.

    The fragment is embedded unescaped; the title and output id are escaped.
    """
    return render("page.html", fragment=fragment, title=title or Config.PAGE_TITLE, output_id=output_id)
