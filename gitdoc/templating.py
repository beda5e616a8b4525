from pathlib import Path

from fastapi.templating import Jinja2Templates


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Autoescaping is on; trusted fragments are marked |safe in the templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(name: str, **context) -> str:
    return templates.get_template(name).render(**context)
