import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv


load_dotenv()

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _split_csv(raw: str) -> List[str]:
    # Deduplicate while preserving order
    seen = set()
    result: List[str] = []
    for item in (part.strip() for part in raw.split(",")):
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Paths default to the document and glossary shipped with the package.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    DOC_PATH: str = os.getenv("DOC_PATH", str(DATA_DIR / "UsingGit.html"))
    GLOSSARY_PATH: str = os.getenv("GLOSSARY_PATH", str(DATA_DIR / "gitGlossary.yml"))
    PAGE_TITLE: str = os.getenv("PAGE_TITLE", "Using Git")
    DEMO_NAMESPACES_ENV: str = os.getenv("DEMO_NAMESPACES", "first,second")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @classmethod
    def allowed_origins(cls) -> List[str]:
        return _split_csv(cls.CORS_ALLOWED_ORIGINS_ENV)

    @classmethod
    def demo_namespaces(cls) -> List[str]:
        return _split_csv(cls.DEMO_NAMESPACES_ENV)

    @classmethod
    def validate(cls) -> None:
        if not Path(cls.DOC_PATH).is_file():
            raise ValueError(f"DOC_PATH does not point to a file: {cls.DOC_PATH}")
        if not Path(cls.GLOSSARY_PATH).is_file():
            raise ValueError(f"GLOSSARY_PATH does not point to a file: {cls.GLOSSARY_PATH}")
