import pytest
from fastapi.testclient import TestClient

from gitdoc.app import create_app
from gitdoc.core.config import Config


SAMPLE_GLOSSARY = """\
Branch: |
  Branches are copies of the entire codebase which exist in parallel in a repository.

commit: |
  A record of when changes to files are added to the repository.

Pull Request: |
  A request to merge code from one branch into another.
"""

SAMPLE_DOC = "<h1>Sample guide</h1>\n<p>Clone, commit, push.</p>\n"


@pytest.fixture
def glossary_file(tmp_path):
    path = tmp_path / "glossary.yml"
    path.write_text(SAMPLE_GLOSSARY, encoding="utf-8")
    return path


@pytest.fixture
def doc_file(tmp_path):
    path = tmp_path / "doc.html"
    path.write_text(SAMPLE_DOC, encoding="utf-8")
    return path


@pytest.fixture
def configured(monkeypatch, doc_file, glossary_file):
    """Point the app at the sample document and glossary."""
    monkeypatch.setattr(Config, "DOC_PATH", str(doc_file))
    monkeypatch.setattr(Config, "GLOSSARY_PATH", str(glossary_file))
    monkeypatch.setattr(Config, "DEMO_NAMESPACES_ENV", "first,second")
    return Config


@pytest.fixture
def client(configured):
    with TestClient(create_app()) as test_client:
        yield test_client
