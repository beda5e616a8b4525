import pytest

from gitdoc.core.config import Config
from gitdoc.core.errors import GlossaryError, TermNotFoundError
from gitdoc.services.glossary import Entry, Glossary, load_glossary


def test_load_strips_block_scalar_newlines(glossary_file):
    glossary = load_glossary(glossary_file)

    entry = glossary.lookup("Branch")
    assert entry.definition == "Branches are copies of the entire codebase which exist in parallel in a repository."
    assert not entry.definition.endswith("\n")


def test_terms_are_sorted_case_insensitively(glossary_file):
    assert load_glossary(glossary_file).terms() == ["Branch", "commit", "Pull Request"]


def test_lookup_ignores_case_and_whitespace(glossary_file):
    glossary = load_glossary(glossary_file)

    assert glossary.lookup("  pull request ").term == "Pull Request"
    assert glossary.lookup("COMMIT").term == "commit"
    assert "branch" in glossary


def test_lookup_unknown_term(glossary_file):
    with pytest.raises(TermNotFoundError) as exc_info:
        load_glossary(glossary_file).lookup("Rebase")
    assert str(exc_info.value) == "Term not found: Rebase"


def test_search_matches_terms_and_definitions(glossary_file):
    glossary = load_glossary(glossary_file)

    assert [e.term for e in glossary.search("BRANCH")] == ["Branch", "Pull Request"]
    assert [e.term for e in glossary.search("repository")] == ["Branch", "commit"]
    assert glossary.search("rebase") == []
    assert len(glossary.search("   ")) == 3


def test_duplicate_terms_keep_last_definition():
    glossary = Glossary({"Merge": "first", "merge": "second"})
    assert len(glossary) == 1
    assert glossary.lookup("MERGE") == Entry("merge", "second")


def test_to_html_escapes_entries():
    html = Glossary({"<Tag>": "a & b"}).to_html()
    assert "<dt>&lt;Tag&gt;</dt>" in html
    assert "<dd>a &amp; b</dd>" in html


def test_missing_file(tmp_path):
    with pytest.raises(GlossaryError, match="not found"):
        load_glossary(tmp_path / "missing.yml")


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- Git\n- Branch\n", encoding="utf-8")
    with pytest.raises(GlossaryError, match="mapping"):
        load_glossary(path)


def test_non_string_definition_rejected(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("Git:\n  - nested\n", encoding="utf-8")
    with pytest.raises(GlossaryError):
        load_glossary(path)


def test_invalid_yaml_rejected(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("Git: [unclosed\n", encoding="utf-8")
    with pytest.raises(GlossaryError, match="valid YAML"):
        load_glossary(path)


def test_empty_file_is_empty_glossary(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert len(load_glossary(path)) == 0


def test_packaged_glossary():
    glossary = load_glossary(Config.GLOSSARY_PATH)

    assert len(glossary) == 30
    assert glossary.terms()[0] == "API"
    assert glossary.lookup("git bash").term == "Git Bash"


def test_non_utf8_file_rejected(tmp_path):
    path = tmp_path / "latin1.yml"
    path.write_bytes(b"Git: |\n  caf\xe9\n")
    with pytest.raises(GlossaryError, match="UTF-8"):
        load_glossary(path)


def test_unreadable_path_rejected(tmp_path):
    # A directory cannot be opened as a file
    with pytest.raises(GlossaryError, match="could not be read"):
        load_glossary(tmp_path)
