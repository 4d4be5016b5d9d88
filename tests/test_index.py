import json

import pytest

from docsearch import (
    DocIndexStore,
    DocIndexUnavailableError,
    get_categories,
    get_category_stats,
    load_doc_index,
    parse_doc_index,
)


def test_load_doc_index_reads_documents(index_file):
    index = load_doc_index(index_file)

    assert index.version == "1.0.0"
    assert index.build_date == "2026-10-01T00:00:00Z"
    assert [doc.doc_id for doc in index.documents] == [
        "cli/vim-mode.md",
        "cli/themes.md",
        "tools/shell.md",
        "index.md",
    ]
    vim = index.documents[0]
    assert vim.headings == ("Vim Mode", "Enabling vim keybindings")
    assert vim.live_url == "https://geminicli.com/docs/cli/vim-mode/"
    assert vim.source_url == "https://geminicli.com/docs/cli/vim-mode"


def test_missing_urls_and_category_are_derived_from_path(index_file):
    index = load_doc_index(index_file)
    themes = index.documents[1]
    shell = index.documents[2]

    assert themes.live_url == "https://geminicli.com/docs/cli/themes/"
    assert themes.github_url == "https://github.com/google-gemini/gemini-cli/blob/main/docs/cli/themes.md"
    assert shell.category == "tools"


def test_missing_content_defaults_to_empty():
    index = parse_doc_index(json.dumps({"documents": [{"id": "a", "title": "A", "category": "cli"}]}))

    assert index.documents[0].content == ""
    assert index.documents[0].headings == ()


def test_missing_file_raises_index_unavailable(tmp_path):
    with pytest.raises(DocIndexUnavailableError, match="not found"):
        load_doc_index(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        json.dumps({"documents": [{"title": "No id"}]}),
        json.dumps({"documents": "nope"}),
    ],
)
def test_invalid_index_raises_index_unavailable(data):
    with pytest.raises(DocIndexUnavailableError, match="invalid"):
        parse_doc_index(data)


def test_duplicate_ids_are_rejected():
    data = json.dumps(
        {
            "documents": [
                {"id": "a", "title": "A", "category": "cli", "content": "one"},
                {"id": "a", "title": "A again", "category": "cli", "content": "two"},
            ]
        }
    )

    with pytest.raises(DocIndexUnavailableError, match="duplicate ids: a"):
        parse_doc_index(data)


def test_categories_and_stats(index_file):
    index = load_doc_index(index_file)

    assert get_categories(index) == ["cli", "general", "tools"]
    assert get_category_stats(index) == {"cli": 2, "tools": 1, "general": 1}


def test_store_caches_until_reload(index_file, index_payload):
    store = DocIndexStore(index_file)

    first = store.load()
    index_payload["documents"] = index_payload["documents"][:1]
    index_file.write_text(json.dumps(index_payload), encoding="utf-8")

    assert store.load() is first
    reloaded = store.reload()
    assert len(reloaded.documents) == 1
    assert store.path == index_file


def test_store_propagates_missing_index(tmp_path):
    store = DocIndexStore(tmp_path / "missing.json")

    with pytest.raises(DocIndexUnavailableError):
        store.load()


def test_source_url_fills_in_path_urls_and_category():
    data = json.dumps(
        {
            "documents": [
                {
                    "id": "shell",
                    "title": "Shell Tool",
                    "content": "runs commands",
                    "sourceUrl": "http://geminicli.com/docs/tools/shell",
                },
                {
                    "id": "readme",
                    "title": "Project README",
                    "content": "project overview",
                    "sourceUrl": "https://github.com/example/repo/README.md",
                },
            ]
        }
    )

    shell, readme = parse_doc_index(data).documents

    assert shell.path == "tools/shell.md"
    assert shell.category == "tools"
    assert shell.live_url == "https://geminicli.com/docs/tools/shell/"
    assert shell.github_url == "https://github.com/google-gemini/gemini-cli/blob/main/docs/tools/shell.md"
    assert shell.source_url == "http://geminicli.com/docs/tools/shell"
    assert readme.path == "project-readme"
    assert readme.category == "general"
    assert readme.live_url == "https://github.com/example/repo/README.md"
