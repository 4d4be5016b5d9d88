import json

import pytest


@pytest.fixture()
def index_payload():
    return {
        "version": "1.0.0",
        "buildDate": "2026-10-01T00:00:00Z",
        "documents": [
            {
                "id": "cli/vim-mode.md",
                "title": "Vim Mode",
                "category": "cli",
                "path": "cli/vim-mode.md",
                "liveUrl": "https://geminicli.com/docs/cli/vim-mode/",
                "githubUrl": "https://github.com/google-gemini/gemini-cli/blob/main/docs/cli/vim-mode.md",
                "sourceUrl": "https://geminicli.com/docs/cli/vim-mode",
                "content": "Enable vim mode to edit prompts with modal keybindings.",
                "headings": ["Vim Mode", "Enabling vim keybindings"],
            },
            {
                "id": "cli/themes.md",
                "title": "Themes",
                "category": "cli",
                "path": "cli/themes.md",
                "content": "Themes change the colors of the interface.",
                "headings": ["Themes"],
            },
            {
                "id": "tools/shell.md",
                "title": "Shell Tool",
                "path": "tools/shell.md",
                "content": "The shell tool runs commands inside a sandbox container.",
                "headings": ["Shell Tool", "Sandboxing"],
            },
            {
                "id": "index.md",
                "title": "Overview",
                "category": "general",
                "path": "index.md",
                "content": "Overview of the command line assistant and its features.",
            },
        ],
    }


@pytest.fixture()
def index_file(tmp_path, index_payload):
    path = tmp_path / "docs" / "index.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(index_payload), encoding="utf-8")
    return path
