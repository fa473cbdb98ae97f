import sys
from pathlib import Path

import pytest
from invoke import Config, Context

# Keep the repo root importable so `tasks` and `aocprep` resolve without an install.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

TEMPLATE = "pub(crate) fn main() {}\n"


@pytest.fixture
def repo(tmp_path):
    template = tmp_path / "templates" / "dayn.rs"
    template.parent.mkdir()
    template.write_text(TEMPLATE)
    return tmp_path


@pytest.fixture
def ctx(repo):
    config = Config(
        overrides={
            "run": {"hide": True, "in_stream": False},
            "puzzles": {"root": str(repo)},
        }
    )
    return Context(config=config)
