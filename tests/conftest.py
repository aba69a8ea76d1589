import os
import sys

import pytest

# Ensure src/ is on sys.path so 'core', 'adapters' and 'cli' can be imported in tests
SRC_DIR = os.path.join(os.path.abspath(os.path.dirname(os.path.dirname(__file__))), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from core.config import AppSettings  # noqa: E402

GIST_ID = "aa5a315d61ae9438b18d7d1b3b8b7f1e"


@pytest.fixture
def settings():
    # Ignore .env files so local config cannot leak into tests
    return AppSettings(_env_file=None)


@pytest.fixture
def gist_id():
    return GIST_ID


@pytest.fixture
def make_gist():
    return _gist_payload


def _gist_payload(filenames, gist_id=GIST_ID):
    files = {}
    for name in filenames:
        files[name] = {
            "filename": name,
            "content": f"content of {name}",
            "language": None,
            "raw_url": f"https://gist.githubusercontent.com/alice/{gist_id}/raw/{name}",
            "size": len(f"content of {name}"),
            "type": "text/plain",
            "truncated": False,
        }
    return {
        "id": gist_id,
        "description": "test gist",
        "files": files,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "html_url": f"https://gist.github.com/{gist_id}",
        "public": True,
    }
