"""Shared fixtures for listing tests."""

import pytest


@pytest.fixture
def create_listing_dir(tmp_path, monkeypatch):
    """Build a directory from ``{name: content}`` and chdir into it.

    Names ending in ``/`` become directories. ``content`` may be a string
    or an int, the latter writing that many bytes.
    """

    def _create(files):
        for name, content in files.items():
            path = tmp_path / name.rstrip("/")
            if name.endswith("/"):
                path.mkdir()
            elif isinstance(content, int):
                path.write_bytes(b"x" * content)
            else:
                path.write_text(content)
        monkeypatch.chdir(tmp_path)
        return tmp_path

    return _create


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    monkeypatch.delenv("MY_LS_DEBUG", raising=False)
