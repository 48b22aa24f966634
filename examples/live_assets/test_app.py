"""Tests for the live assets example."""

import pytest

from kiln.testing import TestClient


@pytest.fixture(autouse=True)
def _artifacts_in_tmp(tmp_path, monkeypatch):
    """Send compiled artifacts to a temporary directory, not the example tree."""
    monkeypatch.delenv("KILN_COMPILER_SRC", raising=False)
    monkeypatch.setenv("KILN_COMPILER_DEST", str(tmp_path))


class TestLiveAssets:
    async def test_health(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/health")
            assert response.text == "ok"

    async def test_compiles_stylesheet(self, example_app, tmp_path) -> None:
        pytest.importorskip("sass")
        async with TestClient(example_app) as client:
            response = await client.get("/css/site.css")
            assert response.status == 200
            assert "text/css" in response.content_type
            assert "color:#c2410c" in response.text
            assert "\n" not in response.text
        assert (tmp_path / "css" / "site.css").is_file()

    async def test_missing_script_source_is_404(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/js/app.js")
            assert response.status == 404
