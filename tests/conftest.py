"""Pytest configuration and fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest

from scenewriter.config import SceneWriterSettings, reset_settings, set_settings
from scenewriter.models import ExportRequest, SceneLike

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401

EXPORT_DATE = date(2024, 3, 15)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test with settings that write into a temporary directory."""
    for var in ("SCENEWRITER_LOG_LEVEL", "SCENEWRITER_DEBUG", "SCENEWRITER_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    settings = SceneWriterSettings(output_dir=tmp_path / "out")
    settings.output_dir.mkdir(parents=True, exist_ok=True)
    set_settings(settings)

    yield settings

    reset_settings()


@pytest.fixture
def settings(isolated_settings):
    """The isolated settings instance of the current test."""
    return isolated_settings


@pytest.fixture
def kitchen_scene():
    """Scene with action, a blank line and one dialogue block."""
    return SceneLike(
        id="s1",
        order=1,
        title="Kitchen",
        loc="INT",
        tod="DAY",
        content="He enters.\n\n@:JOE\nHi.\n(smiles)\nBye.\n:@",
    )


@pytest.fixture
def sample_request(kitchen_scene):
    """Export request with three scenes given out of timeline order."""
    return ExportRequest(
        project_title="My Show! #1",
        author_name="Dana Writer",
        export_date=EXPORT_DATE,
        scenes=[
            SceneLike(
                id="s3",
                order=3,
                title="Rooftop",
                loc="EXT",
                tod="NIGHT",
                content="Wind howls.",
            ),
            kitchen_scene,
            SceneLike(
                id="s2",
                order=2,
                title="Hallway",
                content="@:mary\nWait!\n:@",
            ),
        ],
    )


@pytest.fixture
def bundle_data():
    """Bundle JSON as written by the scene board, grouped by season/episode."""
    return {
        "project": {
            "id": "p1",
            "name": "Night Shift",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-02T00:00:00Z",
            "grouping": "seasons-episodes",
        },
        "seasons": [
            {"id": "sea1", "projectId": "p1", "title": "Beginnings", "order": 0},
            {"id": "sea2", "projectId": "p1", "title": "Endings", "order": 1},
        ],
        "episodes": [
            {
                "id": "ep1",
                "projectId": "p1",
                "seasonId": "sea1",
                "title": "Pilot",
                "order": 0,
            },
            {
                "id": "ep2",
                "projectId": "p1",
                "seasonId": "sea2",
                "title": "Finale",
                "order": 1,
            },
        ],
        "scenes": [
            {
                "id": "a",
                "projectId": "p1",
                "title": "Diner",
                "content": "Rain on glass.\n\n@:SAM\nCoffee?\n:@",
                "versions": [],
                "color": "#fff",
                "order": 1,
                "seasonId": "sea1",
                "episodeId": "ep1",
                "loc": "INT",
                "tod": "NIGHT",
            },
            {
                "id": "b",
                "projectId": "p1",
                "title": "Parking Lot",
                "content": "Sam walks out.",
                "order": 0,
                "seasonId": "sea1",
                "episodeId": "ep1",
                "loc": "EXT",
            },
            {
                "id": "c",
                "projectId": "p1",
                "title": "Bridge",
                "content": "The end.",
                "order": 0,
                "seasonId": "sea2",
                "episodeId": "ep2",
            },
        ],
    }


@pytest.fixture
def bundle_file(tmp_path, bundle_data) -> Path:
    """Bundle JSON written to disk."""
    path = tmp_path / "bundle-Night_Shift.json"
    path.write_text(json.dumps(bundle_data), encoding="utf-8")
    return path
