from pathlib import Path

import pytest

from piplop_sdk import Asset, Layer, Storyboard, StoryboardMetadata

SAMPLE_STORYBOARD = Path(__file__).resolve().parent.parent / "backend" / "data" / "sample_storyboard.json"


def make_storyboard(**overrides) -> Storyboard:
    fields = dict(
        id="sb-1",
        title="Night Shift",
        description="A janitor finds a door that should not exist.",
        genre="horror",
        duration=15.0,
        aspect_ratio="16:9",
        layers=[
            Layer(
                id="l0",
                layer_type="video",
                position=0,
                start_time=0.0,
                duration=15.0,
                asset=Asset(url="https://cdn.example.com/hall.mp4", sha256_hash="abc123"),
            ),
            Layer(
                id="l1",
                layer_type="text",
                position=1,
                start_time=1.0,
                duration=3.0,
                asset=Asset(content="DON'T OPEN IT"),
            ),
        ],
        metadata=StoryboardMetadata(author="R. Vale", tags=["horror", "short"]),
    )
    fields.update(overrides)
    return Storyboard(**fields)


@pytest.fixture
def storyboard():
    return make_storyboard()


@pytest.fixture
def sample_path():
    return SAMPLE_STORYBOARD


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PIPLOP_API_URL", raising=False)
    monkeypatch.delenv("PIPLOP_API_KEY", raising=False)
