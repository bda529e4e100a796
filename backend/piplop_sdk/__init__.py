"""
Piplop SDK

Library and CLI for registering video content as IP on Story Protocol.
"""

__version__ = "0.1.0"

from .client import PiplopClient
from .config import ClientSettings, resolve_settings
from .errors import (
    InvalidStoryboardError,
    PiplopError,
    StoryboardFileNotFoundError,
    StoryboardIOError,
    StoryboardParseError,
    StoryboardValidationError,
    StoryProtocolError,
    TransportError,
)
from .schema import (
    Asset,
    Genre,
    Layer,
    LayerType,
    Storyboard,
    StoryboardMetadata,
)

__all__ = [
    "PiplopClient",
    "ClientSettings",
    "resolve_settings",
    "PiplopError",
    "InvalidStoryboardError",
    "StoryboardValidationError",
    "StoryboardParseError",
    "StoryboardFileNotFoundError",
    "StoryboardIOError",
    "TransportError",
    "StoryProtocolError",
    "Storyboard",
    "StoryboardMetadata",
    "Layer",
    "LayerType",
    "Asset",
    "Genre",
]
