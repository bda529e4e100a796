"""
Storyboard document schema.

Pydantic models describing a video project (storyboard) as it is stored on
disk and described to external tooling, plus the load/save/validate helpers.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .errors import (
    StoryboardFileNotFoundError,
    StoryboardIOError,
    StoryboardParseError,
    StoryboardValidationError,
)

Genre = Literal["anime", "horror", "scifi", "commercial", "brainrot"]
LayerType = Literal["video", "audio", "text"]

PathLike = Union[str, Path]


class Asset(BaseModel):
    """Media or text payload attached to a layer."""
    url: Optional[str] = Field(None, description="URL to the asset file")
    content: Optional[str] = Field(None, description="Text content (for text layers)")
    generation_prompt: Optional[str] = Field(None, description="Prompt used to generate this asset")
    ip_id: Optional[str] = Field(None, description="Story Protocol IP ID (if registered)")
    sha256_hash: Optional[str] = Field(None, description="SHA-256 hash of the asset")


class Layer(BaseModel):
    """A single timed video, audio or text element."""
    id: str = Field(..., description="Unique identifier")
    layer_type: LayerType = Field(..., description="Type of layer")
    position: int = Field(..., ge=0, description="Position in the layer stack (0 = bottom)")
    start_time: float = Field(..., allow_inf_nan=False, description="Start time in seconds")
    duration: float = Field(..., allow_inf_nan=False, description="Duration in seconds")
    asset: Asset = Field(..., description="Asset associated with this layer")


class StoryboardMetadata(BaseModel):
    """Descriptive metadata for a storyboard."""
    author: Optional[str] = Field(None, description="Author/creator name")
    created_at: Optional[str] = Field(None, description="Creation timestamp (ISO 8601)")
    tags: List[str] = Field(default_factory=list, description="Tags for categorization")
    license: Optional[str] = Field(None, description="License type")
    ip_id: Optional[str] = Field(None, description="Story Protocol IP ID for the entire storyboard")


class Storyboard(BaseModel):
    """The main container for a video project."""
    id: str = Field(..., description="Unique identifier")
    title: str = Field(..., description="Project title")
    description: Optional[str] = Field(None, description="Optional description")
    genre: Genre = Field(..., description="Video genre")
    duration: float = Field(..., allow_inf_nan=False, description="Total duration in seconds")
    aspect_ratio: str = Field(..., description="Aspect ratio (e.g., '16:9', '9:16')")
    layers: List[Layer] = Field(..., description="Ordered list of layers")
    metadata: StoryboardMetadata = Field(
        default_factory=StoryboardMetadata, description="Additional metadata"
    )

    @classmethod
    def from_json(cls, text: str) -> "Storyboard":
        """Parse a storyboard from JSON text and validate it.

        Raises:
            StoryboardParseError: The text is not JSON or does not match the schema.
            StoryboardValidationError: The document breaks a validation rule.
        """
        try:
            storyboard = cls.model_validate_json(text, strict=True)
        except ValidationError as e:
            raise StoryboardParseError(str(e)) from e

        storyboard.validate()
        return storyboard

    @classmethod
    def from_file(cls, path: PathLike) -> "Storyboard":
        """Load a storyboard from a JSON file.

        Any failure to read the file is reported as StoryboardFileNotFoundError,
        whatever the underlying cause.
        """
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoryboardFileNotFoundError(str(path)) from e

        return cls.from_json(content)

    def to_file(self, path: PathLike) -> None:
        """Save the storyboard as pretty-printed JSON, overwriting `path`."""
        content = json.dumps(self.model_dump(mode="json"), ensure_ascii=False, indent=2)
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as e:
            raise StoryboardIOError(str(e)) from e

    def validate(self) -> None:
        """Check the structural rules required before submission.

        Replaces pydantic's deprecated `BaseModel.validate` classmethod, which
        pydantic v2 itself never calls.
        """
        if not self.title:
            raise StoryboardValidationError("Title is required")
        if not self.duration > 0.0:
            raise StoryboardValidationError("Duration must be positive")

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """JSON schema for the storyboard file format."""
        return cls.model_json_schema()
