"""Dataset configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field


class DatasetConfig(BaseModel, frozen=True):
    path: Path
    content_key: str = Field(default="content", min_length=1)
    prompt_key: str = Field(default="prompt", min_length=1)
    id_key: str = Field(default="id", min_length=1)
