"""Execution configuration model."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True):
    max_concurrent: int = Field(default=4, ge=1)
