"""ResponseRecord domain value object — one generated response with its prompt and parameters."""

from typing import TypeAlias

from pydantic import BaseModel, Field

ParameterKey: TypeAlias = tuple[float | None, float | None, int | None]


class GenerationParameters(BaseModel, frozen=True):
    """The generation settings a response was produced with; any may be unknown."""

    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    max_tokens: int | None = Field(default=None, ge=1)

    @property
    def key(self) -> ParameterKey:
        return (self.temperature, self.top_p, self.max_tokens)

    def label(self) -> str:
        """Human-readable label such as ``temperature=0.7 top_p=0.9``."""
        parts = [
            f"{name}={value}"
            for name, value in (
                ("temperature", self.temperature),
                ("top_p", self.top_p),
                ("max_tokens", self.max_tokens),
            )
            if value is not None
        ]
        return " ".join(parts) if parts else "default"


class ResponseRecord(BaseModel, frozen=True):
    """Immutable value object representing one response to be scored."""

    record_id: str
    content: str
    prompt: str | None = None
    parameters: GenerationParameters = Field(default_factory=GenerationParameters)
