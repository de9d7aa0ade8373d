"""Task tree node model for Timeline Model Compute."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelTask(BaseModel):
    """One reconstructed task in the per-thread task tree.

    Tasks live in a single arena (``ModelTimelineModel.tasks``) and reference
    their parent and children by arena index. Children are fully nested in
    the parent's interval and mutually non-overlapping.
    """

    index: int = Field(..., ge=0, description="Position in the task arena")
    span_index: int = Field(..., ge=0, description="Source span in the parsed trace")
    name: str = Field(default="")
    process_id: int = Field(default=0)
    thread_id: int = Field(default=0)
    start_micros: int = Field(...)
    end_micros: int = Field(...)
    depth: int = Field(default=0, ge=0, description="0 for top-level tasks")
    parent_index: int | None = Field(default=None)
    child_indices: tuple[int, ...] = Field(default=())

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def thread_key(self) -> tuple[int, int]:
        return (self.process_id, self.thread_id)

    @property
    def duration_micros(self) -> int:
        return self.end_micros - self.start_micros


__all__ = ["ModelTask"]
