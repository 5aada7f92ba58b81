"""Drill Schemas — Pydantic models for the console boundary.

Invariants:
    - DrillResult carries either `result` (scalar drills) or `lines` (countdown), never both
    - to_payload() drops unset fields so JSON output has one shape per drill kind
"""

from pydantic import BaseModel, model_validator

from drills.core.domain_types import DrillName


class DrillResult(BaseModel):
    """Outcome of one drill run."""
    drill: DrillName
    arguments: list[int]
    result: int | None = None
    lines: list[str] | None = None

    @model_validator(mode="after")
    def check_one_output(self) -> "DrillResult":
        if (self.result is None) == (self.lines is None):
            raise ValueError("exactly one of result or lines must be set")
        return self

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def render(self) -> list[str]:
        """Text-mode output lines."""
        if self.lines is not None:
            return list(self.lines)
        return [str(self.result)]
