"""Domain configuration: the combinatorial space a generation run walks."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .kinds import Kind, sort_kinds


class DomainConfig(BaseModel):
    """Arity range, candidate kinds and throwing switch for one run.

    Range checks are left to ``validate_domain`` so that every problem is
    reported at once instead of failing on the first bad field.
    """

    arity_range: tuple[int, int] = (0, 3)
    parameter_kinds: list[Kind] = Field(default_factory=list)
    return_kinds: list[Kind] = Field(default_factory=list)
    throwing_enabled: bool = True
    extend_standard: bool = Field(
        default=False,
        description="Also generate extended copies of standard-library interfaces",
    )

    @field_validator("parameter_kinds", "return_kinds", mode="before")
    @classmethod
    def normalize_kinds(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple, set, frozenset)):
            return sort_kinds(v)
        return v

    @property
    def arities(self) -> range:
        low, high = self.arity_range
        return range(low, high + 1)

    @property
    def throwing_options(self) -> tuple[bool, ...]:
        return (False, True) if self.throwing_enabled else (False,)

    def seed_count(self) -> int:
        """Number of cells in the domain."""
        per_arity = sum(len(self.parameter_kinds) ** arity for arity in self.arities)
        return per_arity * len(self.return_kinds) * len(self.throwing_options)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "DomainConfig":
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def to_yaml(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, sort_keys=False)
