from typing import Optional

from pydantic import BaseModel, field_validator


class BenchmarkConfig(BaseModel):
    length: int
    num_rotations: int
    max_step: int
    num_lookups: int
    seed: Optional[int] = None

    @field_validator('length', 'num_rotations', 'max_step')
    @classmethod
    def is_positive(cls, v):
        assert v >= 1
        return v

    @field_validator('num_lookups')
    @classmethod
    def is_non_negative(cls, v):
        assert v >= 0
        return v
