# party_core/models.py
from __future__ import annotations
from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from .constants import RANK_SCORE

Rank = Literal["S", "A", "B", "C", "D"]


class RosterRow(BaseModel):
    """Unvalidated roster line as handed over by an importer."""
    id: int
    name: str = ""
    rank: str = ""


class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    rank: Rank
    score: int = 0

    @model_validator(mode="before")
    @classmethod
    def _derive_score(cls, data):
        if isinstance(data, dict) and data.get("rank") in RANK_SCORE:
            expected = RANK_SCORE[data["rank"]]
            given = data.get("score")
            if given not in (None, 0) and given != expected:
                raise ValueError(f"score {given} does not match rank {data['rank']}")
            data = {**data, "score": expected}
        return data


class Team(BaseModel):
    """Members in order, position 0 leads. Teams are rebuilt, never edited."""
    model_config = ConfigDict(frozen=True)

    members: List[Player] = Field(default_factory=list)

    @computed_field
    @property
    def sum(self) -> int:
        return sum(p.score for p in self.members)

    @property
    def leader(self) -> Optional[Player]:
        return self.members[0] if self.members else None

    @property
    def ids(self) -> List[int]:
        return [p.id for p in self.members]

    @property
    def key(self) -> Tuple[int, ...]:
        return tuple(sorted(self.ids))


class Metrics(BaseModel):
    balance_penalty: float = 0.0
    diversity_penalty: float = 0.0
    leader_penalty: float = 0.0
    hard_penalty: float = 0.0
    total_score: float = 0.0
    max_sum: int = 0
    min_sum: int = 0
    average_sum: float = 0.0
    variance: float = 0.0


class RoundResult(BaseModel):
    round: int = Field(ge=1)
    teams: List[Team]
    matchups: List[Tuple[Team, Team]] = Field(default_factory=list)
    metrics: Metrics
    rendered_text: str = ""


class Summary(BaseModel):
    pair_duplicate_total: int = 0
    max_pair_count: int = 0
    duplicate_teams: int = 0
    leader_counts: Dict[str, int] = Field(default_factory=dict)
    max_leader_count: int = 0
    min_leader_count: int = 0
    leader_warning: bool = False


class GenerationOptions(BaseModel):
    candidate_attempts: int = 20
    swap_iterations: int = 200
    balance_weight: float = 1.0
    diversity_weight: float = 1.0
    leader_weight: float = 1.0
    hard_penalty: float = 10000.0
    random_seed: Optional[int] = None
    max_workers: int = 1

    @field_validator("candidate_attempts", "swap_iterations")
    @classmethod
    def _non_negative_count(cls, v):
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("balance_weight", "diversity_weight", "leader_weight", "hard_penalty")
    @classmethod
    def _non_negative_weight(cls, v):
        if v < 0:
            raise ValueError("weights must be non-negative numbers")
        return v

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, v):
        if v < 1:
            raise ValueError("max_workers must be >= 1")
        return v


class ValidationResult(BaseModel):
    ok: bool = True
    errors: List[str] = Field(default_factory=list)


class GenerationResult(BaseModel):
    rounds: List[RoundResult] = Field(default_factory=list)
    summary: Optional[Summary] = None
    errors: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
