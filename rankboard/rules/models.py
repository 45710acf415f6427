from pydantic import BaseModel, Field, field_validator, model_validator

from rankboard.components.ranking import DEFAULT_ALPHABET_CHARS, Alphabet, AlphabetError


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class RankingRules(BaseModel):
    alphabet: str = DEFAULT_ALPHABET_CHARS
    max_rank_length_warning: int = Field(64, gt=0)

    @field_validator("alphabet")
    @classmethod
    def _alphabet_usable(cls, v: str) -> str:
        try:
            Alphabet(v)
        except AlphabetError as e:
            raise ValueError(str(e)) from e
        return v

    # RankingRulesPort
    def get_alphabet(self) -> str:
        return self.alphabet

    def get_max_rank_length_warning(self) -> int:
        return self.max_rank_length_warning

class OrderingRules(BaseModel):
    lanes: list[str] = Field(default_factory=lambda: ["todo", "doing", "blocked", "done"])
    default_lane: str = "todo"
    default_position: str = "tail"

    @field_validator("lanes")
    @classmethod
    def _lanes_unique(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one lane is required")
        if len(set(v)) != len(v):
            raise ValueError("lane names must be unique")
        if any(not lane.strip() for lane in v):
            raise ValueError("lane names must not be blank")
        return v

    @field_validator("default_position")
    @classmethod
    def _position_known(cls, v: str) -> str:
        if v not in ("head", "tail"):
            raise ValueError("default_position must be 'head' or 'tail'")
        return v

    @model_validator(mode="after")
    def _default_lane_configured(self) -> "OrderingRules":
        if self.default_lane not in self.lanes:
            raise ValueError(f"default_lane '{self.default_lane}' is not one of the lanes")
        return self

class StorageRules(BaseModel):
    db_filename: str = "rankboard.db"

class Rules(BaseModel):
    project: ProjectRules
    ranking: RankingRules = Field(default_factory=RankingRules)
    ordering: OrderingRules = Field(default_factory=OrderingRules)
    storage: StorageRules = Field(default_factory=StorageRules)
