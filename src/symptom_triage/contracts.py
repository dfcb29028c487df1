from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Severity / urgency tier, ordered by weight rather than alphabetically."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def weight(self) -> int:
        return _SEVERITY_WEIGHTS[self]

    @classmethod
    def from_weight(cls, weight: int) -> "Severity":
        for severity, value in _SEVERITY_WEIGHTS.items():
            if value == weight:
                return severity
        raise ValueError(f"Unknown severity weight: {weight}")

    # str already defines these, so each one is overridden to compare weights.
    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.weight >= other.weight


_SEVERITY_WEIGHTS = {
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
    Severity.EMERGENCY: 4,
}


class _Record(BaseModel):
    # camelCase aliases keep the JSON shape the web client already reads.
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Symptom(_Record):
    id: str
    name: str
    category: str  # "cardiovascular" | "respiratory" | "neurological" | ...
    severity: Severity
    keywords: Tuple[str, ...]

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("a symptom needs at least one keyword")
        return tuple(keyword.lower() for keyword in value)


class Condition(_Record):
    id: str
    name: str
    description: str
    symptoms: Tuple[str, ...]
    urgency_level: Severity  # informational; analysis urgency comes from symptoms
    recommended_specialties: Tuple[str, ...]
    common_causes: Tuple[str, ...] = ()
    when_to_seek_care: str = ""


class AnalysisResult(_Record):
    identified_symptoms: Tuple[Symptom, ...]
    possible_conditions: Tuple[Condition, ...]
    urgency_level: Severity
    recommended_specialties: Tuple[str, ...]
    advice: str


class SpecialtyReferral(_Record):
    """A recommended specialty paired with its provider-search link."""

    name: str
    search_path: str
    listed: bool
    description: str = ""
