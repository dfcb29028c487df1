"""Static symptom and condition reference tables.

Both tables are built once at import time and never mutated. Adding a symptom
or a condition is a data-only change: the analyzer walks whatever is here.
"""

import logging
from typing import Dict, List, Sequence, Tuple, TypeVar, Union

from .contracts import Condition, Severity, Symptom

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Union[Symptom, Condition])


SYMPTOMS: Tuple[Symptom, ...] = (
    # Emergency
    Symptom(
        id="chest_pain",
        name="Chest Pain",
        category="cardiovascular",
        severity=Severity.EMERGENCY,
        keywords=("chest pain", "chest pressure", "heart pain", "cardiac pain"),
    ),
    Symptom(
        id="difficulty_breathing",
        name="Difficulty Breathing",
        category="respiratory",
        severity=Severity.EMERGENCY,
        keywords=("shortness of breath", "breathing problems", "can't breathe", "breathless"),
    ),
    Symptom(
        id="severe_headache",
        name="Severe Headache",
        category="neurological",
        severity=Severity.HIGH,
        keywords=("severe headache", "worst headache", "thunderclap headache"),
    ),
    # High
    Symptom(
        id="high_fever",
        name="High Fever",
        category="general",
        severity=Severity.HIGH,
        keywords=("high fever", "fever over 103", "very hot"),
    ),
    Symptom(
        id="severe_abdominal_pain",
        name="Severe Abdominal Pain",
        category="gastrointestinal",
        severity=Severity.HIGH,
        keywords=("severe stomach pain", "intense abdominal pain", "stabbing stomach pain"),
    ),
    Symptom(
        id="vomiting_blood",
        name="Vomiting Blood",
        category="gastrointestinal",
        severity=Severity.EMERGENCY,
        keywords=("vomiting blood", "blood in vomit", "throwing up blood"),
    ),
    # Medium
    Symptom(
        id="persistent_cough",
        name="Persistent Cough",
        category="respiratory",
        severity=Severity.MEDIUM,
        keywords=("persistent cough", "chronic cough", "cough for weeks"),
    ),
    Symptom(
        id="joint_pain",
        name="Joint Pain",
        category="musculoskeletal",
        severity=Severity.MEDIUM,
        keywords=("joint pain", "arthritis pain", "knee pain", "shoulder pain"),
    ),
    Symptom(
        id="fatigue",
        name="Fatigue",
        category="general",
        severity=Severity.MEDIUM,
        keywords=("fatigue", "tired", "exhausted", "no energy"),
    ),
    Symptom(
        id="dizziness",
        name="Dizziness",
        category="neurological",
        severity=Severity.MEDIUM,
        keywords=("dizziness", "dizzy", "lightheaded", "vertigo"),
    ),
    # Low
    Symptom(
        id="mild_headache",
        name="Mild Headache",
        category="neurological",
        severity=Severity.LOW,
        keywords=("headache", "head pain", "mild headache"),
    ),
    Symptom(
        id="runny_nose",
        name="Runny Nose",
        category="respiratory",
        severity=Severity.LOW,
        keywords=("runny nose", "nasal congestion", "stuffy nose"),
    ),
    Symptom(
        id="mild_fever",
        name="Mild Fever",
        category="general",
        severity=Severity.LOW,
        keywords=("mild fever", "low grade fever", "slight fever"),
    ),
    Symptom(
        id="sore_throat",
        name="Sore Throat",
        category="respiratory",
        severity=Severity.LOW,
        keywords=("sore throat", "throat pain", "scratchy throat"),
    ),
)


CONDITIONS: Tuple[Condition, ...] = (
    Condition(
        id="heart_attack",
        name="Heart Attack (Myocardial Infarction)",
        description="A serious medical emergency where the blood supply to part of the heart is blocked.",
        symptoms=("chest_pain", "difficulty_breathing", "nausea", "sweating"),
        urgency_level=Severity.EMERGENCY,
        recommended_specialties=("Cardiology", "Emergency Medicine"),
        common_causes=("Blocked coronary arteries", "Blood clots", "Atherosclerosis"),
        when_to_seek_care=(
            "Call emergency services (112) immediately if experiencing chest pain "
            "with shortness of breath, nausea, or sweating."
        ),
    ),
    Condition(
        id="pneumonia",
        name="Pneumonia",
        description="An infection that inflames air sacs in one or both lungs.",
        symptoms=("persistent_cough", "high_fever", "difficulty_breathing", "chest_pain"),
        urgency_level=Severity.HIGH,
        recommended_specialties=("Pulmonology", "Internal Medicine"),
        common_causes=("Bacterial infection", "Viral infection", "Fungal infection"),
        when_to_seek_care="Seek medical care if experiencing persistent cough with fever and breathing difficulties.",
    ),
    Condition(
        id="migraine",
        name="Migraine",
        description="A type of headache characterized by severe throbbing pain, usually on one side of the head.",
        symptoms=("severe_headache", "nausea", "sensitivity_to_light"),
        urgency_level=Severity.MEDIUM,
        recommended_specialties=("Neurology", "Primary Care"),
        common_causes=("Genetic factors", "Hormonal changes", "Stress", "Certain foods"),
        when_to_seek_care="See a doctor if headaches are severe, frequent, or interfere with daily activities.",
    ),
    Condition(
        id="common_cold",
        name="Common Cold",
        description="A viral infection of the upper respiratory tract.",
        symptoms=("runny_nose", "sore_throat", "mild_fever", "fatigue"),
        urgency_level=Severity.LOW,
        recommended_specialties=("Primary Care", "Family Medicine"),
        common_causes=("Viral infection", "Rhinovirus", "Coronavirus"),
        when_to_seek_care="Usually resolves on its own. See a doctor if symptoms worsen or persist beyond 10 days.",
    ),
    Condition(
        id="arthritis",
        name="Arthritis",
        description="Inflammation of one or more joints causing pain and stiffness.",
        symptoms=("joint_pain", "stiffness", "swelling"),
        urgency_level=Severity.MEDIUM,
        recommended_specialties=("Rheumatology", "Orthopedics"),
        common_causes=("Age-related wear", "Autoimmune conditions", "Previous injuries"),
        when_to_seek_care="See a doctor if joint pain persists, limits movement, or affects daily activities.",
    ),
)


def _index_by_id(records: Sequence[RecordT], kind: str) -> Dict[str, RecordT]:
    index: Dict[str, RecordT] = {}
    for record in records:
        if record.id in index:
            raise ValueError(f"Duplicate {kind} id: {record.id}")
        index[record.id] = record
    return index


def dangling_symptom_refs(
    symptoms: Sequence[Symptom] = SYMPTOMS,
    conditions: Sequence[Condition] = CONDITIONS,
) -> List[Tuple[str, str]]:
    """Return ``(condition_id, symptom_id)`` pairs naming symptoms the base does not define.

    Such references are harmless (they just never match) but usually mean the
    symptom table is missing an entry.
    """

    known = {symptom.id for symptom in symptoms}
    return [
        (condition.id, symptom_id)
        for condition in conditions
        for symptom_id in condition.symptoms
        if symptom_id not in known
    ]


_SYMPTOMS_BY_ID: Dict[str, Symptom] = _index_by_id(SYMPTOMS, "symptom")
_CONDITIONS_BY_ID: Dict[str, Condition] = _index_by_id(CONDITIONS, "condition")

for _condition_id, _symptom_id in dangling_symptom_refs():
    logger.debug("Condition %s references undefined symptom %s", _condition_id, _symptom_id)


def get_symptom(symptom_id: str) -> Symptom:
    try:
        return _SYMPTOMS_BY_ID[symptom_id]
    except KeyError:
        raise KeyError(f"Unknown symptom: {symptom_id}") from None


def get_condition(condition_id: str) -> Condition:
    try:
        return _CONDITIONS_BY_ID[condition_id]
    except KeyError:
        raise KeyError(f"Unknown condition: {condition_id}") from None
