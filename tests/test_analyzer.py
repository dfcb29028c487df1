import pytest

from src.symptom_triage.analyzer import (
    ADVICE_BY_URGENCY,
    FALLBACK_SPECIALTY,
    NO_MATCH_ADVICE,
    aggregate_urgency,
    analyze_symptoms,
    rank_conditions,
)
from src.symptom_triage.contracts import Condition, Severity, Symptom


def _ids(records):
    return [record.id for record in records]


def test_chest_pain_and_breathlessness_is_emergency():
    result = analyze_symptoms("I have severe chest pain and shortness of breath")
    assert _ids(result.identified_symptoms) == ["chest_pain", "difficulty_breathing"]
    assert result.urgency_level is Severity.EMERGENCY
    assert result.possible_conditions[0].name == "Heart Attack (Myocardial Infarction)"
    assert "Cardiology" in result.recommended_specialties
    assert "Emergency Medicine" in result.recommended_specialties
    assert result.advice == ADVICE_BY_URGENCY[Severity.EMERGENCY]


def test_cold_symptoms_are_low_urgency():
    result = analyze_symptoms("I have a runny nose and sore throat")
    assert _ids(result.identified_symptoms) == ["runny_nose", "sore_throat"]
    assert result.urgency_level is Severity.LOW
    assert [c.name for c in result.possible_conditions] == ["Common Cold"]
    assert result.recommended_specialties == ("Primary Care", "Family Medicine")


def test_unrelated_text_falls_back_to_primary_care():
    result = analyze_symptoms("xyz unrelated gibberish")
    assert result.identified_symptoms == ()
    assert result.possible_conditions == ()
    assert result.urgency_level is Severity.LOW
    assert result.recommended_specialties == (FALLBACK_SPECIALTY,)
    assert result.advice == NO_MATCH_ADVICE
    for example in ("chest pain", "headache", "fever"):
        assert example in result.advice


def test_empty_input_is_a_normal_result():
    result = analyze_symptoms("")
    assert result.identified_symptoms == ()
    assert result.recommended_specialties == ("Primary Care",)


def test_matching_is_case_insensitive_and_in_base_order():
    result = analyze_symptoms("SORE THROAT since yesterday, and now Chest Pain")
    assert _ids(result.identified_symptoms) == ["chest_pain", "sore_throat"]


def test_one_emergency_symptom_dominates_urgency():
    result = analyze_symptoms("I feel tired, I have a headache and chest pain")
    assert _ids(result.identified_symptoms) == ["chest_pain", "fatigue", "mild_headache"]
    assert result.urgency_level is Severity.EMERGENCY
    assert all(result.urgency_level >= s.severity for s in result.identified_symptoms)


def test_advice_follows_urgency_tier():
    assert analyze_symptoms("I have a high fever").urgency_level is Severity.HIGH
    assert analyze_symptoms("I have a high fever").advice == ADVICE_BY_URGENCY[Severity.HIGH]
    medium = analyze_symptoms("my knee pain is bad")
    assert medium.urgency_level is Severity.MEDIUM
    assert medium.advice == ADVICE_BY_URGENCY[Severity.MEDIUM]
    assert [c.id for c in medium.possible_conditions] == ["arthritis"]
    assert "emergency" in ADVICE_BY_URGENCY[Severity.EMERGENCY].lower()
    assert "urgent care" in ADVICE_BY_URGENCY[Severity.HIGH].lower()
    assert "appointment" in ADVICE_BY_URGENCY[Severity.MEDIUM].lower()
    assert "persist or worsen" in ADVICE_BY_URGENCY[Severity.LOW].lower()


def test_aggregate_urgency_defaults_to_low():
    assert aggregate_urgency([]) is Severity.LOW


def test_specialties_are_deduplicated_in_first_seen_order():
    # Migraine and Common Cold both recommend Primary Care.
    result = analyze_symptoms("severe headache and a runny nose")
    assert [c.id for c in result.possible_conditions] == ["migraine", "common_cold"]
    assert result.recommended_specialties == ("Neurology", "Primary Care", "Family Medicine")
    assert len(result.recommended_specialties) == len(set(result.recommended_specialties))


def test_conditions_sorted_by_overlap():
    result = analyze_symptoms("persistent cough, high fever and chest pain")
    assert [c.id for c in result.possible_conditions] == ["pneumonia", "heart_attack"]


def test_equal_overlap_keeps_table_order():
    symptoms = [
        Symptom(id="a", name="A", category="general", severity=Severity.LOW, keywords=("alpha",)),
        Symptom(id="b", name="B", category="general", severity=Severity.MEDIUM, keywords=("beta",)),
    ]
    conditions = [
        Condition(id="first", name="First", description="", symptoms=("a",),
                  urgency_level=Severity.LOW, recommended_specialties=("One",)),
        Condition(id="second", name="Second", description="", symptoms=("b",),
                  urgency_level=Severity.LOW, recommended_specialties=("Two",)),
        Condition(id="both", name="Both", description="", symptoms=("a", "b"),
                  urgency_level=Severity.LOW, recommended_specialties=("One", "Three")),
    ]
    ranked = rank_conditions(symptoms, conditions)
    assert [c.id for c in ranked] == ["both", "first", "second"]

    result = analyze_symptoms("beta then alpha", symptoms=symptoms, conditions=conditions)
    assert [c.id for c in result.possible_conditions] == ["both", "first", "second"]
    assert result.recommended_specialties == ("One", "Three", "Two")
    assert result.urgency_level is Severity.MEDIUM


def test_analysis_is_repeatable():
    text = "chest pain, dizzy and tired"
    assert analyze_symptoms(text) == analyze_symptoms(text)


def test_urgency_compares_equal_to_its_label():
    assert analyze_symptoms("xyz unrelated gibberish").urgency_level == "low"
    assert analyze_symptoms("chest pain").urgency_level == "emergency"
    assert analyze_symptoms("I have a high fever").urgency_level == "high"
    assert analyze_symptoms("my knee pain").urgency_level == "medium"


def test_severity_orders_by_weight_not_alphabet():
    # Alphabetically "emergency" < "high" < "low" < "medium".
    assert Severity.LOW < Severity.MEDIUM < Severity.HIGH < Severity.EMERGENCY
    assert Severity.EMERGENCY > Severity.HIGH
    assert Severity.MEDIUM >= Severity.LOW
    assert Severity.HIGH <= Severity.EMERGENCY
    assert sorted([Severity.EMERGENCY, Severity.LOW, Severity.HIGH, Severity.MEDIUM]) == [
        Severity.LOW,
        Severity.MEDIUM,
        Severity.HIGH,
        Severity.EMERGENCY,
    ]
    assert aggregate_urgency([
        Symptom(id="m", name="M", category="general", severity="medium", keywords=("m",)),
        Symptom(id="e", name="E", category="general", severity="emergency", keywords=("e",)),
        Symptom(id="h", name="H", category="general", severity="high", keywords=("h",)),
    ]) is Severity.EMERGENCY


def test_result_cannot_be_mutated_in_place():
    result = analyze_symptoms("I have a runny nose and sore throat")
    assert isinstance(result.identified_symptoms, tuple)
    assert isinstance(result.possible_conditions, tuple)
    assert isinstance(result.recommended_specialties, tuple)
    with pytest.raises(AttributeError):
        result.recommended_specialties.append("Cardiology")
