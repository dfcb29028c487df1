"""Rule-based symptom analysis over the static knowledge base."""

import logging
from typing import Dict, Iterable, List, Sequence

from .contracts import AnalysisResult, Condition, Severity, Symptom
from .knowledge import CONDITIONS, SYMPTOMS

logger = logging.getLogger(__name__)

FALLBACK_SPECIALTY = "Primary Care"

NO_MATCH_ADVICE = (
    "I couldn't identify specific symptoms from your description. Please describe your "
    "symptoms more specifically, such as 'chest pain', 'headache', or 'fever'."
)

ADVICE_BY_URGENCY: Dict[Severity, str] = {
    Severity.EMERGENCY: (
        "🚨 This could be a medical emergency. Call emergency services (112) or go to the "
        "nearest emergency department immediately."
    ),
    Severity.HIGH: (
        "⚠️ These symptoms require prompt medical attention. Contact your doctor or visit "
        "urgent care today."
    ),
    Severity.MEDIUM: (
        "📋 These symptoms should be evaluated by a healthcare provider. Schedule an "
        "appointment with your doctor."
    ),
    Severity.LOW: (
        "💡 These symptoms are typically mild but monitor them. Consider seeing a doctor if "
        "they persist or worsen."
    ),
}


def match_symptoms(text: str, symptoms: Sequence[Symptom] = SYMPTOMS) -> List[Symptom]:
    """Symptoms with at least one keyword contained in ``text``, in knowledge-base order."""

    lowered = text.lower()
    return [
        symptom
        for symptom in symptoms
        if any(keyword in lowered for keyword in symptom.keywords)
    ]


def aggregate_urgency(symptoms: Iterable[Symptom]) -> Severity:
    # Plain maximum: one emergency symptom outranks any number of mild ones.
    return max((symptom.severity for symptom in symptoms), default=Severity.LOW)


def rank_conditions(
    identified: Sequence[Symptom],
    conditions: Sequence[Condition] = CONDITIONS,
) -> List[Condition]:
    """Conditions sharing a symptom with ``identified``, most overlap first.

    ``sorted`` is stable, so equal overlaps keep knowledge-base order.
    """

    identified_ids = {symptom.id for symptom in identified}
    scored = []
    for condition in conditions:
        overlap = sum(1 for symptom_id in condition.symptoms if symptom_id in identified_ids)
        if overlap:
            scored.append((condition, overlap))
    scored = sorted(scored, key=lambda item: item[1], reverse=True)
    return [condition for condition, _ in scored]


def collect_specialties(conditions: Iterable[Condition]) -> List[str]:
    specialties = [
        specialty
        for condition in conditions
        for specialty in condition.recommended_specialties
    ]
    # Preserve order but drop duplicates.
    return list(dict.fromkeys(specialties))


def advice_for(urgency: Severity) -> str:
    return ADVICE_BY_URGENCY[urgency]


def analyze_symptoms(
    user_input: str,
    symptoms: Sequence[Symptom] = SYMPTOMS,
    conditions: Sequence[Condition] = CONDITIONS,
) -> AnalysisResult:
    identified = match_symptoms(user_input, symptoms)
    if not identified:
        logger.debug("No symptoms matched in %d characters of input", len(user_input))
        return AnalysisResult(
            identified_symptoms=(),
            possible_conditions=(),
            urgency_level=Severity.LOW,
            recommended_specialties=(FALLBACK_SPECIALTY,),
            advice=NO_MATCH_ADVICE,
        )

    urgency = aggregate_urgency(identified)
    possible = rank_conditions(identified, conditions)
    logger.debug(
        "Matched symptoms %s -> urgency=%s, conditions=%s",
        [symptom.id for symptom in identified],
        urgency.value,
        [condition.id for condition in possible],
    )
    return AnalysisResult(
        identified_symptoms=identified,
        possible_conditions=possible,
        urgency_level=urgency,
        recommended_specialties=collect_specialties(possible),
        advice=advice_for(urgency),
    )
