from typing import Dict, Iterable, List, Tuple

from .contracts import Symptom

MAX_FOLLOW_UP_QUESTIONS = 3

# Checked in this order; earlier categories win the question budget.
CATEGORY_QUESTIONS: Dict[str, Tuple[str, ...]] = {
    "cardiovascular": (
        "How long have you been experiencing these symptoms?",
        "Does the pain radiate to your arm, jaw, or back?",
        "Do you have any history of heart problems?",
    ),
    "respiratory": (
        "Are you experiencing any shortness of breath?",
        "Do you have a fever along with these symptoms?",
        "Are you coughing up any blood or unusual sputum?",
    ),
    "neurological": (
        "On a scale of 1-10, how severe is the pain?",
        "Is this the worst headache you've ever had?",
        "Are you experiencing any vision changes or nausea?",
    ),
    "gastrointestinal": (
        "When did the pain start and where exactly is it located?",
        "Have you had any nausea or vomiting?",
        "Have you noticed any changes in your bowel movements?",
    ),
}

GENERIC_QUESTIONS: Tuple[str, ...] = (
    "How long have you been experiencing these symptoms?",
    "Have the symptoms gotten better or worse over time?",
    "Are you taking any medications currently?",
)


def generate_follow_up_questions(identified_symptoms: Iterable[Symptom]) -> List[str]:
    categories = {symptom.category for symptom in identified_symptoms}
    questions: List[str] = []
    for category, category_questions in CATEGORY_QUESTIONS.items():
        if category in categories:
            questions.extend(category_questions)
    if not questions:
        questions.extend(GENERIC_QUESTIONS)
    return questions[:MAX_FOLLOW_UP_QUESTIONS]
