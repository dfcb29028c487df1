"""Conversational wrapper that turns analyses into chat replies."""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Literal, Optional

from pydantic import BaseModel, Field

from .analyzer import analyze_symptoms
from .config import TriageSettings
from .contracts import AnalysisResult
from .questions import generate_follow_up_questions

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm here to help you understand your symptoms and guide you to the right "
    "medical care. Please describe what you're experiencing, and I'll provide information "
    "based on medical knowledge. \n\n⚠️ **Important**: This is for informational purposes "
    "only and is not a substitute for professional medical advice."
)


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Literal["user", "bot"]
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    analysis: Optional[AnalysisResult] = None


def compose_reply(analysis: AnalysisResult, max_conditions: int = 3) -> str:
    """Render an analysis as the Markdown reply shown in the chat."""

    if not analysis.identified_symptoms:
        return analysis.advice

    reply = "I've identified the following from your description:\n\n"
    reply += "**Symptoms detected:**\n"
    reply += "".join(f"• {symptom.name}\n" for symptom in analysis.identified_symptoms)
    reply += f"\n**{analysis.advice}**\n\n"

    if analysis.possible_conditions:
        reply += "**Possible conditions to consider:**\n"
        reply += "".join(
            f"• **{condition.name}**: {condition.description}\n"
            for condition in analysis.possible_conditions[:max_conditions]
        )
        reply += "\n"

    if analysis.recommended_specialties:
        reply += "**Recommended specialists:**\n"
        reply += "".join(f"• {specialty}\n" for specialty in analysis.recommended_specialties)
        reply += "\n"

    questions = generate_follow_up_questions(analysis.identified_symptoms)
    if questions:
        reply += "**Questions to help me understand better:**\n"
        reply += "".join(f"{index}. {question}\n" for index, question in enumerate(questions, 1))
    return reply


class ChatSession:
    def __init__(
        self,
        settings: Optional[TriageSettings] = None,
        on_specialty_recommendation: Optional[Callable[[List[str]], None]] = None,
    ):
        self.settings = settings or TriageSettings()
        self.on_specialty_recommendation = on_specialty_recommendation
        self.messages: List[ChatMessage] = [ChatMessage(role="bot", content=GREETING)]
        self.latest_specialties: List[str] = []

    def send(self, text: str) -> Optional[ChatMessage]:
        """Record a user message and return the bot reply, or ``None`` for blank input."""

        if not text.strip():
            return None

        self.messages.append(ChatMessage(role="user", content=text))
        if self.settings.reply_delay:
            time.sleep(self.settings.reply_delay)

        analysis = analyze_symptoms(text)
        matched = bool(analysis.identified_symptoms)
        reply = ChatMessage(
            role="bot",
            content=compose_reply(analysis, self.settings.max_conditions),
            analysis=analysis if matched else None,
        )
        self.messages.append(reply)

        if matched and analysis.recommended_specialties:
            self.latest_specialties = list(analysis.recommended_specialties)
            if self.on_specialty_recommendation is not None:
                self.on_specialty_recommendation(self.latest_specialties)

        logger.info(
            "Chat turn %d: urgency=%s, %d symptom(s) identified",
            len(self.messages) // 2,
            analysis.urgency_level.value,
            len(analysis.identified_symptoms),
        )
        return reply
