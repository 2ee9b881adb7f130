"""
Assessment question payloads.

Stored payloads come in two shapes: a flat ordered list of questions, or a
mapping of category -> list ({"work_ethics": [...], "technical": [...]}).
Both are parsed into a QuestionSet, which can present one ordered sequence
while handing back the original shape for storage.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Union

logger = logging.getLogger(__name__)

WORK_ETHICS = "work_ethics"
TECHNICAL = "technical"
CATEGORY_ORDER = (WORK_ETHICS, TECHNICAL)


def _mc(question: str, options: list[str]) -> dict[str, Any]:
    return {"question": question, "type": "multiple_choice", "options": options}


DEFAULT_ASSESSMENT_QUESTIONS: dict[str, list[dict[str, Any]]] = {
    WORK_ETHICS: [
        _mc("How do you handle tight deadlines?", ["Plan ahead", "Work overtime", "Ask for help", "Prioritize tasks"]),
        _mc("What motivates you at work?", ["Recognition", "Growth", "Team success", "Challenges"]),
    ],
    TECHNICAL: [
        _mc("Your experience with required tech?", ["Expert level", "Intermediate", "Beginner", "No experience"]),
        _mc("Your problem-solving approach?", ["Research first", "Trial and error", "Ask colleagues", "Break into steps"]),
    ],
}

# Larger bank returned by match analysis as suggested questions.
SUGGESTED_ASSESSMENT_QUESTIONS: dict[str, list[dict[str, Any]]] = {
    WORK_ETHICS: DEFAULT_ASSESSMENT_QUESTIONS[WORK_ETHICS] + [
        _mc("How do you handle conflicts?", ["Avoid them", "Discuss openly", "Seek mediation", "Find compromise"]),
        _mc("How do you stay organized?", ["To-do lists", "Digital tools", "Calendars", "Memory"]),
        _mc("Your approach to learning?", ["Online courses", "Mentorship", "Practice", "Reading"]),
        _mc("How do you handle feedback?", ["Accept gracefully", "Ask questions", "Implement changes", "Reflect privately"]),
        _mc("Your work style preference?", ["Independent", "Collaborative", "Structured", "Flexible"]),
        _mc("How do you prioritize tasks?", ["By deadline", "By importance", "By difficulty", "By preference"]),
        _mc("How do you handle stress?", ["Take breaks", "Exercise", "Talk to others", "Stay focused"]),
        _mc("What drives your career?", ["Growth", "Stability", "Impact", "Compensation"]),
    ],
    TECHNICAL: DEFAULT_ASSESSMENT_QUESTIONS[TECHNICAL] + [
        _mc("Preferred development method?", ["Agile", "Waterfall", "Kanban", "Hybrid"]),
        _mc("How do you ensure quality?", ["Testing", "Code reviews", "Documentation", "Standards"]),
        _mc("Version control experience?", ["Git expert", "Git intermediate", "Other tools", "Limited"]),
        _mc("How do you stay updated?", ["Tech blogs", "Conferences", "Courses", "Experimentation"]),
        _mc("Your debugging approach?", ["Systematic", "Intuitive", "Tool-based", "Collaborative"]),
        _mc("Handling technical challenges?", ["Research", "Experiment", "Seek help", "Break down"]),
        _mc("Your testing philosophy?", ["Test everything", "Critical paths", "User scenarios", "Automated first"]),
        _mc("How do you document work?", ["Detailed docs", "Code comments", "README files", "Video walkthroughs"]),
    ],
}


@dataclass(frozen=True)
class FlatQuestions:
    items: list[Any] = field(default_factory=list)

    def normalize(self) -> list[Any]:
        return list(self.items)

    def to_payload(self) -> list[Any]:
        return list(self.items)


@dataclass(frozen=True)
class BucketedQuestions:
    buckets: dict[str, list[Any]] = field(default_factory=dict)

    def normalize(self) -> list[Any]:
        """work_ethics first, then technical, then any other category in insertion order."""
        ordered = [c for c in CATEGORY_ORDER if c in self.buckets]
        ordered += [c for c in self.buckets if c not in CATEGORY_ORDER]
        out: list[Any] = []
        for category in ordered:
            out.extend(self.buckets[category])
        return out

    def to_payload(self) -> dict[str, list[Any]]:
        return {k: list(v) for k, v in self.buckets.items()}


QuestionSet = Union[FlatQuestions, BucketedQuestions]


def parse_question_set(payload: Any) -> QuestionSet:
    """Build a QuestionSet from a stored payload (list, mapping, or JSON string of either)."""
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            logger.warning("Question payload is not valid JSON; treating as empty")
            return FlatQuestions()
    if isinstance(payload, (list, tuple)):
        return FlatQuestions(list(payload))
    if isinstance(payload, dict):
        buckets = {str(k): list(v) for k, v in payload.items() if isinstance(v, (list, tuple))}
        return BucketedQuestions(buckets)
    return FlatQuestions()


def normalize_questions(payload: Any) -> list[Any]:
    return parse_question_set(payload).normalize()


def question_key(index: int) -> str:
    return f"question_{index}"


def question_keys(payload: Any) -> list[str]:
    return [question_key(i) for i in range(len(normalize_questions(payload)))]
