"""Question records and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_U32_MAX = 2**32 - 1


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _require_object(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected an object")
    return value


def _require_str(data: dict, name: str, where: str) -> str:
    if name not in data:
        raise ValueError(f"{where}: missing field `{name}`")
    value = data[name]
    if not isinstance(value, str):
        raise ValueError(f"{where}: field `{name}` must be a string")
    return value


def _optional_u32(data: dict, name: str, where: str) -> int:
    if name not in data:
        return 0
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"{where}: field `{name}` must be an unsigned 32-bit integer")
    return value


def _require_list(data: dict, name: str, where: str) -> list:
    if name not in data:
        raise ValueError(f"{where}: missing field `{name}`")
    value = data[name]
    if not isinstance(value, list):
        raise ValueError(f"{where}: field `{name}` must be an array")
    return value


def _select_answer(value: Any, where: str) -> dict[str, str]:
    mapping = _require_object(value, where)
    if not all(isinstance(item, str) for item in mapping.values()):
        raise ValueError(f"{where}: answer choices must map strings to strings")
    return dict(mapping)


@dataclass
class SubQuestion:
    """One question within a reading passage."""

    sentence: str
    select_answer: list[dict[str, str]]
    answer: str
    id: int = 0
    hint_id: int = 0
    answer_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "hint_id": self.hint_id,
            "answer_id": self.answer_id,
            "sentence": self.sentence,
            "select_answer": [dict(choice) for choice in self.select_answer],
            "answer": self.answer,
        }


@dataclass
class Question:
    """A passage with its sub-questions."""

    level_name: str
    category_name: str
    chapter: str
    sentence: str
    prerequisites: str
    sub_questions: list[SubQuestion] = field(default_factory=list)
    id: int = 0
    level_id: int = 0
    category_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "level_id": self.level_id,
            "level_name": self.level_name,
            "category_id": self.category_id,
            "category_name": self.category_name,
            "chapter": self.chapter,
            "sentence": self.sentence,
            "prerequisites": self.prerequisites,
            "sub_questions": [sub.to_dict() for sub in self.sub_questions],
        }


def _sub_question_from(value: Any, where: str) -> SubQuestion:
    data = _require_object(value, where)
    choices = _require_list(data, "select_answer", where)
    return SubQuestion(
        id=_optional_u32(data, "id", where),
        hint_id=_optional_u32(data, "hint_id", where),
        answer_id=_optional_u32(data, "answer_id", where),
        sentence=_require_str(data, "sentence", where),
        select_answer=[
            _select_answer(choice, f"{where}.select_answer[{pos}]")
            for pos, choice in enumerate(choices)
        ],
        answer=_require_str(data, "answer", where),
    )


def _question_from(value: Any, where: str) -> Question:
    data = _require_object(value, where)
    subs = _require_list(data, "sub_questions", where)
    return Question(
        id=_optional_u32(data, "id", where),
        level_id=_optional_u32(data, "level_id", where),
        level_name=_require_str(data, "level_name", where),
        category_id=_optional_u32(data, "category_id", where),
        category_name=_require_str(data, "category_name", where),
        chapter=_require_str(data, "chapter", where),
        sentence=_require_str(data, "sentence", where),
        prerequisites=_require_str(data, "prerequisites", where),
        sub_questions=[
            _sub_question_from(sub, f"{where}.sub_questions[{pos}]")
            for pos, sub in enumerate(subs)
        ],
    )


def parse_questions(text: str) -> list[Question]:
    """Parse a JSON array of questions; raises ValueError on bad input."""
    data = json.loads(text, parse_constant=_reject_constant)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of questions")
    return [_question_from(item, f"[{pos}]") for pos, item in enumerate(data)]


def dump_questions(questions: list[Question]) -> str:
    """Serialise questions as pretty-printed JSON."""
    return json.dumps(
        [question.to_dict() for question in questions], indent=2, ensure_ascii=False
    )