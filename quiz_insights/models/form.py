"""Form and question models"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Question(BaseModel):
    """A form question; without a correct answer it is ungraded"""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str
    text: str = ""
    type: str = ""  # unknown types are never graded correct
    options: List[str] = Field(default_factory=list)
    correct_answer: Optional[str] = Field(None, alias="correctAnswer")

    @field_validator("id", "correct_answer", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("options", mode="before")
    @classmethod
    def _coerce_options(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(opt) for opt in value]
        return value

    @property
    def is_gradable(self) -> bool:
        return bool(self.correct_answer)


class Form(BaseModel):
    """Ordered question set identified by its share code"""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    code: str = ""
    title: str = ""
    questions: List[Question] = Field(default_factory=list)
    time_limit: Optional[int] = None  # minutes

    @property
    def gradable_questions(self) -> List[Question]:
        return [q for q in self.questions if q.is_gradable]

    @property
    def max_points(self) -> int:
        return len(self.gradable_questions)

    def get_question(self, question_id: str) -> Optional[Question]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None
