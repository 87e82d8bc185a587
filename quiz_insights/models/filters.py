"""Filter criteria for narrowing a response collection"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict


class FilterCriteria(BaseModel):
    """
    Optional bounds over a response set. An unset field disables that
    dimension; 0 is a real score bound. Scores are points, not percentages.
    The keyword only applies when question_id is also set.
    """
    model_config = ConfigDict(frozen=True)

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    min_score: Optional[int] = None
    max_score: Optional[int] = None
    question_id: Optional[str] = None
    answer_keyword: Optional[str] = None

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    @property
    def has_score_range(self) -> bool:
        return self.min_score is not None or self.max_score is not None

    @property
    def has_keyword(self) -> bool:
        return bool(self.question_id) and bool(self.answer_keyword)

    @property
    def is_empty(self) -> bool:
        return not (self.has_date_range or self.has_score_range or self.has_keyword)
