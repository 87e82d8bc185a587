"""Submitted response model"""
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Response(BaseModel):
    """One submission: question id -> answer (str, or list of str for checkbox)"""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: Optional[str] = Field(None, validation_alias=AliasChoices("id", "_id"))
    form_code: Optional[str] = None
    username: str = ""
    answers: Dict[str, Any] = Field(default_factory=dict)
    submitted_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Mongo ObjectId and integer keys both become strings
        return None if value is None else str(value)

    @field_validator("answers", mode="before")
    @classmethod
    def _coerce_answer_keys(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(key): answer for key, answer in value.items()}
        return value

    @field_validator("submitted_at", mode="before")
    @classmethod
    def _blank_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def answer_for(self, question_id: str) -> Any:
        return self.answers.get(question_id)
