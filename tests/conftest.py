from datetime import datetime

import pytest

from quiz_insights.models import Form, Question, Response


@pytest.fixture
def quiz_form():
    return Form(
        code="ABC123",
        title="General Knowledge",
        questions=[
            Question(id="q1", text="How many legs does a spider have?", type="short_answer", correct_answer="8"),
            Question(id="q2", text="Capital of France?", type="multiple_choice",
                     options=["Paris", "Rome", "Berlin"], correct_answer="Paris"),
            Question(id="q3", text="Pick the second letter", type="checkbox",
                     options=["A", "B", "C"], correct_answer="B"),
            Question(id="q4", text="Any comments?", type="short_answer"),
        ],
    )


@pytest.fixture
def responses():
    # scores against quiz_form: alice 3/3, bob 1/3, carol 1/3, dave 0/3
    return [
        Response(id="r1", form_code="ABC123", username="alice",
                 answers={"q1": "eight", "q2": "Paris", "q3": ["A", "B"], "q4": "Nice quiz"},
                 submitted_at=datetime(2024, 1, 1, 9, 0)),
        Response(id="r2", form_code="ABC123", username="bob",
                 answers={"q1": "7", "q2": "Paris", "q3": ["C"]},
                 submitted_at=datetime(2024, 1, 1, 23, 30)),
        Response(id="r3", form_code="ABC123", username="carol",
                 answers={"q1": "8", "q2": "Rome"},
                 submitted_at=datetime(2024, 1, 2, 0, 0, 1)),
        Response(id="r4", form_code="ABC123", username="dave",
                 answers={},
                 submitted_at=datetime(2024, 1, 3, 12, 0)),
    ]


@pytest.fixture
def form_doc():
    return {
        "code": "ABC123",
        "title": "General Knowledge",
        "time_limit": 10,
        "questions": [
            {"id": "q1", "text": "How many legs does a spider have?", "type": "short_answer", "correctAnswer": "8"},
            {"id": "q2", "text": "Capital of France?", "type": "multiple_choice",
             "options": ["Paris", "Rome", "Berlin"], "correctAnswer": "Paris"},
            {"id": "q3", "text": "Pick the second letter", "type": "checkbox",
             "options": ["A", "B", "C"], "correctAnswer": "B"},
            {"id": "q4", "text": "Any comments?", "type": "short_answer", "correctAnswer": ""},
        ],
    }


@pytest.fixture
def response_docs():
    return [
        {"id": "r1", "form_code": "ABC123", "username": "alice",
         "answers": {"q1": "eight", "q2": "Paris", "q3": ["A", "B"], "q4": "Nice quiz"},
         "submitted_at": "2024-01-01T09:00:00"},
        {"id": "r2", "form_code": "ABC123", "username": "bob",
         "answers": {"q1": "7", "q2": "Paris", "q3": ["C"]},
         "submitted_at": "2024-01-01T23:30:00"},
        {"id": "r3", "form_code": "ABC123", "username": "carol",
         "answers": {"q1": "8", "q2": "Rome"},
         "submitted_at": "2024-01-02T00:00:01"},
        {"id": "r4", "form_code": "ABC123", "username": "dave",
         "answers": {},
         "submitted_at": "2024-01-03T12:00:00"},
    ]
