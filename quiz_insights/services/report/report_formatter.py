"""Report Formatter - Handles response rows and analytics payload formatting"""
from typing import Dict, List, Optional
from quiz_insights.config.settings import ReportConfig, ScoringConfig
from quiz_insights.models.form import Form
from quiz_insights.models.report import AnalyticsReport
from quiz_insights.models.response import Response
from quiz_insights.utils.analysis.matcher import is_correct
from quiz_insights.utils.analysis.score_utils import calculate_score, score_band
from quiz_insights.utils.formatting.answer_utils import flatten_answer, has_answer
from quiz_insights.utils.time.timeutils import to_iso_string

class ReportFormatter:
    """Formats scored responses and analytics into dashboard payloads"""

    @staticmethod
    def format_response_row(form: Form, response: Response) -> Dict:
        """One row of the individual responses list"""
        result = calculate_score(form, response)
        percentage = result.percentage

        answers = []
        for question in form.questions:
            raw = response.answer_for(question.id)
            answers.append({
                "questionId": question.id,
                "question": question.text,
                "type": question.type,
                "answerText": flatten_answer(raw, separator=", ") if has_answer(raw) else ReportConfig.NO_ANSWER_TEXT,
                "isCorrect": is_correct(question, raw) if question.is_gradable else None,
                "correctAnswer": question.correct_answer
            })

        return {
            "id": response.id,
            "username": response.username,
            "submittedAt": to_iso_string(response.submitted_at),
            "score": result.earned_points,
            "total": result.total_points,
            "percentage": percentage,
            "scoreBand": score_band(percentage),
            "hasGradableQuestions": result.has_gradable_questions,
            "answers": answers
        }

    @staticmethod
    def format_analytics(form: Form, report: Optional[AnalyticsReport], limit: Optional[int] = None) -> Optional[Dict]:
        """Analytics payload with the notable answers per question"""
        if report is None:
            return None

        limit = ScoringConfig.TOP_ANSWERS_LIMIT if limit is None else limit
        questions: List[Dict] = []
        for question in form.questions:
            stats = report.question_stats.get(question.id)
            top = stats.top_answers(limit) if stats else []
            questions.append({
                "questionId": question.id,
                "question": question.text,
                "type": question.type,
                "totalAnswers": stats.total if stats else 0,
                "topAnswers": [
                    {
                        "answer": item.answer,
                        "count": item.count,
                        "percentage": item.percentage,
                        "isCorrect": item.is_expected
                    }
                    for item in top
                ]
            })

        return {
            "totalResponses": report.total_responses,
            "avgScore": report.average_score,
            "formMaxPoints": report.max_gradable_points,
            "avgPercent": report.average_percentage,
            "passingRate": report.pass_rate,
            "scoreDistribution": [bucket.model_dump() for bucket in report.score_distribution],
            "scoreBands": dict(report.score_bands),
            "questions": questions
        }
