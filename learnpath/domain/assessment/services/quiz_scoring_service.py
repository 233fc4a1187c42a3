"""Domain service scoring a quiz submission against its question bank."""

from collections.abc import Sequence
from dataclasses import dataclass

from learnpath.domain.assessment.entities.quiz_attempt import QuizAnswer
from learnpath.domain.assessment.entities.quiz_question import QuestionType, QuizQuestion
from learnpath.domain.assessment.entities.quiz_submission import QuizSubmission
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects import QuizOptionId

DEFAULT_PASS_THRESHOLD = 0.70


@dataclass
class QuestionResult:
    """Per-question verdict reported back to the learner."""

    question_id: int
    question_text: str
    question_type: QuestionType
    selected_option_ids: list[int]
    selected_option_texts: list[str]
    correct_option_ids: list[int]
    correct_option_texts: list[str]
    is_correct: bool


@dataclass
class ScoredQuiz:
    """Outcome of scoring one submission."""

    score: int
    total_questions: int
    passed: bool
    results: list[QuestionResult]
    answers: list[QuizAnswer]


class QuizScoringService:
    """
    Stateless domain service for scoring quizzes.

    Scoring rules:
    - SINGLE_CHOICE: correct iff exactly one option was selected and it is correct
    - MULTIPLE_CHOICE: correct iff the selected set equals the correct set
    - Unanswered questions are incorrect
    - passed iff total > 0 and score / total >= pass_threshold
    """

    def __init__(self, pass_threshold: float = DEFAULT_PASS_THRESHOLD) -> None:
        self.pass_threshold = pass_threshold

    @staticmethod
    def is_answer_correct(question: QuizQuestion, selected: Sequence[int]) -> bool:
        """Evaluate a single question against the selected option ids."""
        if not selected:
            return False

        correct = question.correct_option_ids()
        if question.question_type is QuestionType.SINGLE_CHOICE:
            return len(selected) == 1 and selected[0] in correct
        return bool(correct) and set(selected) == correct

    def has_passed(self, score: int, total_questions: int) -> bool:
        return total_questions > 0 and score / total_questions >= self.pass_threshold

    def score(self, questions: Sequence[QuizQuestion], submission: QuizSubmission) -> ScoredQuiz:
        """
        Score a submission.

        Args:
            questions: The quiz's question bank in display order
            submission: The learner's selections

        Returns:
            ScoredQuiz with score, verdict, per-question results and the
            answer rows to store

        Raises:
            ValidationError: If the submission references questions outside the
                quiz or options outside their question
        """
        self.validate_submission(questions, submission)

        score = 0
        results: list[QuestionResult] = []
        answers: list[QuizAnswer] = []

        for question in questions:
            selected = list(dict.fromkeys(submission.selected_for(question.id.value)))
            is_correct = self.is_answer_correct(question, selected)
            if is_correct:
                score += 1

            option_text = {o.id.value: o.text for o in question.options}
            correct_ids = [o.id.value for o in question.correct_options()]
            results.append(
                QuestionResult(
                    question_id=question.id.value,
                    question_text=question.text,
                    question_type=question.question_type,
                    selected_option_ids=selected,
                    selected_option_texts=[option_text[i] for i in selected],
                    correct_option_ids=correct_ids,
                    correct_option_texts=[option_text[i] for i in correct_ids],
                    is_correct=is_correct,
                )
            )

            if selected:
                answers.extend(
                    QuizAnswer(
                        question_id=question.id,
                        selected_option_id=QuizOptionId(option_id),
                        is_correct=is_correct,
                    )
                    for option_id in selected
                )
            else:
                # Marks the question as seen
                answers.append(
                    QuizAnswer(question_id=question.id, selected_option_id=None, is_correct=False)
                )

        total = len(questions)
        return ScoredQuiz(
            score=score,
            total_questions=total,
            passed=self.has_passed(score, total),
            results=results,
            answers=answers,
        )

    @staticmethod
    def validate_submission(
        questions: Sequence[QuizQuestion], submission: QuizSubmission
    ) -> None:
        """
        Reject selections that do not match the question bank.

        Raises:
            ValidationError: On unknown question ids or foreign option ids
        """
        bank = {q.id.value: q for q in questions}
        for question_id, option_ids in submission.selections.items():
            question = bank.get(question_id)
            if question is None:
                raise ValidationError(
                    f"Question {question_id} is not part of this quiz",
                    field="question_id",
                    value=question_id,
                )
            foreign = [o for o in option_ids if o not in question.option_ids()]
            if foreign:
                raise ValidationError(
                    f"Options {foreign} do not belong to question {question_id}",
                    field="selected_option_ids",
                    value=foreign,
                )
