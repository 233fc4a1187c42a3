"""
Assessment bounded context - Domain layer.

This context handles quizzes attached to quiz-type lessons:
- Question and option bank management
- Scoring of submissions and attempt records
"""
