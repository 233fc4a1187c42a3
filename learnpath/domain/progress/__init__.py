"""
Progress bounded context - Domain layer.

This context handles learner progress:
- Per-lesson completion records
- Enrollment completion status state machine
- Module and course progress aggregation
"""
