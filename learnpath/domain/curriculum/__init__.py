"""
Curriculum bounded context - Domain layer.

This context handles the course → module → lesson hierarchy:
- Courses, modules and lessons
- Dense 1..N ordering of sibling units

Aggregates:
- Course: owns its modules
- Module: owns its lessons
"""
