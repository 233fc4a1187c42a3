"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use cases: Orchestrate domain logic inside a unit of work
- Services: Application logic shared by several use cases
- Protocols: Repository interfaces per bounded context
- Ports: Interfaces for other external dependencies (clock)
"""
