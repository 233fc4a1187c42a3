"""
Application ports (interfaces for external dependencies).

Ports define the boundaries between the application layer and
the infrastructure layer. Repository ports live in each bounded
context's ``protocols`` package; the remaining ports live here.
"""

from .clock import ClockProtocol

__all__ = ["ClockProtocol"]
