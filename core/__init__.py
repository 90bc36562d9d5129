"""
Core module for shared domain infrastructure.

This module contains:
- Domain events, exceptions and value objects
- Clock abstraction used by every time-dependent rule
- Transaction and event bus infrastructure
- Expiration sweep entry points (management command, Celery task)
"""
