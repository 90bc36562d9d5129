"""
Model registry for the offices app.
"""
from offices.infrastructure.models import Office  # noqa: F401
