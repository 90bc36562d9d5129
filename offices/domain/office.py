"""
Office domain entity.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Office:
    """
    Office domain entity.

    A physical location licensees are assigned to. Inactive offices stay
    referenced by history but are not offered for new assignments.
    """

    id: Optional[int]
    name: str
    city: str
    state: str
    active: bool = True
    version: int = 0

    def __post_init__(self):
        """Validate office entity."""
        for label, value in (("Office name", self.name), ("City", self.city), ("State", self.state)):
            if not value or not value.strip():
                raise ValueError(f"{label} is required")
            if len(value) > 50:
                raise ValueError(f"{label} cannot exceed 50 characters")

    @classmethod
    def create(cls, name: str, city: str, state: str) -> "Office":
        """Create a new, active, not yet persisted office."""
        return cls(id=None, name=name, city=city, state=state, active=True)

    @property
    def active_status(self) -> str:
        """Display label for the active flag."""
        return "Active" if self.active else "Inactive"

    def deactivate(self) -> "Office":
        """Return a copy marked inactive."""
        return replace(self, active=False)

    def activate(self) -> "Office":
        """Return a copy marked active."""
        return replace(self, active=True)
