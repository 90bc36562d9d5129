"""
LicenseType domain entity. Reference data with no lifecycle.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LicenseType:
    """A kind of license that can be held by a licensee."""

    id: Optional[int]
    name: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("License type name is required")
        if len(self.name) > 50:
            raise ValueError("License type name cannot exceed 50 characters")
