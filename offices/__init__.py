"""
Offices module - Office records and their active flag.

This module handles:
- Office entity and domain logic
- Deactivation with atomic reassignment of licensees
- Reactivation
"""
