"""
Licensees module - Licensee status lifecycle and audit trail.

This module handles:
- Licensee and LicenseType entities
- Status transition rules (manual edits vs. the expiration sweep)
- Expiration evaluation against a reference date
- The append-only status audit trail
"""
