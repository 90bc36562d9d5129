"""
In-process entry points for the surrounding application.

The web layer calls into ``api.services``; it never touches handlers
or repositories directly.
"""
