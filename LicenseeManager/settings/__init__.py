"""
Settings package for LicenseeManager.

Pick a module through DJANGO_SETTINGS_MODULE:
``base`` (shared), ``dev`` (local, optional SQLite), ``test`` (pytest)
or ``prod`` (secrets and log file from the environment).
"""
