"""
Settings package for rosterback project.

Pick a module through DJANGO_SETTINGS_MODULE:
- rosterback.settings.development (default for manage.py)
- rosterback.settings.testing (pytest)
- rosterback.settings.production
"""
