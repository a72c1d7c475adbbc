"""
NoteDesk.

- backend/: API, services, repositories, database models, configuration
"""
