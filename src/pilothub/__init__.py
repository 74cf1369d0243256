"""
pilothub - backend for the Project Pilots documentation hub.

Serves versioned page content, team members, sprints and quick-navigation
items from an in-memory store, plus a handful of static project documents.
"""

__version__ = "0.1.0"
