"""Snippet manager.

Stores named code snippets in a JSON file or a SQLite database, selected
by a ``KIND:location`` storage specifier.
"""

__version__ = "0.1.0"
