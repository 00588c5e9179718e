"""
To-Do List Widget Package

A small task list that keeps its tasks in local storage and seeds itself
from a public placeholder feed the first time it runs.

Package Structure:
- config.py: Widget configuration using Pydantic Settings
- exceptions.py: Widget exception hierarchy
- models.py: Task record and filter modes
- state.py: Versioned task list snapshots and the update function
- storage.py: JSON file standing in for browser local storage
- seed.py: Remote seed feed client (httpx)
- bridge.py: Persistence bridge and the task list owner
- view.py: Text rendering and user intents
- cli.py: Command-line entry point
"""

__version__ = "1.0.0"
