"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ToDo, Deadline, Event, TaskKind)
- task_list.py: ordered in-memory collection with 1-based positions
- task_store.py: flat-file storage (" | " separated lines)
- time_utils.py: date parsing and formatting helpers
"""
