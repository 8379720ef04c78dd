"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStats, FilterMode)
- task_store.py: pure list operations (add/toggle/remove/filter/stats)
"""
