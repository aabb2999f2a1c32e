"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and the registry's error types
- task_registry.py: lock-guarded in-memory registry (the only task state)
"""
