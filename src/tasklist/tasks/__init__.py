"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPriority, TaskFilter, RemovedTask)
- errors.py: ValidationError / TaskNotFound
- task_store.py: in-memory store with one-step undo of the last removal
- task_view.py: pure filter -> search -> sort pipeline
- task_api.py: small high-level helpers used by the front-end
"""
