"""
Task subsystem.

Components:
- task_enums.py: TaskStatus / TaskDifficulty and their input/storage translators
- dates.py: date parsing and formatting helpers
- task_models.py: the Task entity (validation + apply_update)
- task_store.py: ordered in-memory store persisted to a JSON file
- task_api.py: add-flow and display helpers used by the console app
- errors.py: exception hierarchy
"""
