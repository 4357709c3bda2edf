"""
Task subsystem.

Components:
- task_models.py: data structures (Task, patches, parsed requests)
- errors.py: reply-carrying exceptions
- interval.py: "h:m:s" interval parsing
- validation.py: field rules and whole-document structure checks
- task_store.py: JSON document store (create/modify/delete/clear)
- say_command.py: the `say` command grammar and its exec() entry point
"""
