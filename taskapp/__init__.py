"""
TaskApp Manager - multi-tenant task tracking backend.

Users keep private tasks and share tasks inside groups. Group membership
and role (admin or collaborator) decide who may create, see, assign,
edit, and complete a group task.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
