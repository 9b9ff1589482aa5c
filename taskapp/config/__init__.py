"""Configuration module for TaskApp.

Available Configurations:
- TaskAppConfig: process wiring, store backend, session and hashing settings
"""

from taskapp.config.app_config import TEST_TASKAPP_CONFIG, TaskAppConfig

__all__ = [
    "TaskAppConfig",
    "TEST_TASKAPP_CONFIG",
]
