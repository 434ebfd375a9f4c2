# capkit/logging/tags.py
"""
Central place for defining logging subsystem tags.

Tags prefix log messages so output stays searchable per subsystem.
"""

COMPOSE = "[COMPOSE]"
GATEWAY = "[GATEWAY]"
GUARD = "[GUARD]"
REGISTRY = "[REGISTRY]"
CONFIG = "[CONFIG]"
