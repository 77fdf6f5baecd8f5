# mergeview/__init__.py
# Diff rendering & merge conflict resolution

__version__ = "0.1.0"
