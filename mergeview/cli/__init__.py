# mergeview/cli/__init__.py
# Typer CLI host for the diff & conflict engine; entry point is cli.app:app
