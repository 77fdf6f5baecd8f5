# mergeview/ui/__init__.py
# Terminal UI: theme, diff views & the interactive conflict resolver
