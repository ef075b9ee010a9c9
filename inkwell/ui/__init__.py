# inkwell/ui/__init__.py
# Terminal UI: theming & the interactive split-view review screen
