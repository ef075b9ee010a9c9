# inkwell/core/__init__.py
# Pure review engine: chunk model, differ, merge resolver & session state machine
