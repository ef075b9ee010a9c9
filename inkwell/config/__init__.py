# inkwell/config/__init__.py
# Settings persistence & provider credential checks
