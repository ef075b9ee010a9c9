# inkwell/__init__.py
# Inkwell: AI split-view review of suggested rewrites, merged edit by edit

__version__ = "0.1.0"
