# inkwell/inkwell_io/__init__.py
# Package initialization & exports for Inkwell I/O operations

from .documents import (
    read_document,
    write_document,
    read_text,
    write_text,
    read_docx_text,
    write_docx_text,
)
from .generics import (
    write_json_safe,
    read_json_safe,
    ensure_parent,
)

__all__ = [
    # Document I/O
    "read_document",
    "write_document",
    "read_text",
    "write_text",
    "read_docx_text",
    "write_docx_text",
    # Generics
    "write_json_safe",
    "read_json_safe",
    "ensure_parent",
]
