# inkwell/inkwell_io/documents.py
# Document I/O: plain text, Markdown & DOCX as one string w/ blank-line paragraph breaks

import zipfile
from pathlib import Path

from docx import Document

from ..core.constants import PARAGRAPH_BREAK
from ..core.exceptions import FileReadError, FileWriteError, UnsupportedFormatError
from ..core.verbose import vlog_file_read, vlog_file_write
from .generics import ensure_parent

TEXT_SUFFIXES = {".txt", ".md", ".markdown", ".text"}
DOCX_SUFFIXES = {".docx"}


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES or suffix == "":
        return "text"
    if suffix in DOCX_SUFFIXES:
        return "docx"
    raise UnsupportedFormatError(
        f"Unsupported document format '{suffix}' for {path}. "
        f"Use one of: {', '.join(sorted(TEXT_SUFFIXES | DOCX_SUFFIXES))}",
        suffix,
    )


# * Read text from file
def read_text(path: Path) -> str:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(f"Cannot decode {path} as UTF-8: {e}", path) from e
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e}", path) from e
    vlog_file_read(path, len(text))
    return text


# * Read DOCX body paragraphs joined by a blank line (empty paragraphs dropped)
def read_docx_text(path: Path) -> str:
    path = Path(path)
    try:
        doc = Document(str(path))
    except FileNotFoundError as e:
        raise FileReadError(f"DOCX file not found: {path}", path) from e
    except zipfile.BadZipFile as e:
        raise FileReadError(
            f"Invalid DOCX file (not a valid zip archive): {path}", path
        ) from e
    except Exception as e:
        raise FileReadError(f"Failed to open DOCX file {path}: {e}", path) from e

    paragraphs = [p.text for p in doc.paragraphs if p.text.strip()]
    text = PARAGRAPH_BREAK.join(paragraphs)
    vlog_file_read(path, path.stat().st_size if path.exists() else None)
    return text


def write_text(text: str, output_path: Path) -> None:
    output_path = Path(output_path)
    try:
        ensure_parent(output_path)
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Cannot write {output_path}: {e}", output_path) from e
    vlog_file_write(output_path, len(text))


# * Write one DOCX paragraph per blank-line separated block
def write_docx_text(text: str, output_path: Path) -> None:
    output_path = Path(output_path)
    doc = Document()
    for block in text.split(PARAGRAPH_BREAK):
        if block.strip():
            doc.add_paragraph(block.strip("\n"))
    try:
        ensure_parent(output_path)
        doc.save(str(output_path))
    except OSError as e:
        raise FileWriteError(f"Cannot write {output_path}: {e}", output_path) from e
    vlog_file_write(output_path)


# * Read a supported document as a single string
def read_document(path: Path) -> str:
    path = Path(path)
    if _format_for(path) == "docx":
        return read_docx_text(path)
    return read_text(path)


# * Write a document in the format implied by its suffix
def write_document(path: Path, text: str) -> None:
    path = Path(path)
    if _format_for(path) == "docx":
        write_docx_text(text, path)
    else:
        write_text(text, path)
