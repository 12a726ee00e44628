from __future__ import annotations

import io
import os
from typing import List

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..core.config import max_file_size_bytes, max_pdf_pages
from ..core.errors import DocumentReadError, NoExtractableContent

PAGE_SEPARATOR = "\n\n"


def validate_pdf(file_bytes: bytes, filename: str = "brief.pdf") -> None:
    """Reject anything that is obviously not a readable PDF upload."""
    if not file_bytes:
        raise DocumentReadError("The file appears to be empty.")

    ext = os.path.splitext(filename or "")[1].lower()
    if ext != ".pdf" or not file_bytes.startswith(b"%PDF"):
        raise DocumentReadError("Please upload a PDF file only.")

    limit = max_file_size_bytes()
    if len(file_bytes) > limit:
        raise DocumentReadError(
            f"File too large. Please upload a PDF under {limit // (1024 * 1024)}MB."
        )


def read_pdf_text(file_bytes: bytes, filename: str = "brief.pdf") -> str:
    """
    PDF bytes -> plain text, pages joined with a blank line.

    - Pages that fail to extract are skipped (warning printed).
    - A document with no readable page raises NoExtractableContent
      (image-only or protected PDFs end up here).
    """
    validate_pdf(file_bytes, filename)

    try:
        reader = PdfReader(io.BytesIO(file_bytes))
        pages = list(reader.pages)
    except (PdfReadError, ValueError, KeyError) as e:
        raise DocumentReadError(f"Could not read this document: {e}") from e

    limit = max_pdf_pages()
    if limit > 0:
        pages = pages[:limit]

    chunks: List[str] = []
    for page_num, page in enumerate(pages, start=1):
        try:
            txt = page.extract_text() or ""
        except Exception as e:  # broken page: skip it
            print(f"[PDF] Error reading page {page_num} of {filename}: {e}", flush=True)
            continue
        if txt.strip():
            chunks.append(txt.strip())

    text = PAGE_SEPARATOR.join(chunks).strip()
    if not text:
        raise NoExtractableContent(
            "No readable text found in the PDF. The file may be image-based or password protected."
        )

    print(f"[PDF] {filename}: {len(chunks)} page(s), {len(text)} chars", flush=True)
    return text
