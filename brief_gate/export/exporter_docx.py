from __future__ import annotations

import os
from typing import Any, Dict, Optional

from docx import Document
from docx.shared import Pt

from .exporter_txt import BANNERS, format_value, iter_fields


def _add_bullets(doc: Document, title: str, items) -> None:
    if not items:
        return
    doc.add_heading(title, level=2)
    for item in items:
        doc.add_paragraph(str(item), style="List Bullet")


def export_docx_file(
    out_dir: str,
    result_id: str,
    payload: Dict[str, Any],
    filename: Optional[str] = None,
    title: str = "BRIEFING ANALYSIS",
) -> str:
    os.makedirs(out_dir, exist_ok=True)
    if not filename:
        filename = f"brief_{result_id}.docx"
    path = os.path.join(out_dir, filename)

    briefing = payload.get("briefing") or {}
    decision = payload.get("decision") or {}
    meta = briefing.get("meta") or {}

    doc = Document()
    doc.add_heading(title, level=1)
    doc.add_paragraph(f"Source: {meta.get('source_file') or '-'}")
    doc.add_paragraph(f"Reference date: {meta.get('extraction_date') or '-'}")

    status = decision.get("status", "NO-GO")
    doc.add_heading(BANNERS.get(status, status), level=1)
    doc.add_paragraph(f"Score: {decision.get('score')} / {decision.get('max_score')}")

    # Criteria table
    criteria = decision.get("criteria") or {}
    doc.add_heading("Criteria", level=2)
    table = doc.add_table(rows=1, cols=4)
    hdr = table.rows[0].cells
    hdr[0].text, hdr[1].text, hdr[2].text, hdr[3].text = "Criterion", "Status", "Score", "Message"
    for name, c in criteria.items():
        row = table.add_row().cells
        row[0].text = name
        row[1].text = str(c.get("status"))
        row[2].text = f"{c.get('score')} / {c.get('max_score')}"
        row[3].text = str(c.get("message") or "")

    _add_bullets(doc, "Issues", decision.get("issues"))
    _add_bullets(doc, "Recommendations", decision.get("recommendations"))

    doc.add_page_break()
    doc.add_heading("Extracted Data", level=1)
    for label, value in iter_fields(briefing):
        doc.add_heading(label, level=3)
        doc.add_paragraph(format_value(value))

    # Light typography tweak (optional)
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    doc.save(path)
    return path
