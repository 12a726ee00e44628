from __future__ import annotations

import asyncio
import json
import os
import re
from datetime import date
from typing import Any, Dict, Optional

from .config import EXPORTS_DIR
from ..extraction.extractor import extract_briefing
from ..extraction.pdf_reader import read_pdf_text
from ..scoring.decision_engine import RuleSet, evaluate_briefing, rules_from_env
from ..export.exporter_docx import export_docx_file
from ..export.exporter_txt import export_txt_file

# NOTE:
# This module is the integration point for the UI and any other caller.
# Rule thresholds are read from the environment when no RuleSet is passed:
# - MIN_BUDGET (default 10000)
# - MIN_LEAD_TIME_DAYS (default 10)


# -----------------------------
# Text -> Briefing + Decision
# -----------------------------
def analyze_text(
    text: str,
    source: str,
    reference_date: date,
    rules: Optional[RuleSet] = None,
) -> Dict[str, Any]:
    """
    Run the full pipeline on already extracted text.

    Returns:
      {
        "briefing": {...},   # see Briefing.to_dict
        "decision": {...},   # see Decision.to_dict
      }
    Raises NoExtractableContent on empty text.
    """
    rules = rules or rules_from_env()
    briefing = extract_briefing(text, source, reference_date=reference_date, rules=rules)
    decision = evaluate_briefing(briefing, reference_date, rules=rules)
    print(f"[Service] {source or '<text>'}: {decision.status} ({decision.score}/{decision.max_score})", flush=True)
    return {"briefing": briefing.to_dict(), "decision": decision.to_dict()}


# -----------------------------
# PDF Upload
# -----------------------------
def analyze_pdf(
    file_bytes: bytes,
    filename: str,
    reference_date: date,
    rules: Optional[RuleSet] = None,
) -> Dict[str, Any]:
    text = read_pdf_text(file_bytes, filename)
    return analyze_text(text, filename, reference_date, rules=rules)


async def analyze_pdf_async(
    file_bytes: bytes,
    filename: str,
    reference_date: date,
    rules: Optional[RuleSet] = None,
) -> Dict[str, Any]:
    """Same as analyze_pdf; the document read is the only awaited step."""
    text = await asyncio.to_thread(read_pdf_text, file_bytes, filename)
    return analyze_text(text, filename, reference_date, rules=rules)


# -----------------------------
# Serialization + Export
# -----------------------------
def to_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def result_id(payload: Dict[str, Any]) -> str:
    meta = payload.get("briefing", {}).get("meta", {})
    stem = os.path.splitext(meta.get("source_file") or "brief")[0]
    safe = re.sub(r"[^a-zA-Z0-9._-]+", "_", stem).strip("_") or "brief"
    return f"{safe}_{meta.get('extraction_date') or 'undated'}"


def export(
    payload: Dict[str, Any],
    fmt: str = "docx",
    out_dir: str = EXPORTS_DIR,
) -> Dict[str, Any]:
    os.makedirs(out_dir, exist_ok=True)
    rid = result_id(payload)
    fmt = fmt.lower()

    if fmt == "json":
        path = os.path.join(out_dir, f"brief_{rid}.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write(to_json(payload))
        return {"result_id": rid, "format": "json", "path": path}

    if fmt == "txt":
        path = export_txt_file(out_dir, rid, payload)
        return {"result_id": rid, "format": "txt", "path": path}

    path = export_docx_file(out_dir, rid, payload)
    return {"result_id": rid, "format": "docx", "path": path}
