# src/blog_rag/serialization.py
"""JSON rendering for run artifacts and console output."""

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

from langchain_core.messages import BaseMessage


def json_default(o: Any):
    # LangChain messages (HumanMessage, AIMessage, ToolMessage, ...)
    if isinstance(o, BaseMessage):
        out = {
            "type": o.type,
            "content": o.content,
            "id": getattr(o, "id", None),
            "name": getattr(o, "name", None),
        }
        tool_calls = getattr(o, "tool_calls", None)
        if tool_calls:
            out["tool_calls"] = tool_calls
        tool_call_id = getattr(o, "tool_call_id", None)
        if tool_call_id:
            out["tool_call_id"] = tool_call_id
        return out

    if is_dataclass(o) and not isinstance(o, type):
        return asdict(o)

    # Pydantic v2 models
    dump = getattr(o, "model_dump", None)
    if callable(dump):
        return dump()

    return str(o)


def to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=json_default)


def write_artifact(base_dir: Path, run_id: str, filename: str, payload: Any) -> Path:
    out_dir = base_dir / run_id
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        f.write(to_json(payload))
    return out_path
