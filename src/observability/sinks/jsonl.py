from __future__ import annotations

import json
import threading
from pathlib import Path

from ..trace.envelope import TraceEnvelope


DEFAULT_FILE_NAME = "traces.jsonl"


class JsonlSink:
    """Append one JSON line per finished request trace.

    `path_or_dir` is either the `.jsonl` file itself or the directory that
    should hold `traces.jsonl`. Spans, events and metrics arrive inside
    the envelope.
    """

    def __init__(self, path_or_dir: str | Path) -> None:
        p = Path(path_or_dir)
        self.path = p if p.suffix == ".jsonl" else p / DEFAULT_FILE_NAME
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Requests are handled concurrently; one writer at a time keeps lines whole.
        self._lock = threading.Lock()

    def write(self, envelope: TraceEnvelope) -> None:
        line = json.dumps(envelope.to_dict(), ensure_ascii=True, default=str)
        with self._lock:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")

    def on_trace_end(self, envelope: TraceEnvelope) -> None:
        self.write(envelope)
