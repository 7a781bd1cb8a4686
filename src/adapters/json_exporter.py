"""JSON export of a resolution outcome.

Stable formatting (sorted keys, UTF-8) so output can be diffed or piped
into other tooling.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import ResolutionOutcome


def outcome_to_payload(outcome: ResolutionOutcome) -> dict[str, Any]:
    payload = outcome.model_dump(mode="json")
    payload["timestamp_ms"] = outcome.timestamp_ms
    resolved = outcome.resolved
    payload["repository"] = resolved.endpoint.name if resolved else None
    return payload


def dump_outcome_json(outcome: ResolutionOutcome) -> str:
    return json.dumps(outcome_to_payload(outcome), ensure_ascii=False, indent=2, sort_keys=True)


def export_outcome_json(*, outcome: ResolutionOutcome, output_path: Path) -> Path:
    """Write `ResolutionOutcome` to a UTF-8 JSON file."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_outcome_json(outcome) + "\n", encoding="utf-8")
    return output_path
