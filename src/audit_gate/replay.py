"""Replay verification: compare two generator outputs for the same policy.

Runs entirely outside the gate. The gate validates one document; this module
checks whether a re-run of the generator reproduced a recorded one.
"""

from __future__ import annotations

import copy
import hashlib
import json
from dataclasses import dataclass, field
from typing import Any

# Fields that legitimately differ between two runs
VOLATILE_FIELDS = ("analysis_id", "generated_at", "job_id")


@dataclass
class ReplayResult:
    matches: bool
    diffs: list[str] = field(default_factory=list)
    original_hash: str = ""
    replay_hash: str = ""


def sort_keys(obj: Any) -> Any:
    """Recursively rebuild *obj* with dict keys in sorted order."""
    if isinstance(obj, list):
        return [sort_keys(item) for item in obj]
    if isinstance(obj, dict):
        return {key: sort_keys(obj[key]) for key in sorted(obj)}
    return obj


def hash_document(obj: Any) -> str:
    """SHA-256 hex digest of the canonical JSON form of *obj*."""
    canonical = json.dumps(sort_keys(obj), separators=(",", ":"), ensure_ascii=False, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def _clean_for_comparison(obj: dict[str, Any]) -> dict[str, Any]:
    cleaned = copy.deepcopy(obj)
    for key in VOLATILE_FIELDS:
        cleaned.pop(key, None)
    return sort_keys(cleaned)


def _final_score(obj: dict[str, Any]) -> Any:
    ledger = obj.get("audit_ledger")
    if isinstance(ledger, dict):
        return ledger.get("final_score")
    return None


def verify_replay(original: dict[str, Any], replay: dict[str, Any]) -> ReplayResult:
    """Check two raw report dicts for determinism, ignoring volatile fields."""
    diffs: list[str] = []

    if original.get("prompt_hash") != replay.get("prompt_hash"):
        diffs.append(f"Prompt hash mismatch: {original.get('prompt_hash')} vs {replay.get('prompt_hash')}")
    if original.get("model_version") != replay.get("model_version"):
        diffs.append(
            f"Model version mismatch: {original.get('model_version')} vs {replay.get('model_version')}"
        )
    if _final_score(original) != _final_score(replay):
        diffs.append(f"Score divergence: {_final_score(original)} vs {_final_score(replay)}")

    # Compare canonical JSON text, where true and 1 are different values
    original_hash = hash_document(_clean_for_comparison(original))
    replay_hash = hash_document(_clean_for_comparison(replay))
    if original_hash != replay_hash:
        diffs.append("Deep object divergence (content differs)")

    return ReplayResult(
        matches=not diffs,
        diffs=diffs,
        original_hash=original_hash,
        replay_hash=replay_hash,
    )
