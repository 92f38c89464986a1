"""Tests for replay verification between two generator runs."""

from __future__ import annotations

from typing import Any

from audit_gate.replay import hash_document, sort_keys, verify_replay
from tests.factories import golden_report


class TestVerifyReplay:
    def test_identical_reports_match(self, report: dict[str, Any]) -> None:
        result = verify_replay(report, golden_report())
        assert result.matches
        assert result.diffs == []
        assert result.original_hash == result.replay_hash
        assert len(result.original_hash) == 64

    def test_volatile_fields_ignored(self, report: dict[str, Any]) -> None:
        replay = golden_report()
        replay["analysis_id"] = "11111111-1111-1111-1111-111111111111"
        replay["generated_at"] = "2026-03-01T08:30:00Z"
        replay["job_id"] = "job-7"
        assert verify_replay(report, replay).matches

    def test_score_divergence(self, report: dict[str, Any]) -> None:
        replay = golden_report()
        replay["audit_ledger"]["final_score"] = 40
        result = verify_replay(report, replay)
        assert not result.matches
        assert "Score divergence: 35 vs 40" in result.diffs
        assert "Deep object divergence (content differs)" in result.diffs
        assert result.original_hash != result.replay_hash

    def test_prompt_and_model_mismatch(self, report: dict[str, Any]) -> None:
        replay = golden_report()
        replay["prompt_hash"] = "0" * 64
        replay["model_version"] = "other-model"
        result = verify_replay(report, replay)
        assert result.diffs[0].startswith("Prompt hash mismatch")
        assert result.diffs[1] == "Model version mismatch: gemini-3-pro-preview vs other-model"

    def test_inputs_not_modified(self, report: dict[str, Any]) -> None:
        verify_replay(report, golden_report())
        assert "analysis_id" in report

    def test_missing_ledger_is_compared_not_raised(self, report: dict[str, Any]) -> None:
        replay = golden_report()
        del replay["audit_ledger"]
        result = verify_replay(report, replay)
        assert "Score divergence: 35 vs None" in result.diffs


class TestHashing:
    def test_key_order_does_not_change_hash(self) -> None:
        assert hash_document({"b": 1, "a": [{"y": 2, "x": 1}]}) == hash_document({"a": [{"x": 1, "y": 2}], "b": 1})

    def test_sort_keys_keeps_list_order(self) -> None:
        assert sort_keys({"b": [3, 1], "a": {"d": 1, "c": 2}}) == {"a": {"c": 2, "d": 1}, "b": [3, 1]}
        assert list(sort_keys({"b": 1, "a": 2})) == ["a", "b"]

    def test_boolean_and_integer_are_different_values(self, report: dict[str, Any]) -> None:
        replay = golden_report()
        replay["coverage_structure"]["top_up"]["exists"] = 0
        result = verify_replay(report, replay)
        assert not result.matches
        assert result.diffs == ["Deep object divergence (content differs)"]
        assert result.original_hash != result.replay_hash

    def test_integral_float_is_a_different_serialisation(self, report: dict[str, Any]) -> None:
        replay = golden_report()
        replay["coverage_structure"]["base_sum_insured"] = 100000.0
        assert not verify_replay(report, replay).matches
