"""Tests for the smoke runner's pure helpers (no network)."""

from runner.types import AdminCheck, Created, SmokeResult
from runner.utils import payload_matches, sample_payloads, summarize


def _healthy_result(n: int = 3) -> SmokeResult:
    payloads = sample_payloads(n)
    created = [Created(coaster_id=f"id{i}", payload=p) for i, p in enumerate(payloads)]
    return SmokeResult(
        created=created,
        listed_ids={c.coaster_id for c in created},
        random_ids=["id0", "id1", "id2", "id1"],
        admin=AdminCheck(wrong_status=401, right_status=200),
    )


class TestSamplePayloads:
    def test_distinct_and_carry_client_ids(self):
        payloads = sample_payloads(7)
        assert len(payloads) == 7
        assert len({p["name"] for p in payloads}) == 7
        assert all(p["id"].startswith("client-") for p in payloads)
        assert all(isinstance(p["height"], int) for p in payloads)


class TestPayloadMatches:
    def test_match(self):
        payload = sample_payloads(1)[0]
        record = {**payload, "id": "server-id"}
        assert payload_matches(payload, record)

    def test_reflected_client_id_fails(self):
        payload = sample_payloads(1)[0]
        assert not payload_matches(payload, dict(payload))

    def test_field_difference_fails(self):
        payload = sample_payloads(1)[0]
        assert not payload_matches(payload, {**payload, "id": "x", "height": -1})

    def test_missing_record_fails(self):
        assert not payload_matches(sample_payloads(1)[0], None)


class TestSummarize:
    def test_healthy_run(self):
        summary, code = summarize(_healthy_result(), requested=3)
        assert code == 0
        assert summary["failures"] == []
        assert summary["random_distinct"] == 3

    def test_missing_create(self):
        summary, code = summarize(_healthy_result(), requested=4)
        assert code == 1
        assert "not every create succeeded" in summary["failures"]

    def test_missing_from_list(self):
        result = _healthy_result()
        result.listed_ids.discard("id2")
        summary, code = summarize(result, requested=3)
        assert code == 1
        assert summary["missing_from_list"] == ["id2"]

    def test_stuck_random(self):
        result = _healthy_result()
        result.random_ids = ["id0"] * 10
        summary, code = summarize(result, requested=3)
        assert code == 1
        assert "random always picked the same coaster" in summary["failures"]

    def test_admin_gate(self):
        result = _healthy_result()
        result.admin = AdminCheck(wrong_status=200, right_status=200)
        _, code = summarize(result, requested=3)
        assert code == 1
