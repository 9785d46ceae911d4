"""Unit tests for request id resolution."""

import uuid

import pytest

from schoolpulse.middleware.request_id import resolve_request_id


class TestResolveRequestId:
    @pytest.mark.parametrize("inbound", ["abc-123", "trace.7_A", "x" * 64])
    def test_safe_ids_kept(self, inbound):
        assert resolve_request_id(inbound) == inbound

    @pytest.mark.parametrize("inbound", [None, "", "x" * 65, "a b", "a\nb", "<script>"])
    def test_unsafe_ids_replaced(self, inbound):
        resolved = resolve_request_id(inbound)
        assert resolved != inbound
        assert uuid.UUID(resolved).version == 4
