"""Tests for RecordingBanTransport."""

import pytest

from cacheban.core.entities import BanRequest, ExactPath
from cacheban.core.exceptions import BanTransportError
from cacheban.infrastructure.transports.memory import RecordingBanTransport


@pytest.fixture
def request_a() -> BanRequest:
    """Create a ban request for testing."""
    return BanRequest.for_target("http://cache.test/", ExactPath("/a"))


class TestRecordingBanTransport:
    """Tests for RecordingBanTransport."""

    async def test_records_requests(self, request_a: BanRequest) -> None:
        """Test that requests are recorded in order."""
        transport = RecordingBanTransport()

        assert await transport.send(request_a) == 200
        assert transport.requests == [request_a]
        assert len(transport) == 1

    async def test_configured_status(self, request_a: BanRequest) -> None:
        """Test the fixed status code."""
        transport = RecordingBanTransport(status_code=404)

        assert await transport.send(request_a) == 404

    async def test_responder(self, request_a: BanRequest) -> None:
        """Test the per-request responder."""
        transport = RecordingBanTransport(responder=lambda r: len(r.target.key) + 200)

        assert await transport.send(request_a) == 202

    async def test_closed_transport_rejects(self, request_a: BanRequest) -> None:
        """Test that a closed transport raises BanTransportError."""
        transport = RecordingBanTransport()
        await transport.close()

        assert transport.closed
        with pytest.raises(BanTransportError):
            await transport.send(request_a)

    async def test_clear(self, request_a: BanRequest) -> None:
        """Test forgetting recorded requests."""
        transport = RecordingBanTransport()
        await transport.send(request_a)

        transport.clear()

        assert len(transport) == 0
