from unittest.mock import Mock

from fastapi import Request

from supplier_service.app.api.dependencies import get_correlation_id


class TestGetCorrelationId:
    @staticmethod
    def _request(headers: dict, state_id=None) -> Mock:
        request = Mock(spec=Request)
        request.headers = headers
        request.state.correlation_id = state_id
        return request

    def test_prefers_correlation_header(self):
        request = self._request({"X-Correlation-ID": "corr-1"}, "from-state")

        assert get_correlation_id(request) == "corr-1"

    def test_request_id_header_is_not_a_correlation_id(self):
        request = self._request({"x-request-id": "req-9"}, "from-state")

        assert get_correlation_id(request) == "from-state"

    def test_falls_back_to_request_state(self):
        assert get_correlation_id(self._request({}, "from-state")) == "from-state"
