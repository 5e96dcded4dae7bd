"""Failures talking to the Supplier Service"""

from typing import Optional


class SupplierClientError(Exception):
    """Base class for upstream call failures."""

    error_type = "supplier_error"


class SupplierResponseError(SupplierClientError):
    """The supplier answered with a non-2xx status."""

    def __init__(
        self, status_code: int, detail: str, upstream_type: Optional[str] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.upstream_type = upstream_type
        super().__init__(detail)


class SupplierTimeoutError(SupplierClientError):
    """The supplier did not answer within the configured timeout."""

    error_type = "supplier_timeout"


class SupplierUnavailableError(SupplierClientError):
    """The supplier could not be reached."""

    error_type = "supplier_unavailable"


class SupplierBadResponseError(SupplierClientError):
    """The supplier answered 2xx with a body that is not the expected JSON."""

    error_type = "supplier_bad_response"
