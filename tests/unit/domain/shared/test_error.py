"""Unit tests for the error hierarchy."""

import pytest

from indexsync.domain.shared import error
from indexsync.domain.shared.error import (
    ConfigurationError,
    DomainError,
    ExternalServiceError,
    IndexSyncError,
    InfrastructureError,
    NotFoundError,
    SearchBackendError,
    ValidationError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "exc_type, parent",
        [
            (NotFoundError, DomainError),
            (ValidationError, DomainError),
            (SearchBackendError, ExternalServiceError),
            (ExternalServiceError, InfrastructureError),
            (ConfigurationError, InfrastructureError),
            (DomainError, IndexSyncError),
            (InfrastructureError, IndexSyncError),
        ],
    )
    def test_layering(self, exc_type, parent):
        assert issubclass(exc_type, parent)

    def test_only_raised_errors_are_defined(self):
        defined = {
            name
            for name, value in vars(error).items()
            if isinstance(value, type) and issubclass(value, IndexSyncError)
        }

        assert defined == {
            "IndexSyncError",
            "DomainError",
            "NotFoundError",
            "ValidationError",
            "InfrastructureError",
            "ExternalServiceError",
            "SearchBackendError",
            "ConfigurationError",
        }

    def test_validation_error_carries_field(self):
        exc = ValidationError("Must specify an index", field="index")

        assert exc.field == "index"
        assert exc.code == "VALIDATION_ERROR"
        assert exc.message == "Must specify an index"

    def test_backend_error_carries_status(self):
        exc = SearchBackendError("GET /main returned 503", status_code=503)

        assert exc.status_code == 503
        assert exc.code == "SEARCH_BACKEND_ERROR"

    def test_code_defaults_to_class_name(self):
        assert NotFoundError("missing").code == "NotFoundError"
