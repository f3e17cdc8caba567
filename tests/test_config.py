"""Tests for settings, logging configuration and error mapping."""

import logging
from datetime import date
from uuid import UUID

import pytest
from pydantic import ValidationError

from library_api.common import build_engine_config
from library_api.config import LibrarySettings, LoggingConfig
from library_api.core.exceptions import (
    BusinessRuleViolationError,
    InvalidIdentifierListError,
    LibraryError,
    ResourceConflictError,
    ResourceNotFoundError,
    SortMappingNotFoundError,
    UnknownProjectionFieldError,
    UnknownSortFieldError,
    create_error_response,
    get_http_status_code,
)
from library_api.core.exceptions import base as exceptions_base
from library_api.core.exceptions import http_mapping
from library_api.features.authors.models import AuthorDto
from library_api.features.authors.services import to_author_dto
from library_api.features.authors.entities import Author
from library_api.features.books.models import BookDto


class TestSettings:
    """Tests for LibrarySettings."""

    def test_defaults(self):
        """Test paging defaults."""
        settings = LibrarySettings()
        assert settings.default_page_size == 10
        assert settings.max_page_size == 20
        assert settings.api_prefix == "/api"

    def test_default_page_size_cannot_exceed_maximum(self):
        """Test inconsistent page sizes are rejected."""
        with pytest.raises(ValidationError):
            LibrarySettings(default_page_size=50, max_page_size=20)

    def test_environment_flags(self):
        """Test environment helpers."""
        assert LibrarySettings(environment="Production").is_production
        assert LibrarySettings(environment="testing").is_testing

    def test_engine_config(self):
        """Test the engine config registers every sortable shape."""
        engine = build_engine_config(LibrarySettings(default_page_size=5, max_page_size=15))

        assert engine.default_page_size == 5
        assert engine.max_page_size == 15
        assert engine.sort_registry.has_mapping_for(AuthorDto)
        assert engine.sort_registry.has_mapping_for(BookDto)


class TestLoggingConfig:
    """Tests for the dictConfig mapping."""

    def test_build(self):
        """Test level and noisy module overrides."""
        config = LoggingConfig.build(LibrarySettings(log_level="debug", log_format="detailed"))

        assert config["root"]["level"] == "DEBUG"
        assert "%(name)s" in config["formatters"]["default"]["format"]
        assert config["loggers"]["httpx"]["level"] == "ERROR"

    def test_unknown_level_falls_back_to_info(self):
        """Test invalid levels do not break configuration."""
        config = LoggingConfig.build(LibrarySettings(log_level="chatty"))
        assert config["root"]["level"] == "INFO"

    def test_set_module_level(self):
        """Test one module can be made more verbose."""
        LoggingConfig.set_module_level("library_api.features.sorting", "debug")
        assert logging.getLogger("library_api.features.sorting").level == logging.DEBUG


class TestErrorMapping:
    """Tests for exception to HTTP status mapping."""

    @pytest.mark.parametrize(
        "exception,status_code",
        [
            (UnknownSortFieldError(["x"]), 400),
            (UnknownProjectionFieldError(["x"]), 400),
            (InvalidIdentifierListError("bad"), 400),
            (ResourceNotFoundError("Author", 1), 404),
            (ResourceConflictError("Author", 1), 409),
            (BusinessRuleViolationError("rule"), 422),
            (SortMappingNotFoundError(AuthorDto), 500),
            (LibraryError("boom"), 500),
            (ValueError("boom"), 500),
        ],
    )
    def test_status_codes(self, exception, status_code):
        """Test the class hierarchy decides the status code."""
        assert get_http_status_code(exception) == status_code

    def test_status_lookup_lives_in_http_mapping(self):
        """Test the package exports the mapping module's lookup directly."""
        assert get_http_status_code is http_mapping.get_http_status_code
        assert not hasattr(exceptions_base, "get_http_status_code")

    def test_error_response(self):
        """Test the error envelope."""
        response = create_error_response(ResourceNotFoundError("Author", "42"))

        assert response == {
            "error": {
                "code": "ResourceNotFoundError",
                "message": "Author 42 not found",
                "details": {"resource": "Author", "id": "42"},
                "type": "ResourceNotFoundError",
            }
        }


def test_author_dto_mapping():
    """Test name and age are derived from storage fields."""
    author = Author(
        id=UUID(int=3),
        first_name="Stephen",
        last_name="King",
        date_of_birth=date(1947, 9, 21),
        genre="Horror",
    )

    dto = to_author_dto(author, today=date(2020, 1, 1))
    assert dto == AuthorDto(id=UUID(int=3), name="Stephen King", age=72, genre="Horror")
