"""Tests for field selection."""

from dataclasses import dataclass
from uuid import uuid4

import pytest

from library_api.core.exceptions import UnknownProjectionFieldError
from library_api.features.authors.models import AuthorDto
from library_api.features.shaping import FieldProjector, TypeDescriptor, parse_field_spec


@pytest.fixture
def author():
    return AuthorDto(id=uuid4(), name="Neil Gaiman", age=63, genre="Fantasy")


@dataclass
class Point:
    x: int
    y: int


@dataclass
class LabelledPoint(Point):
    label: str = ""


class TestTypeDescriptor:
    """Tests for field descriptor tables."""

    def test_pydantic_declaration_order(self):
        """Test pydantic models keep declaration order."""
        assert TypeDescriptor.of(AuthorDto).field_names == ("id", "name", "age", "genre")

    def test_dataclass_fields(self):
        """Test dataclasses are described through fields()."""
        assert TypeDescriptor.of(LabelledPoint).field_names == ("x", "y", "label")

    def test_descriptor_is_cached(self):
        """Test one descriptor per type."""
        assert TypeDescriptor.of(AuthorDto) is TypeDescriptor.of(AuthorDto)

    def test_case_insensitive_lookup(self):
        """Test lookups ignore case and surrounding whitespace."""
        descriptor = TypeDescriptor.of(AuthorDto)
        assert descriptor.has_field(" GENRE ")
        assert descriptor.get("Name").name == "name"
        assert descriptor.get("unknown") is None

    def test_unsupported_type(self):
        """Test plain classes cannot be described."""
        with pytest.raises(TypeError):
            TypeDescriptor.of(object)


class TestHasProperties:
    """Tests for field selection validation."""

    @pytest.mark.parametrize("fields", [None, "", "   ", "name", "NAME, genre", "id,,age"])
    def test_valid(self, fields):
        """Test empty and known selections are valid."""
        assert FieldProjector.has_properties(AuthorDto, fields)

    @pytest.mark.parametrize("fields", ["shoe_size", "name, date_of_birth"])
    def test_invalid(self, fields):
        """Test unknown names are invalid."""
        assert not FieldProjector.has_properties(AuthorDto, fields)

    def test_unknown_fields(self):
        """Test every unknown name is reported."""
        assert FieldProjector.unknown_fields(AuthorDto, "name, foo, bar") == ["foo", "bar"]

    def test_ensure_properties(self):
        """Test ensure_properties raises with the unknown names."""
        FieldProjector.ensure_properties(AuthorDto, "name")
        with pytest.raises(UnknownProjectionFieldError) as exc_info:
            FieldProjector.ensure_properties(AuthorDto, "foo")
        assert exc_info.value.unknown_fields == ["foo"]


class TestShape:
    """Tests for FieldProjector.shape."""

    def test_all_fields_when_unspecified(self, author):
        """Test an empty selection copies every declared field."""
        assert FieldProjector.shape(author) == {
            "id": author.id,
            "name": "Neil Gaiman",
            "age": 63,
            "genre": "Fantasy",
        }

    def test_declared_order_not_request_order(self, author):
        """Test output keys follow declaration order."""
        shaped = FieldProjector.shape(author, "genre, NAME")
        assert list(shaped) == ["name", "genre"]

    def test_values_keep_their_types(self, author):
        """Test values are copied, not stringified."""
        shaped = FieldProjector.shape(author, "id,age")
        assert shaped == {"id": author.id, "age": 63}

    def test_identity_fields_always_included(self, author):
        """Test identity fields survive a selection that omits them."""
        shaped = FieldProjector.shape(author, "genre", identity_fields=("id",))
        assert list(shaped) == ["id", "genre"]

    def test_unknown_field_raises(self, author):
        """Test unknown names raise."""
        with pytest.raises(UnknownProjectionFieldError):
            FieldProjector.shape(author, "name, foo")

    def test_declared_type_restricts_fields(self):
        """Test subclass attributes are not part of the declared shape."""
        point = LabelledPoint(x=1, y=2, label="origin")

        assert FieldProjector.shape(point, declared_type=Point) == {"x": 1, "y": 2}
        with pytest.raises(UnknownProjectionFieldError):
            FieldProjector.shape(point, "label", declared_type=Point)


class TestShapeMany:
    """Tests for FieldProjector.shape_many."""

    def test_preserves_input_order(self):
        """Test items come back in input order."""
        points = [Point(3, 0), Point(1, 0), Point(2, 0)]
        assert FieldProjector.shape_many(points, "x") == [{"x": 3}, {"x": 1}, {"x": 2}]

    def test_empty_input(self):
        """Test an empty sequence shapes to an empty list."""
        assert FieldProjector.shape_many([], "x") == []
        assert FieldProjector.shape_many([], "x", declared_type=Point) == []

    def test_validates_against_declared_type_even_when_empty(self):
        """Test an empty page still rejects unknown fields."""
        with pytest.raises(UnknownProjectionFieldError):
            FieldProjector.shape_many([], "z", declared_type=Point)


def test_parse_field_spec():
    """Test field specs split on commas and drop empty tokens."""
    assert parse_field_spec(" name , ,genre ") == ["name", "genre"]
    assert parse_field_spec(None) == []
