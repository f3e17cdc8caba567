"""Tests for the book APIs."""

import json
from uuid import UUID

import pytest

from library_api.common import PAGINATION_HEADER

STEPHEN_KING_ID = "25320c5e-f58a-4b1f-b63a-8ee07a840bdf"
THE_SHINING_ID = "c7ba6add-09c4-45f8-8dd0-eaca221e5d93"
NEW_BOOK_ID = "5b1c2b4d-48c7-402a-80c3-cc796ad49c6b"
MISSING_ID = "00000000-0000-0000-0000-000000000001"

BOOKS_URL = f"/api/authors/{STEPHEN_KING_ID}/books"


def titles(body):
    return [book["title"] for book in body["value"]]


class TestListBooks:
    """Tests for GET /api/authors/{author_id}/books."""

    def test_default_order_by_title(self, client):
        """Test books are sorted by title and fully linked."""
        response = client.get(BOOKS_URL)

        assert response.status_code == 200
        body = response.json()
        assert titles(body) == ["It", "Misery", "The Shining", "The Stand"]
        assert [link["rel"] for link in body["value"][0]["links"]] == [
            "self",
            "update",
            "partially_update",
            "delete",
        ]
        assert body["links"][0]["href"].startswith(f"http://testserver{BOOKS_URL}?")

    def test_sort_and_page(self, client):
        """Test descending title order over two pages."""
        response = client.get(BOOKS_URL, params={"orderBy": "title desc", "pageSize": 3, "pageNumber": 2})

        assert titles(response.json()) == ["It"]
        metadata = json.loads(response.headers[PAGINATION_HEADER])
        assert metadata["totalCount"] == 4
        assert metadata["totalPages"] == 2
        assert "orderBy=title+desc" in metadata["previousPageLink"]
        assert metadata["nextPageLink"] is None

    def test_field_selection(self, client):
        """Test shaped books keep the id for their links."""
        response = client.get(BOOKS_URL, params={"fields": "title"})

        book = response.json()["value"][0]
        assert list(book) == ["id", "title", "links"]

    def test_unknown_sort_field(self, client):
        """Test unknown book sort properties are rejected."""
        response = client.get(BOOKS_URL, params={"orderBy": "pages"})
        assert response.status_code == 400

    def test_missing_author(self, client):
        """Test books of an unknown author are not found."""
        assert client.get(f"/api/authors/{MISSING_ID}/books").status_code == 404


class TestGetBook:
    """Tests for GET /api/authors/{author_id}/books/{book_id}."""

    @pytest.mark.asyncio
    async def test_get_book(self, async_client):
        """Test one book with mutation links."""
        response = await async_client.get(f"{BOOKS_URL}/{THE_SHINING_ID}")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "The Shining"
        assert body["author_id"] == STEPHEN_KING_ID
        methods = {link["rel"]: link["method"] for link in body["links"]}
        assert methods == {
            "self": "GET",
            "update": "PUT",
            "partially_update": "PATCH",
            "delete": "DELETE",
        }
        assert all(link["href"] == f"http://test{BOOKS_URL}/{THE_SHINING_ID}" for link in body["links"])

    @pytest.mark.asyncio
    async def test_missing_book(self, async_client):
        """Test an unknown book id is not found."""
        response = await async_client.get(f"{BOOKS_URL}/{MISSING_ID}")
        assert response.status_code == 404


class TestCreateBook:
    """Tests for POST /api/authors/{author_id}/books."""

    def test_create_book(self, client, repository):
        """Test creation returns 201 with a location."""
        response = client.post(BOOKS_URL, json={"title": "Carrie", "description": "A telekinetic teenager."})

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Carrie"
        assert response.headers["Location"] == f"http://testserver{BOOKS_URL}/{body['id']}"
        assert repository.count_books_for_author(UUID(STEPHEN_KING_ID)) == 5

    def test_description_equal_to_title(self, client):
        """Test the description must differ from the title."""
        response = client.post(BOOKS_URL, json={"title": "Carrie", "description": "Carrie"})

        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"field": "description"}

    def test_missing_author_before_business_rule(self, client):
        """Test an unknown author is reported before payload rules."""
        response = client.post(
            f"/api/authors/{MISSING_ID}/books",
            json={"title": "Carrie", "description": "Carrie"},
        )
        assert response.status_code == 404


class TestUpdateBook:
    """Tests for PUT /api/authors/{author_id}/books/{book_id}."""

    def test_full_update(self, client, repository):
        """Test an existing book is replaced."""
        response = client.put(
            f"{BOOKS_URL}/{THE_SHINING_ID}",
            json={"title": "The Shining (revised)", "description": "Jack Torrance at the Overlook."},
        )

        assert response.status_code == 204
        book = repository.get_book_for_author(UUID(STEPHEN_KING_ID), UUID(THE_SHINING_ID))
        assert book.title == "The Shining (revised)"
        assert book.description == "Jack Torrance at the Overlook."

    def test_upsert(self, client):
        """Test a missing book is created at the given id."""
        response = client.put(
            f"{BOOKS_URL}/{NEW_BOOK_ID}",
            json={"title": "Cujo", "description": "A rabid dog."},
        )

        assert response.status_code == 201
        assert response.json()["id"] == NEW_BOOK_ID
        assert client.get(f"{BOOKS_URL}/{NEW_BOOK_ID}").status_code == 200

    def test_description_required(self, client):
        """Test full updates need a description."""
        response = client.put(f"{BOOKS_URL}/{THE_SHINING_ID}", json={"title": "The Shining"})
        assert response.status_code == 422

    def test_business_rule(self, client):
        """Test full updates follow the description rule."""
        response = client.put(f"{BOOKS_URL}/{THE_SHINING_ID}", json={"title": "Same", "description": "Same"})
        assert response.status_code == 422


class TestPartiallyUpdateBook:
    """Tests for PATCH /api/authors/{author_id}/books/{book_id}."""

    def test_replace_title(self, client, repository):
        """Test members not named in the patch keep their values."""
        response = client.patch(
            f"{BOOKS_URL}/{THE_SHINING_ID}",
            json=[{"op": "replace", "path": "/title", "value": "The Shining!"}],
        )

        assert response.status_code == 204
        book = repository.get_book_for_author(UUID(STEPHEN_KING_ID), UUID(THE_SHINING_ID))
        assert book.title == "The Shining!"
        assert book.description.startswith("The Shining is a horror novel")

    def test_remove_description(self, client, repository):
        """Test a remove operation clears the description."""
        response = client.patch(
            f"{BOOKS_URL}/{THE_SHINING_ID}",
            json=[{"op": "remove", "path": "/description"}],
        )

        assert response.status_code == 204
        book = repository.get_book_for_author(UUID(STEPHEN_KING_ID), UUID(THE_SHINING_ID))
        assert book.description is None

    def test_book_without_description_stays_without(self, client):
        """Test patching a book created without description does not invent one."""
        created = client.post(BOOKS_URL, json={"title": "Carrie"}).json()

        response = client.patch(
            f"{BOOKS_URL}/{created['id']}",
            json=[{"op": "replace", "path": "/title", "value": "Carrie (1974)"}],
        )

        assert response.status_code == 204
        book = client.get(f"{BOOKS_URL}/{created['id']}").json()
        assert book["title"] == "Carrie (1974)"
        assert book["description"] is None

    def test_business_rule(self, client):
        """Test the patched book must follow the description rule."""
        response = client.patch(
            f"{BOOKS_URL}/{THE_SHINING_ID}",
            json=[{"op": "replace", "path": "/description", "value": "The Shining"}],
        )
        assert response.status_code == 422

    def test_failed_test_operation(self, client, repository):
        """Test a failing test operation leaves the book unchanged."""
        response = client.patch(
            f"{BOOKS_URL}/{THE_SHINING_ID}",
            json=[
                {"op": "test", "path": "/title", "value": "Misery"},
                {"op": "replace", "path": "/title", "value": "Carrie"},
            ],
        )

        assert response.status_code == 422
        book = repository.get_book_for_author(UUID(STEPHEN_KING_ID), UUID(THE_SHINING_ID))
        assert book.title == "The Shining"

    def test_unknown_operation(self, client):
        """Test operations outside JSON patch are rejected."""
        response = client.patch(
            f"{BOOKS_URL}/{THE_SHINING_ID}",
            json=[{"op": "merge", "path": "/title", "value": "Carrie"}],
        )
        assert response.status_code == 422

    def test_patch_upsert(self, client):
        """Test a patch producing a complete book creates a missing book."""
        response = client.patch(
            f"{BOOKS_URL}/{NEW_BOOK_ID}",
            json=[
                {"op": "replace", "path": "/title", "value": "Cujo"},
                {"op": "replace", "path": "/description", "value": "A rabid dog."},
            ],
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == NEW_BOOK_ID
        assert body["title"] == "Cujo"
        assert response.headers["Location"] == f"http://testserver{BOOKS_URL}/{NEW_BOOK_ID}"

    def test_incomplete_patch_upsert(self, client):
        """Test an upsert patch must produce a titled book."""
        response = client.patch(
            f"{BOOKS_URL}/{NEW_BOOK_ID}",
            json=[{"op": "replace", "path": "/description", "value": "A rabid dog."}],
        )
        assert response.status_code == 422


class TestBookIdentity:
    """Tests for book ids owned by another author."""

    HITCHHIKERS_GUIDE_ID = "e57b605f-8b3c-4089-b672-6ce9e6d6c23f"

    def test_put_upsert_conflict(self, client, repository):
        """Test PUT cannot create a book whose id another author uses."""
        response = client.put(
            f"{BOOKS_URL}/{self.HITCHHIKERS_GUIDE_ID}",
            json={"title": "Cujo", "description": "A rabid dog."},
        )

        assert response.status_code == 409
        assert repository.count_books_for_author(UUID(STEPHEN_KING_ID)) == 4
        assert repository.find_book(UUID(self.HITCHHIKERS_GUIDE_ID)).title != "Cujo"

    def test_patch_upsert_conflict(self, client):
        """Test PATCH cannot create a book whose id another author uses."""
        response = client.patch(
            f"{BOOKS_URL}/{self.HITCHHIKERS_GUIDE_ID}",
            json=[{"op": "replace", "path": "/title", "value": "Cujo"}],
        )
        assert response.status_code == 409


class TestDeleteBook:
    """Tests for DELETE /api/authors/{author_id}/books/{book_id}."""

    def test_delete_book(self, client):
        """Test deleting a book."""
        assert client.delete(f"{BOOKS_URL}/{THE_SHINING_ID}").status_code == 204
        assert client.get(f"{BOOKS_URL}/{THE_SHINING_ID}").status_code == 404

    def test_delete_missing_book(self, client):
        """Test deleting an unknown book is not found."""
        assert client.delete(f"{BOOKS_URL}/{MISSING_ID}").status_code == 404
