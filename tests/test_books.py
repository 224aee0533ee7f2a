from fastapi import status


class TestBookEndpoints:
    """Test book management endpoints."""

    def test_create_book_success(self, test_client, api_prefix, sample_author):
        """Test successful book creation."""
        book_data = {
            "title": "Test Book Title",
            "publicationYear": 2000,
            "authorId": sample_author["id"],
        }

        response = test_client.post(f"{api_prefix}/books", json=book_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == book_data["title"]
        assert data["publicationYear"] == 2000
        assert data["authorId"] == sample_author["id"]
        assert isinstance(data["id"], int)

    def test_create_book_trim_title(self, test_client, api_prefix, sample_author):
        response = test_client.post(
            f"{api_prefix}/books",
            json={"title": "  Trimmed  ", "publicationYear": 2001, "authorId": sample_author["id"]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["title"] == "Trimmed"

    def test_create_book_validation(self, test_client, api_prefix, sample_author):
        author_id = sample_author["id"]
        test_cases = [
            {},
            {"title": "   ", "publicationYear": 2000, "authorId": author_id},
            {"title": "No year", "authorId": author_id},
            {"title": "No author", "publicationYear": 2000},
            {"title": "Bad year", "publicationYear": "soon", "authorId": author_id},
            {"title": "T" * 256, "publicationYear": 2000, "authorId": author_id},
        ]

        for book_data in test_cases:
            response = test_client.post(f"{api_prefix}/books", json=book_data)
            assert response.status_code == status.HTTP_400_BAD_REQUEST, book_data

        assert test_client.get(f"{api_prefix}/books").json() == []

    def test_create_book_nonexistent_author(self, test_client, api_prefix):
        """Unknown author → 404 naming the id, and nothing is written."""
        response = test_client.post(
            f"{api_prefix}/books",
            json={"title": "Orphan Book", "publicationYear": 2000, "authorId": 4242},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["error"]["type"] == "not_found"
        assert "4242" in body["error"]["message"]

        assert test_client.get(f"{api_prefix}/books").json() == []

    def test_create_book_for_deleted_author(self, test_client, api_prefix, sample_author):
        author_id = sample_author["id"]
        assert test_client.delete(f"{api_prefix}/authors/{author_id}").status_code == 200

        response = test_client.post(
            f"{api_prefix}/books",
            json={"title": "Too late", "publicationYear": 2010, "authorId": author_id},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_books_empty(self, test_client, api_prefix):
        response = test_client.get(f"{api_prefix}/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_shape(self, test_client, api_prefix, sample_author, sample_book):
        """Books nest {id, firstName, lastName} and never expose authorId."""
        response = test_client.get(f"{api_prefix}/books")

        assert response.status_code == status.HTTP_200_OK
        books = response.json()
        assert len(books) == 1
        book = books[0]
        assert "authorId" not in book
        assert set(book) == {"id", "title", "publicationYear", "author"}
        assert book["author"] == {
            "id": sample_author["id"],
            "firstName": sample_author["firstName"],
            "lastName": sample_author["lastName"],
        }

    def test_list_books_for_one_author(self, test_client, api_prefix):
        author = test_client.post(
            f"{api_prefix}/authors", json={"firstName": "first6", "lastName": "last6"}
        ).json()
        for title, year in (("newBook6", 2011), ("newBook7", 2012)):
            response = test_client.post(
                f"{api_prefix}/books",
                json={"title": title, "publicationYear": year, "authorId": author["id"]},
            )
            assert response.status_code == status.HTTP_201_CREATED

        books = test_client.get(f"{api_prefix}/books").json()

        assert len(books) == 2
        assert sorted(b["title"] for b in books) == ["newBook6", "newBook7"]
        assert all(b["author"]["id"] == author["id"] for b in books)

    def test_get_book_by_id(self, test_client, api_prefix, sample_book):
        response = test_client.get(f"{api_prefix}/books/{sample_book['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_book["id"]
        assert data["title"] == sample_book["title"]
        assert data["author"]["id"] == sample_book["authorId"]
        assert "authorId" not in data

    def test_get_book_not_found(self, test_client, api_prefix):
        response = test_client.get(f"{api_prefix}/books/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "999" in response.json()["error"]["message"]

    def test_update_book(self, test_client, api_prefix, sample_author, sample_book):
        update = {"title": "updatedBook1", "publicationYear": 2026, "authorId": sample_author["id"]}

        response = test_client.patch(f"{api_prefix}/books/{sample_book['id']}", json=update)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_book["id"]
        assert data["title"] == "updatedBook1"
        assert data["publicationYear"] == 2026
        assert data["authorId"] == sample_author["id"]

    def test_update_book_moves_to_other_author(self, test_client, api_prefix, sample_book):
        other = test_client.post(
            f"{api_prefix}/authors", json={"firstName": "Other", "lastName": "Writer"}
        ).json()

        response = test_client.patch(
            f"{api_prefix}/books/{sample_book['id']}", json={"authorId": other["id"]}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["authorId"] == other["id"]
        assert response.json()["title"] == sample_book["title"]

        shaped = test_client.get(f"{api_prefix}/books/{sample_book['id']}").json()
        assert shaped["author"]["firstName"] == "Other"

    def test_update_book_invalid_author_leaves_book_unchanged(self, test_client, api_prefix, sample_book):
        response = test_client.patch(
            f"{api_prefix}/books/{sample_book['id']}",
            json={"title": "Should not stick", "authorId": 9999},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "9999" in response.json()["error"]["message"]

        book = test_client.get(f"{api_prefix}/books/{sample_book['id']}").json()
        assert book["title"] == sample_book["title"]
        assert book["author"]["id"] == sample_book["authorId"]

    def test_update_book_not_found(self, test_client, api_prefix, sample_author):
        response = test_client.patch(
            f"{api_prefix}/books/999", json={"title": "x", "authorId": sample_author["id"]}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_rejects_null(self, test_client, api_prefix, sample_book):
        response = test_client.patch(f"{api_prefix}/books/{sample_book['id']}", json={"authorId": None})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_book(self, test_client, api_prefix, sample_book):
        response = test_client.delete(f"{api_prefix}/books/{sample_book['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""

        response = test_client.get(f"{api_prefix}/books/{sample_book['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_not_found(self, test_client, api_prefix):
        response = test_client.delete(f"{api_prefix}/books/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_book_rejects_coerced_and_oversized_integers(self, test_client, api_prefix, sample_author):
        author_id = sample_author["id"]
        test_cases = [
            {"title": "Bool year", "publicationYear": True, "authorId": author_id},
            {"title": "String year", "publicationYear": "2000", "authorId": author_id},
            {"title": "String author", "publicationYear": 2000, "authorId": str(author_id)},
            {"title": "Huge year", "publicationYear": 2**31, "authorId": author_id},
            {"title": "Huge author", "publicationYear": 2000, "authorId": 2**70},
        ]

        for book_data in test_cases:
            response = test_client.post(f"{api_prefix}/books", json=book_data)
            assert response.status_code == status.HTTP_400_BAD_REQUEST, book_data
            assert response.json()["error"]["type"] == "validation_error"

        assert test_client.get(f"{api_prefix}/books").json() == []

    def test_update_book_rejects_bool_year(self, test_client, api_prefix, sample_book):
        response = test_client.patch(
            f"{api_prefix}/books/{sample_book['id']}", json={"publicationYear": False}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        book = test_client.get(f"{api_prefix}/books/{sample_book['id']}").json()
        assert book["publicationYear"] == sample_book["publicationYear"]

    def test_out_of_range_ids_are_validation_errors(self, test_client, api_prefix):
        for book_id in (2**70, 2**31, 0):
            assert test_client.get(f"{api_prefix}/books/{book_id}").status_code == status.HTTP_400_BAD_REQUEST
            assert test_client.delete(f"{api_prefix}/books/{book_id}").status_code == status.HTTP_400_BAD_REQUEST
            assert test_client.get(f"{api_prefix}/authors/{book_id}").status_code == status.HTTP_400_BAD_REQUEST
