from typing import List, Optional

import psycopg

from bookstore import db
from bookstore.book.model import Book
from bookstore.errors import PersistenceError
from bookstore.logger import get_logger

logger = get_logger(__name__)


class BookRepository:
    """
    Repository for book data access.
    Encapsulates all SQL and queries for the books table.

    Every method acquires its own connection from ``connect`` and releases
    it before returning or raising. ``connect`` is any zero-argument
    callable returning a context manager that yields a psycopg connection;
    it defaults to ``db.get_connection``.
    """

    def __init__(self, connect: db.ConnectionFactory = None):
        self._connect = connect or db.get_connection

    def create(self, book: Book) -> Book:
        """Insert a book and set its generated id in place."""
        try:
            with db.get_cursor(self._connect) as cur:
                cur.execute(
                    "INSERT INTO books (title, price) VALUES (%s, %s) RETURNING id",
                    (book.title, book.price),
                )
                if cur.rowcount < 1:
                    raise PersistenceError(
                        "Expected to insert at least one row, but inserted 0 rows."
                    )
                row = cur.fetchone()
                if row is None:
                    raise PersistenceError(f"No generated id returned for new book: {book}")
        except psycopg.Error as exc:
            logger.error("Insert failed for %s: %s", book, exc)
            raise PersistenceError(f"Can not create new book: {book}") from exc

        book.id = row["id"]
        logger.info("Created book id=%s", book.id)
        return book

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by ID, or None if no row matches."""
        try:
            with db.get_cursor(self._connect) as cur:
                cur.execute("SELECT * FROM books WHERE id = %s", (book_id,))
                row = cur.fetchone()
        except psycopg.Error as exc:
            logger.error("Select failed for book id=%s: %s", book_id, exc)
            raise PersistenceError(
                f"Can not fetch the book with the provided ID: {book_id}"
            ) from exc

        return self._to_book(row) if row is not None else None

    def find_all(self) -> List[Book]:
        """List all books in whatever order the store returns them."""
        try:
            with db.get_cursor(self._connect) as cur:
                cur.execute("SELECT * FROM books")
                rows = cur.fetchall()
        except psycopg.Error as exc:
            logger.error("Select failed for books: %s", exc)
            raise PersistenceError("Can not fetch books") from exc

        return [self._to_book(row) for row in rows]

    def update(self, book: Book) -> Book:
        """Overwrite title and price of an existing book."""
        if book.id is None:
            raise PersistenceError(f"Can not update a book without an ID: {book}")

        try:
            with db.get_cursor(self._connect) as cur:
                cur.execute(
                    "UPDATE books SET title = %s, price = %s WHERE id = %s",
                    (book.title, book.price, book.id),
                )
                if cur.rowcount < 1:
                    raise PersistenceError(
                        f"Expected to update one row, but updated 0 rows for ID: {book.id}"
                    )
        except psycopg.Error as exc:
            logger.error("Update failed for %s: %s", book, exc)
            raise PersistenceError(f"Can not update the book: {book}") from exc

        logger.info("Updated book id=%s", book.id)
        return book

    def delete_by_id(self, book_id: int) -> bool:
        """
        Delete a book by ID.

        The existence check and the delete run on separate connections, so a
        concurrent delete between them makes this return False.
        """
        if self.find_by_id(book_id) is None:
            raise PersistenceError(
                f"Impossible to delete the book with provided ID: {book_id}, "
                "because there isn't this book in the DB"
            )

        try:
            with db.get_cursor(self._connect) as cur:
                cur.execute("DELETE FROM books WHERE id = %s", (book_id,))
                deleted = cur.rowcount
        except psycopg.Error as exc:
            logger.error("Delete failed for book id=%s: %s", book_id, exc)
            raise PersistenceError(
                f"Can not delete the book with the provided ID: {book_id}"
            ) from exc

        logger.info("Deleted book id=%s", book_id)
        return deleted >= 1

    @staticmethod
    def _to_book(row: dict) -> Book:
        """Map the current row; never advances the cursor."""
        try:
            return Book(id=row["id"], title=row["title"], price=row["price"])
        except KeyError as exc:
            raise PersistenceError(
                f"Impossible to extract the book from the row: missing column {exc}"
            ) from exc
