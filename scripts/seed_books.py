"""Seed a few books into the database."""
from decimal import Decimal

from bookstore.book import Book, BookRepository

INITIAL_BOOKS = [
    {"title": "Effective Java", "price": Decimal("45.00")},
    {"title": "Fluent Python", "price": Decimal("59.99")},
    {"title": "Clean Code", "price": Decimal("32.50")},
]


def main():
    book_repo = BookRepository()
    existing_titles = {b.title for b in book_repo.find_all()}

    for book in INITIAL_BOOKS:
        if book["title"] in existing_titles:
            print(f"Skipping {book['title']} - already exists")
            continue

        result = book_repo.create(Book(**book))
        print(f"Created: {result.title} (id={result.id})")


if __name__ == "__main__":
    main()
