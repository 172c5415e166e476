#!/usr/bin/env python3
"""Bookstore CLI for managing the books table."""

import argparse
import sys
from decimal import Decimal, InvalidOperation

import questionary
from rich.console import Console
from rich.table import Table

from bookstore.book import Book, BookRepository
from bookstore.errors import PersistenceError

console = Console()


def price_type(value: str) -> Decimal:
    """argparse type for exact decimal prices."""
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid price: {value!r}")
    if not price.is_finite() or price < 0:
        raise argparse.ArgumentTypeError(f"invalid price: {value!r}")
    return price


def render_books(books: list[Book]) -> Table:
    table = Table(title="Books")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Price", justify="right")
    for book in books:
        table.add_row(str(book.id), book.title, f"{book.price:.2f}")
    return table


def add_book(repo: BookRepository, args) -> int:
    """Create a book and print its assigned id."""
    book = repo.create(Book(title=args.title, price=args.price))
    console.print(f"[green]Created book {book.id}:[/] {book.title} ({book.price:.2f})")
    return 0


def show_book(repo: BookRepository, args) -> int:
    book = repo.find_by_id(args.id)
    if book is None:
        console.print(f"[red]No book found with ID {args.id}.[/]")
        return 1
    console.print(render_books([book]))
    return 0


def list_books(repo: BookRepository, args) -> int:
    books = repo.find_all()
    if not books:
        console.print("[dim]No books found.[/]")
        return 0
    console.print(render_books(books))
    return 0


def update_book(repo: BookRepository, args) -> int:
    book = repo.update(Book(id=args.id, title=args.title, price=args.price))
    console.print(f"[green]Updated book {book.id}:[/] {book.title} ({book.price:.2f})")
    return 0


def delete_book(repo: BookRepository, args) -> int:
    """Delete a book after confirmation."""
    if not args.yes:
        summary = f"Will permanently delete the book with ID [bold]{args.id}[/]."
        console.print(f"[yellow]{summary}[/]")
        if not questionary.confirm("Proceed with these changes?").ask():
            console.print("[dim]Cancelled.[/]")
            return 0

    if repo.delete_by_id(args.id):
        console.print(f"[green]Deleted book {args.id}.[/]")
        return 0
    console.print(f"[red]Book {args.id} was not deleted.[/]")
    return 1


COMMANDS = {
    "add": add_book,
    "show": show_book,
    "list": list_books,
    "update": update_book,
    "delete": delete_book,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookstore", description="Bookstore CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add a book")
    add.add_argument("title")
    add.add_argument("price", type=price_type)

    show = subparsers.add_parser("show", help="Show a book by ID")
    show.add_argument("id", type=int)

    subparsers.add_parser("list", help="List all books")

    update = subparsers.add_parser("update", help="Update a book's title and price")
    update.add_argument("id", type=int)
    update.add_argument("title")
    update.add_argument("price", type=price_type)

    delete = subparsers.add_parser("delete", help="Delete a book by ID")
    delete.add_argument("id", type=int)
    delete.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    return parser


def main(argv=None, repo: BookRepository = None) -> int:
    args = build_parser().parse_args(argv)
    repo = repo or BookRepository()

    try:
        return COMMANDS[args.command](repo, args)
    except PersistenceError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
