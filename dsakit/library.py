"""A lending library and a binary file of fixed-size book records."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

DEFAULT_RECORD_FILE = "filedata.dat"
NAME_FIELD_SIZE = 20
_RECORD_FORMAT = struct.Struct(f"<i{NAME_FIELD_SIZE}sf")
RECORD_SIZE = _RECORD_FORMAT.size


class BookNotFoundError(LookupError):
    """No book with the requested id is in the library."""


class BookStateError(ValueError):
    """The book is not in a state that allows the requested action."""


@dataclass
class Book:
    """A book on the library's shelves."""

    book_id: int
    title: str
    author: str
    issued: bool = False

    def describe(self) -> str:
        status = "Issued" if self.issued else "Available"
        return (
            f"ID: {self.book_id}, Title: {self.title}, "
            f"Author: {self.author}, Status: {status}"
        )


class Library:
    """A collection of books that can be issued and returned."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def add_book(self, book_id: int, title: str, author: str) -> Book:
        book = Book(book_id, title, author)
        self._books.append(book)
        return book

    def _find(self, book_id: int) -> Book:
        for book in self._books:
            if book.book_id == book_id:
                return book
        raise BookNotFoundError("Book not found!")

    def issue_book(self, book_id: int) -> Book:
        """Mark the book as issued."""
        book = self._find(book_id)
        if book.issued:
            raise BookStateError("Book is already issued!")
        book.issued = True
        return book

    def return_book(self, book_id: int) -> Book:
        """Mark an issued book as available again."""
        book = self._find(book_id)
        if not book.issued:
            raise BookStateError("This book was not issued.")
        book.issued = False
        return book

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __len__(self) -> int:
        return len(self._books)


@dataclass
class BookRecord:
    """A book stored as a fixed-size binary record: id, 20-byte name, 32-bit price."""

    book_id: int
    name: str
    price: float

    def pack(self) -> bytes:
        raw_name = self.name.encode("utf-8")[: NAME_FIELD_SIZE - 1]
        return _RECORD_FORMAT.pack(self.book_id, raw_name, self.price)

    @classmethod
    def unpack(cls, data: bytes) -> BookRecord:
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        book_id, raw_name, price = _RECORD_FORMAT.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(book_id, name, price)


def append_record(path: StrPath, record: BookRecord) -> None:
    """Append one record to the file, creating it if needed."""
    with open(path, "ab") as stream:
        stream.write(record.pack())


def read_records(path: StrPath) -> list[BookRecord]:
    """Read every complete record in the file; a trailing partial record is ignored."""
    records = []
    with open(path, "rb") as stream:
        while len(chunk := stream.read(RECORD_SIZE)) == RECORD_SIZE:
            records.append(BookRecord.unpack(chunk))
    return records


def _read_line() -> str | None:
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _read_int() -> int | None:
    line = _read_line()
    if line is None:
        return None
    return int(line.strip())


def _library_menu() -> int:
    library = Library()
    while True:
        print("\nLibrary Management System")
        print("1. Add Book")
        print("2. Display Books")
        print("3. Issue Book")
        print("4. Return Book")
        print("5. Exit")
        print("Enter your choice: ", end="", flush=True)
        line = _read_line()
        if line is None:
            return 0
        choice = line.strip()
        try:
            if choice == "1":
                print("Enter book ID, title, and author: ", end="", flush=True)
                book_id = _read_int()
                title = _read_line()
                author = _read_line()
                if book_id is None or title is None or author is None:
                    return 0
                library.add_book(book_id, title, author)
                print("Book added successfully!")
            elif choice == "2":
                if not len(library):
                    print("No books available in the library.")
                for book in library:
                    print(book.describe())
            elif choice in ("3", "4"):
                action = "issue" if choice == "3" else "return"
                print(f"Enter book ID to {action}: ", end="", flush=True)
                book_id = _read_int()
                if book_id is None:
                    return 0
                if choice == "3":
                    library.issue_book(book_id)
                    print("Book issued successfully!")
                else:
                    library.return_book(book_id)
                    print("Book returned successfully!")
            elif choice == "5":
                print("Exiting...")
                return 0
            else:
                print("Invalid choice! Try again.")
        except (BookNotFoundError, BookStateError) as error:
            print(error.args[0])
        except ValueError:
            print("Invalid input! Try again.")


def _records_menu(path: StrPath) -> int:
    while True:
        print("please select your choice")
        print("1.add new record")
        print("2.display all record")
        print("3.exit")
        line = _read_line()
        if line is None:
            return 0
        choice = line.strip()
        if choice == "1":
            print("Enter book id,title and price")
            try:
                book_id = _read_int()
                name = _read_line()
                price_line = _read_line()
                if book_id is None or name is None or price_line is None:
                    return 0
                price = float(price_line.strip())
            except ValueError:
                print("invalid input")
                continue
            append_record(path, BookRecord(book_id, name, price))
        elif choice == "2":
            try:
                records = read_records(path)
            except FileNotFoundError:
                print("not exit")
                continue
            for record in records:
                print(f"{record.book_id} {record.name} {record.price:g}")
        elif choice == "3":
            return 0
        else:
            print("please choose right option")


def main(argv: list[str] | None = None) -> int:
    """Run the library menu, or the record-file menu with ``--records``."""
    parser = argparse.ArgumentParser(description="Manage a small library of books.")
    parser.add_argument(
        "--records",
        nargs="?",
        const=DEFAULT_RECORD_FILE,
        metavar="FILE",
        help="keep fixed-size book records in FILE instead of the lending library",
    )
    args = parser.parse_args(argv)
    if args.records is not None:
        return _records_menu(args.records)
    return _library_menu()


if __name__ == "__main__":
    raise SystemExit(main())