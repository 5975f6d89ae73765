"""Catalogue search over the books currently for sale.

Functions:
 - search_books(storage, q, subject=None, condition=None, min_price=None,
   max_price=None, page=1, page_size=10)

Matches ``q`` case-insensitively against title, author and subject of
available books, newest first, then paginates.
"""
import logging


def _matches(book, q, subject, condition, min_price, max_price):
    if book.status != "available":
        return False
    if q:
        needle = q.lower()
        if not any(needle in field.lower() for field in (book.title, book.author, book.subject)):
            return False
    if subject and book.subject != subject:
        return False
    if condition and book.condition != condition:
        return False
    if min_price is not None and book.price < min_price:
        return False
    if max_price is not None and book.price > max_price:
        return False
    return True


def search_books(storage, q: str = "", subject: str = None, condition: str = None,
                 min_price: int = None, max_price: int = None, page: int = 1, page_size: int = 10):
    """Search available books.
    Parameters:
    - q: keyword string
    - subject/condition: exact match filters
    - min_price/max_price: inclusive price bounds
    - page/page_size: pagination
    """
    try:
        if page < 1 or page_size < 1:
            return 400, "page and page_size must be positive", [], 0
        books = storage.get_all_books(
            lambda b: _matches(b, q, subject, condition, min_price, max_price)
        )
        total = len(books)
        offset = (page - 1) * page_size
        results = [b.model_dump(mode="json") for b in books[offset:offset + page_size]]
        return 200, "ok", results, total
    except Exception as e:
        logging.error("search failed: {}".format(e))
        return 528, f"Search failed: {str(e)}", [], 0
