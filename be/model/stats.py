"""Aggregates computed from store listings on every request."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple

from be.model.schema import Book, Order, Review

# kg CO2e saved per second-hand book sold
CARBON_SAVED_PER_BOOK_KG = 2.5


class SellerRating(NamedTuple):
    average: float
    count: int

    def as_dict(self) -> dict:
        return {"average": self.average, "count": self.count}


class TransactionStats(NamedTuple):
    total_books: int
    total_value: int
    carbon_saved: float

    def as_dict(self) -> dict:
        return {
            "total_books": self.total_books,
            "total_value": self.total_value,
            "carbon_saved": self.carbon_saved,
        }


def round_half_up(value: float, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def seller_rating(reviews: Iterable[Review]) -> SellerRating:
    ratings = [r.rating for r in reviews]
    if not ratings:
        return SellerRating(0, 0)
    return SellerRating(round_half_up(sum(ratings) / len(ratings)), len(ratings))


def transaction_stats(sold_books: Iterable[Book], completed_orders: Iterable[Order] = ()) -> TransactionStats:
    # completed orders are listed alongside the stats but do not change them
    books = list(sold_books)
    total_books = len(books)
    total_value = sum(b.price for b in books)
    return TransactionStats(total_books, total_value, total_books * CARBON_SAVED_PER_BOOK_KG)
