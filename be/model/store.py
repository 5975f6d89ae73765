# be/model/store.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from be.model import seed as sample_data
from be.model import stats
from be.model.schema import (
    Book,
    BookPatch,
    NewBook,
    NewOrder,
    NewReview,
    NewUser,
    Order,
    OrderPatch,
    Review,
    User,
)

logger = logging.getLogger(__name__)

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _created_key(record) -> datetime:
    created_at = getattr(record, "created_at", None)
    if created_at is None:
        return EPOCH
    if created_at.tzinfo is None:
        return created_at.replace(tzinfo=timezone.utc)
    return created_at


def newest_first(records: Iterable, predicate: Optional[Callable] = None) -> list:
    """Filter ``records`` and order them by ``created_at``, newest first.

    ``records`` is expected in insertion order. It is reversed before the
    stable sort so that records sharing a timestamp come out newest-inserted
    first; records without a timestamp sort as the oldest.
    """
    rows = list(records)
    rows.reverse()
    if predicate is not None:
        rows = [r for r in rows if predicate(r)]
    return sorted(rows, key=_created_key, reverse=True)


class MemStorage:
    """Process-lifetime, in-memory owner of every user, book, order and review.

    One instance is built at startup and handed to the request handlers.
    Nothing here validates input or raises for a missing id: lookups return
    ``None``, ``delete_book`` returns ``False``. References between records
    (``seller_id``, ``book_id`` ...) are plain ids and may dangle.
    """

    def __init__(self, seed: bool = False, clock: Callable[[], datetime] = utc_now):
        self.clock = clock
        self.users: Dict[str, User] = {}
        self.books: Dict[str, Book] = {}
        self.orders: Dict[str, Order] = {}
        self.reviews: Dict[str, Review] = {}
        if seed:
            sample_data.seed_sample_data(self)

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    # users

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def get_all_users(self) -> List[User]:
        return list(self.users.values())

    def create_user(self, new_user: NewUser) -> User:
        user = User(**new_user.model_dump(), id=self._new_id())
        self.users[user.id] = user
        logger.debug("created user %s (%s)", user.id, user.username)
        return user

    # books

    def get_all_books(self, predicate: Optional[Callable[[Book], bool]] = None) -> List[Book]:
        return newest_first(self.books.values(), predicate)

    def get_book(self, book_id: str) -> Optional[Book]:
        return self.books.get(book_id)

    def get_books_by_seller(self, seller_id: str) -> List[Book]:
        return self.get_all_books(lambda b: b.seller_id == seller_id)

    def get_sold_books(self) -> List[Book]:
        return self.get_all_books(lambda b: b.status == "sold")

    def create_book(self, new_book: NewBook) -> Book:
        book = Book(**new_book.model_dump(), id=self._new_id(), created_at=self.clock())
        self.books[book.id] = book
        logger.debug("created book %s for seller %s", book.id, book.seller_id)
        return book

    def update_book(self, book_id: str, patch: BookPatch) -> Optional[Book]:
        book = self.books.get(book_id)
        if book is None:
            return None
        updated = book.model_copy(update=patch.model_dump(exclude_unset=True, exclude_none=True))
        self.books[book_id] = updated
        logger.debug("updated book %s", book_id)
        return updated

    def delete_book(self, book_id: str) -> bool:
        if self.books.pop(book_id, None) is None:
            return False
        logger.debug("deleted book %s", book_id)
        return True

    # orders

    def get_all_orders(self, predicate: Optional[Callable[[Order], bool]] = None) -> List[Order]:
        return newest_first(self.orders.values(), predicate)

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)

    def get_orders_by_buyer(self, buyer_id: str) -> List[Order]:
        return self.get_all_orders(lambda o: o.buyer_id == buyer_id)

    def get_orders_by_seller(self, seller_id: str) -> List[Order]:
        return self.get_all_orders(lambda o: o.seller_id == seller_id)

    def get_completed_orders(self) -> List[Order]:
        return self.get_all_orders(lambda o: o.status == "completed")

    def create_order(self, new_order: NewOrder) -> Order:
        order = Order(**new_order.model_dump(), id=self._new_id(), created_at=self.clock())
        self.orders[order.id] = order
        logger.debug("created order %s for book %s", order.id, order.book_id)
        return order

    def update_order(self, order_id: str, patch: OrderPatch) -> Optional[Order]:
        order = self.orders.get(order_id)
        if order is None:
            return None
        updated = order.model_copy(update=patch.model_dump(exclude_unset=True, exclude_none=True))
        self.orders[order_id] = updated
        logger.debug("updated order %s", order_id)
        return updated

    # reviews

    def get_all_reviews(self, predicate: Optional[Callable[[Review], bool]] = None) -> List[Review]:
        return newest_first(self.reviews.values(), predicate)

    def get_reviews_by_seller(self, seller_id: str) -> List[Review]:
        return self.get_all_reviews(lambda r: r.seller_id == seller_id)

    def get_review_by_order(self, order_id: str) -> Optional[Review]:
        for review in self.reviews.values():
            if review.order_id == order_id:
                return review
        return None

    def create_review(self, new_review: NewReview) -> Review:
        # one review per order is checked by the caller, not here
        review = Review(**new_review.model_dump(), id=self._new_id(), created_at=self.clock())
        self.reviews[review.id] = review
        logger.debug("created review %s for order %s", review.id, review.order_id)
        return review

    # aggregates

    def get_seller_rating(self, seller_id: str) -> stats.SellerRating:
        return stats.seller_rating(self.get_reviews_by_seller(seller_id))

    def get_transaction_stats(self) -> stats.TransactionStats:
        return stats.transaction_stats(self.get_sold_books(), self.get_completed_orders())
