import pytest

from be.model.buyer import Buyer
from be.model.review import ReviewLedger
from be.model.schema import NewUser
from be.model.seller import Seller
from be.model.transaction import Transaction
from be.model.user import User


def book_body(seller_id, **extra):
    body = {
        "title": "經濟學原理",
        "author": "Mankiw",
        "subject": "商業管理",
        "price": 380,
        "condition": "九成新",
        "seller_id": seller_id,
    }
    body.update(extra)
    return body


class TestUserService:
    @pytest.fixture(autouse=True)
    def pre_run_initialization(self, storage):
        self.storage = storage
        self.user = User(storage)
        yield

    def test_register_ok(self):
        code, message, profile = self.user.register(
            {"username": "amy", "password": "pw", "email": "amy@x.tw", "school": "NTU"}
        )
        assert (code, message) == (200, "ok")
        assert "password" not in profile
        assert self.storage.get_user(profile["id"]).password == "pw"

    def test_register_exist_username(self):
        self.user.register({"username": "amy", "password": "pw", "email": "e"})
        code, _, profile = self.user.register({"username": "amy", "password": "other", "email": "e"})
        assert code == 409
        assert profile is None

    def test_register_email_is_free_text(self):
        code, _, profile = self.user.register({"username": "bo", "password": "pw", "email": "bo at campus"})
        assert code == 200
        assert profile["email"] == "bo at campus"
        assert self.user.register({"username": "cy", "password": "pw", "email": ""})[0] == 400

    def test_register_invalid(self):
        code, message, _ = self.user.register({"username": "amy"})
        assert code == 400
        assert "password" in message

    def test_login(self):
        self.user.register({"username": "amy", "password": "pw", "email": "e"})
        code, _, profile = self.user.login("amy", "pw")
        assert code == 200 and profile["username"] == "amy"
        assert self.user.login("amy", "wrong")[0] == 401
        assert self.user.login("ghost", "pw")[0] == 401
        assert self.user.login("", "pw")[0] == 400
        assert self.user.login("amy", "")[0] == 400

    def test_profile(self):
        _, _, profile = self.user.register({"username": "amy", "password": "pw", "email": "e"})
        assert self.user.get_profile(profile["id"]) == (200, "ok", profile)
        assert self.user.get_profile("nope")[0] == 404


class TestSellerService:
    @pytest.fixture(autouse=True)
    def pre_run_initialization(self, storage):
        self.storage = storage
        self.owner = storage.create_user(NewUser(username="owner", password="pw", email="e"))
        self.seller = Seller(storage)
        yield

    def test_add_book(self):
        code, _, book = self.seller.add_book(book_body(self.owner.id))
        assert code == 200
        assert book["status"] == "available"
        assert isinstance(book["created_at"], str)

    @pytest.mark.parametrize(
        "override",
        [{"price": 0}, {"price": -5}, {"subject": "Astrology"}, {"condition": "like new"}, {"status": "lost"}],
    )
    def test_add_book_rejected(self, override):
        code, _, book = self.seller.add_book(book_body(self.owner.id, **override))
        assert code == 400
        assert book is None
        assert self.storage.get_all_books() == []

    def test_get_book_with_seller(self):
        _, _, book = self.seller.add_book(book_body(self.owner.id))
        code, _, found = self.seller.get_book(book["id"])
        assert code == 200
        assert found["seller"]["username"] == "owner"
        assert "password" not in found["seller"]

    def test_book_with_unknown_seller(self):
        _, _, book = self.seller.add_book(book_body("ghost"))
        _, _, books = self.seller.list_books()
        assert books[0]["id"] == book["id"]
        assert books[0]["seller"] is None

    def test_get_missing_book(self):
        assert self.seller.get_book("nope")[0] == 404

    def test_update_by_owner(self):
        _, _, book = self.seller.add_book(book_body(self.owner.id))
        code, _, updated = self.seller.update_book(self.owner.id, book["id"], {"status": "sold"})
        assert code == 200
        assert updated["status"] == "sold"
        assert updated["created_at"] == book["created_at"]

    def test_update_by_other_user(self):
        _, _, book = self.seller.add_book(book_body(self.owner.id))
        assert self.seller.update_book("intruder", book["id"], {"status": "sold"})[0] == 401
        assert self.seller.update_book(None, book["id"], {"status": "sold"})[0] == 401
        assert self.storage.get_book(book["id"]).status == "available"

    def test_update_invalid_patch(self):
        _, _, book = self.seller.add_book(book_body(self.owner.id))
        assert self.seller.update_book(self.owner.id, book["id"], {"status": "gone"})[0] == 400

    def test_update_missing(self):
        assert self.seller.update_book(self.owner.id, "nope", {"status": "sold"})[0] == 404

    def test_delete(self):
        _, _, book = self.seller.add_book(book_body(self.owner.id))
        assert self.seller.delete_book("intruder", book["id"])[0] == 401
        assert self.seller.delete_book(self.owner.id, book["id"]) == (200, "ok")
        assert self.seller.delete_book(self.owner.id, book["id"])[0] == 404

    def test_books_of_seller(self):
        self.seller.add_book(book_body(self.owner.id, title="first"))
        self.seller.add_book(book_body(self.owner.id, title="second"))
        code, _, books = self.seller.books_of_seller(self.owner.id)
        assert code == 200
        assert [b["title"] for b in books] == ["second", "first"]
        assert self.seller.books_of_seller("")[0] == 400


class TestOrderAndReviewFlow:
    @pytest.fixture(autouse=True)
    def pre_run_initialization(self, storage):
        self.storage = storage
        self.owner = storage.create_user(NewUser(username="owner", password="pw", email="e"))
        self.customer = storage.create_user(NewUser(username="customer", password="pw", email="e"))
        _, _, self.book = Seller(storage).add_book(book_body(self.owner.id, price=400))
        self.buyer = Buyer(storage)
        self.ledger = ReviewLedger(storage)
        yield

    def place_order(self):
        code, _, order = self.buyer.new_order({"book_id": self.book["id"], "buyer_id": self.customer.id})
        assert code == 200
        return order

    def test_new_order_takes_seller_from_book(self):
        order = self.place_order()
        assert order["seller_id"] == self.owner.id
        assert order["status"] == "pending"

    def test_new_order_for_missing_book(self):
        code, _, order = self.buyer.new_order({"book_id": "nope", "buyer_id": self.customer.id})
        assert code == 404
        assert order is None

    def test_new_order_without_buyer(self):
        assert self.buyer.new_order({"book_id": self.book["id"]})[0] == 400

    def test_new_order_body_must_be_object(self):
        assert self.buyer.new_order([self.book["id"]]) == (400, "invalid input data", None)
        assert self.storage.get_all_orders() == []

    def test_existence_checks(self):
        order = self.place_order()
        assert self.buyer.book_id_exist(self.book["id"])
        assert self.buyer.order_id_exist(order["id"])
        assert self.buyer.user_id_exist(self.customer.id)
        self.storage.delete_book(self.book["id"])
        assert not self.buyer.book_id_exist(self.book["id"])
        assert not self.buyer.order_id_exist("nope")
        assert not self.buyer.user_id_exist("nope")

    def test_update_order_parties_only(self):
        order = self.place_order()
        assert self.buyer.update_order("intruder", order["id"], {"status": "completed"})[0] == 401
        code, _, updated = self.buyer.update_order(self.owner.id, order["id"], {"status": "completed"})
        assert code == 200 and updated["status"] == "completed"
        assert self.buyer.update_order(self.owner.id, "nope", {"status": "completed"})[0] == 404

    def test_list_orders_filters(self):
        order = self.place_order()
        assert self.buyer.list_orders(buyer_id=self.customer.id)[2] == [order]
        assert self.buyer.list_orders(seller_id=self.owner.id)[2] == [order]
        assert self.buyer.list_orders(buyer_id=self.owner.id)[2] == []
        assert self.buyer.list_orders(buyer_id=self.customer.id, seller_id=self.owner.id)[2] == [order]
        assert self.buyer.get_order(order["id"]) == (200, "ok", order)
        assert self.buyer.get_order("nope")[0] == 404

    def test_one_review_per_order(self):
        order = self.place_order()
        body = {
            "order_id": order["id"],
            "seller_id": self.owner.id,
            "buyer_id": self.customer.id,
            "rating": 5,
        }
        assert self.ledger.add_review(body)[0] == 200
        code, _, review = self.ledger.add_review(dict(body, rating=1))
        assert code == 409
        assert review is None
        assert len(self.storage.get_all_reviews()) == 1

    @pytest.mark.parametrize("rating", [0, 6, "five"])
    def test_review_rating_range(self, rating):
        order = self.place_order()
        body = {"order_id": order["id"], "seller_id": self.owner.id, "buyer_id": self.customer.id, "rating": rating}
        assert self.ledger.add_review(body)[0] == 400

    def test_seller_reviews_and_rating(self):
        for rating in (5, 4, 5):
            order = self.place_order()
            self.ledger.add_review(
                {"order_id": order["id"], "seller_id": self.owner.id, "buyer_id": self.customer.id, "rating": rating}
            )
        code, _, reviews, rating = self.ledger.seller_reviews(self.owner.id)
        assert code == 200
        assert len(reviews) == 3
        assert reviews[0]["buyer"] == {"id": self.customer.id, "username": "customer"}
        assert rating == {"average": 4.7, "count": 3}

    def test_list_reviews_with_unknown_users(self):
        self.ledger.add_review({"order_id": "o", "seller_id": "ghost", "buyer_id": "ghost", "rating": 3})
        _, _, reviews = self.ledger.list_reviews()
        assert reviews[0]["buyer"] is None and reviews[0]["seller"] is None

    def test_transactions_tolerate_deleted_book(self):
        order = self.place_order()
        self.buyer.update_order(self.owner.id, order["id"], {"status": "completed"})
        Seller(self.storage).update_book(self.owner.id, self.book["id"], {"status": "sold"})

        code, _, transactions, stats = Transaction(self.storage).list_transactions()
        assert code == 200
        assert transactions[0]["book"]["price"] == 400
        assert transactions[0]["buyer"]["username"] == "customer"
        assert stats == {"total_books": 1, "total_value": 400, "carbon_saved": 2.5}

        self.storage.delete_book(self.book["id"])
        _, _, transactions, stats = Transaction(self.storage).list_transactions()
        assert transactions[0]["id"] == order["id"]
        assert transactions[0]["book"] is None
        assert stats["total_books"] == 0
