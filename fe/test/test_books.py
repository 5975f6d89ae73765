import uuid

import pytest
import requests
from urllib.parse import urljoin

from fe import conf
from fe.access.new_seller import register_new_seller


class TestBooks:
    @pytest.fixture(autouse=True)
    def pre_run_initialization(self):
        self.seller = register_new_seller("tbook_{}".format(uuid.uuid4().hex), "pw")
        self.other = register_new_seller("tother_{}".format(uuid.uuid4().hex), "pw")
        yield

    def test_add_book(self):
        code, book = self.seller.add_book("線性代數", 400, description="MIT 經典教材")
        assert code == 201
        assert book["seller_id"] == self.seller.user_id
        assert book["status"] == "available"
        assert book["description"] == "MIT 經典教材"
        assert book["created_at"]

    def test_add_book_invalid(self):
        code, book = self.seller.add_book("線性代數", 0)
        assert code == 400
        assert book is None
        code, _ = self.seller.add_book("線性代數", 100, condition="brand new")
        assert code == 400

    def test_get_book_with_seller(self):
        _, book = self.seller.add_book("會計學原理", 320)
        r = requests.get(urljoin(conf.URL, "books/{}".format(book["id"])), timeout=5)
        assert r.status_code == 200
        found = r.json()["book"]
        assert found["title"] == "會計學原理"
        assert found["seller"]["id"] == self.seller.user_id
        assert "password" not in found["seller"]

    def test_get_missing_book(self):
        r = requests.get(urljoin(conf.URL, "books/does-not-exist"), timeout=5)
        assert r.status_code == 404

    def test_list_newest_first(self):
        _, first = self.seller.add_book("first", 100)
        _, second = self.seller.add_book("second", 100)
        r = requests.get(urljoin(conf.URL, "books/"), timeout=5)
        assert r.status_code == 200
        ids = [b["id"] for b in r.json()["books"]]
        assert ids.index(second["id"]) < ids.index(first["id"])
        created = [b["created_at"] for b in r.json()["books"]]
        assert created == sorted(created, reverse=True)

    def test_books_of_seller(self):
        _, first = self.seller.add_book("first", 100)
        _, second = self.seller.add_book("second", 100)
        self.other.add_book("not mine", 100)
        code, books = self.seller.my_books()
        assert code == 200
        assert [b["id"] for b in books] == [second["id"], first["id"]]

    def test_mark_sold(self):
        _, book = self.seller.add_book("有機化學", 550)
        code, updated = self.seller.update_book(book["id"], status="sold", id="forged")
        assert code == 200
        assert updated["status"] == "sold"
        assert updated["id"] == book["id"]
        assert updated["created_at"] == book["created_at"]
        assert updated["price"] == 550

    def test_update_by_other_seller(self):
        _, book = self.seller.add_book("有機化學", 550)
        code, _ = self.other.update_book(book["id"], price=1)
        assert code == 401
        r = requests.get(urljoin(conf.URL, "books/{}".format(book["id"])), timeout=5)
        assert r.json()["book"]["price"] == 550

    def test_update_missing_book(self):
        code, _ = self.seller.update_book("does-not-exist", status="sold")
        assert code == 404

    def test_delete(self):
        _, book = self.seller.add_book("心理學導論", 280)
        assert self.other.delete_book(book["id"]) == 401
        assert self.seller.delete_book(book["id"]) == 200
        assert self.seller.delete_book(book["id"]) == 404
        r = requests.get(urljoin(conf.URL, "books/{}".format(book["id"])), timeout=5)
        assert r.status_code == 404


def test_options():
    r = requests.get(urljoin(conf.URL, "books/options"), timeout=5)
    assert r.status_code == 200
    data = r.json()
    assert data["conditions"][0] == "全新"
    assert data["conditions"][-1] == "六成新以下"
    assert "法律政治" in data["subjects"]
    assert data["statuses"] == ["available", "reserved", "sold"]
