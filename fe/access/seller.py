import requests
from urllib.parse import urljoin


class Seller:
    def __init__(self, url_prefix, user_id: str, username: str = None):
        self.base_url = url_prefix
        self.url_prefix = urljoin(url_prefix, "books/")
        self.user_id = user_id
        self.username = username

    def add_book(self, title: str, price: int, subject: str = "理工科學",
                 condition: str = "九成新", author: str = "Anon", **extra) -> (int, dict):
        json = {
            "title": title,
            "author": author,
            "subject": subject,
            "price": price,
            "condition": condition,
            "seller_id": self.user_id,
            **extra,
        }
        r = requests.post(self.url_prefix, json=json, timeout=5)
        return r.status_code, r.json().get("book")

    def update_book(self, book_id: str, **fields) -> (int, dict):
        json = {"user_id": self.user_id, **fields}
        url = urljoin(self.url_prefix, book_id)
        r = requests.patch(url, json=json, timeout=5)
        return r.status_code, r.json().get("book")

    def mark_sold(self, book_id: str) -> int:
        code, _ = self.update_book(book_id, status="sold")
        return code

    def delete_book(self, book_id: str) -> int:
        url = urljoin(self.url_prefix, book_id)
        r = requests.delete(url, json={"user_id": self.user_id}, timeout=5)
        return r.status_code

    def my_books(self) -> (int, list):
        url = urljoin(self.url_prefix, "seller/{}".format(self.user_id))
        r = requests.get(url, timeout=5)
        return r.status_code, r.json().get("books")

    def complete_order(self, order_id: str) -> int:
        url = urljoin(self.base_url, "orders/{}".format(order_id))
        r = requests.patch(url, json={"user_id": self.user_id, "status": "completed"}, timeout=5)
        return r.status_code
