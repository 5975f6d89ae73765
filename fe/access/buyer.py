import requests
from urllib.parse import urljoin


class Buyer:
    def __init__(self, url_prefix, user_id: str, username: str = None):
        self.url_prefix = url_prefix
        self.user_id = user_id
        self.username = username

    def new_order(self, book_id: str, message: str = None) -> (int, dict):
        json = {"book_id": book_id, "buyer_id": self.user_id, "message": message}
        r = requests.post(urljoin(self.url_prefix, "orders/"), json=json, timeout=5)
        return r.status_code, r.json().get("order")

    def my_orders(self) -> (int, list):
        r = requests.get(
            urljoin(self.url_prefix, "orders/"), params={"buyer_id": self.user_id}, timeout=5
        )
        return r.status_code, r.json().get("orders")

    def review(self, order: dict, rating: int, comment: str = None) -> (int, dict):
        json = {
            "order_id": order["id"],
            "seller_id": order["seller_id"],
            "buyer_id": self.user_id,
            "rating": rating,
            "comment": comment,
        }
        r = requests.post(urljoin(self.url_prefix, "reviews/"), json=json, timeout=5)
        return r.status_code, r.json().get("review")
