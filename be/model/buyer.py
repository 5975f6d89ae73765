import logging

from pydantic import ValidationError

from be.model import db_conn
from be.model import error
from be.model.schema import NewOrder, OrderPatch


class Buyer(db_conn.DBConn):
    def __init__(self, storage):
        db_conn.DBConn.__init__(self, storage)

    def list_orders(self, buyer_id: str = None, seller_id: str = None) -> (int, str, list):
        if buyer_id and seller_id:
            orders = self.storage.get_all_orders(
                lambda o: o.buyer_id == buyer_id and o.seller_id == seller_id
            )
        elif buyer_id:
            orders = self.storage.get_orders_by_buyer(buyer_id)
        elif seller_id:
            orders = self.storage.get_orders_by_seller(seller_id)
        else:
            orders = self.storage.get_all_orders()
        return 200, "ok", [o.model_dump(mode="json") for o in orders]

    def get_order(self, order_id: str) -> (int, str, dict):
        if not self.order_id_exist(order_id):
            return error.error_non_exist_order_id(order_id) + (None,)
        return 200, "ok", self.storage.get_order(order_id).model_dump(mode="json")

    def new_order(self, body: dict) -> (int, str, dict):
        try:
            if not isinstance(body, dict):
                return error.error_invalid_input() + (None,)
            fields = dict(body)
            if not fields.get("book_id"):
                return error.error_missing_field("book_id") + (None,)
            if not self.book_id_exist(fields["book_id"]):
                return error.error_non_exist_book_id(fields["book_id"]) + (None,)
            book = self.storage.get_book(fields["book_id"])
            # the seller is whoever listed the book unless the caller says otherwise
            fields.setdefault("seller_id", book.seller_id)
            new_order = NewOrder.model_validate(fields)
            order = self.storage.create_order(new_order)
            logging.info("order {} placed by {} for book {}".format(order.id, order.buyer_id, order.book_id))
        except ValidationError as e:
            return error.error_validation(e) + (None,)
        except Exception as e:
            logging.info("528, {}".format(str(e)))
            return 528, "{}".format(str(e)), None
        return 200, "ok", order.model_dump(mode="json")

    def update_order(self, user_id: str, order_id: str, body: dict) -> (int, str, dict):
        try:
            if not self.order_id_exist(order_id):
                return error.error_non_exist_order_id(order_id) + (None,)
            order = self.storage.get_order(order_id)
            if not user_id or user_id not in (order.buyer_id, order.seller_id):
                return error.error_authorization_fail() + (None,)
            patch = OrderPatch.model_validate(body)
            order = self.storage.update_order(order_id, patch)
            if order is None:
                return error.error_non_exist_order_id(order_id) + (None,)
            logging.info("order {} now {}".format(order.id, order.status))
        except ValidationError as e:
            return error.error_validation(e) + (None,)
        except Exception as e:
            logging.info("528, {}".format(str(e)))
            return 528, "{}".format(str(e)), None
        return 200, "ok", order.model_dump(mode="json")
