import logging

from pydantic import ValidationError

from be.model import db_conn
from be.model import error
from be.model.schema import BookPatch, NewBook

logger = logging.getLogger(__name__)


class Seller(db_conn.DBConn):
    def __init__(self, storage):
        db_conn.DBConn.__init__(self, storage)

    def _with_seller(self, book) -> dict:
        return {**book.model_dump(mode="json"), "seller": self.seller_info(book.seller_id)}

    def list_books(self) -> (int, str, list):
        books = self.storage.get_all_books()
        return 200, "ok", [self._with_seller(b) for b in books]

    def books_of_seller(self, seller_id: str) -> (int, str, list):
        if not seller_id:
            return error.error_missing_field("seller_id") + ([],)
        books = self.storage.get_books_by_seller(seller_id)
        return 200, "ok", [b.model_dump(mode="json") for b in books]

    def get_book(self, book_id: str) -> (int, str, dict):
        if not self.book_id_exist(book_id):
            return error.error_non_exist_book_id(book_id) + (None,)
        book = self.storage.get_book(book_id)
        return 200, "ok", self._with_seller(book)

    def add_book(self, body: dict) -> (int, str, dict):
        try:
            new_book = NewBook.model_validate(body)
            book = self.storage.create_book(new_book)
            logger.info("seller %s listed book %s", book.seller_id, book.id)
        except ValidationError as e:
            return error.error_validation(e) + (None,)
        except Exception as e:
            logging.error("add_book failed: {}".format(e))
            return 528, "{}".format(str(e)), None
        return 200, "ok", book.model_dump(mode="json")

    def _check_owner(self, user_id: str, book_id: str) -> (int, str):
        if not self.book_id_exist(book_id):
            return error.error_non_exist_book_id(book_id)
        book = self.storage.get_book(book_id)
        if not user_id or book.seller_id != user_id:
            return error.error_authorization_fail()
        return 200, "ok"

    def update_book(self, user_id: str, book_id: str, body: dict) -> (int, str, dict):
        try:
            code, message = self._check_owner(user_id, book_id)
            if code != 200:
                return code, message, None
            patch = BookPatch.model_validate(body)
            book = self.storage.update_book(book_id, patch)
            if book is None:
                return error.error_non_exist_book_id(book_id) + (None,)
            logger.info("book %s updated by %s", book_id, user_id)
        except ValidationError as e:
            return error.error_validation(e) + (None,)
        except Exception as e:
            logging.error("update_book failed: {}".format(e))
            return 528, "{}".format(str(e)), None
        return 200, "ok", book.model_dump(mode="json")

    def delete_book(self, user_id: str, book_id: str) -> (int, str):
        try:
            code, message = self._check_owner(user_id, book_id)
            if code != 200:
                return code, message
            if not self.storage.delete_book(book_id):
                return error.error_non_exist_book_id(book_id)
            logger.info("book %s removed by %s", book_id, user_id)
        except Exception as e:
            logging.error("delete_book failed: {}".format(e))
            return 528, "{}".format(str(e))
        return 200, "ok"
