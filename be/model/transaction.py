from be.model import db_conn


class Transaction(db_conn.DBConn):
    """Completed orders joined with their book and both parties.

    A book deleted after the sale, or an unknown user, shows up as ``None``.
    """

    def __init__(self, storage):
        db_conn.DBConn.__init__(self, storage)

    def book_summary(self, book_id):
        book = self.storage.get_book(book_id)
        if book is None:
            return None
        return {
            "id": book.id,
            "title": book.title,
            "author": book.author,
            "price": book.price,
            "image_url": book.image_url,
            "subject": book.subject,
        }

    def list_transactions(self) -> (int, str, list, dict):
        transactions = [
            {
                **order.model_dump(mode="json"),
                "book": self.book_summary(order.book_id),
                "buyer": self.user_summary(order.buyer_id),
                "seller": self.user_summary(order.seller_id),
            }
            for order in self.storage.get_completed_orders()
        ]
        stats = self.storage.get_transaction_stats()
        return 200, "ok", transactions, stats.as_dict()
