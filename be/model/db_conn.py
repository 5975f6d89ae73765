class DBConn:
    """Base for the request-handling services; holds the injected store."""

    def __init__(self, storage):
        self.storage = storage

    def user_id_exist(self, user_id):
        return self.storage.get_user(user_id) is not None

    def book_id_exist(self, book_id):
        return self.storage.get_book(book_id) is not None

    def order_id_exist(self, order_id):
        return self.storage.get_order(order_id) is not None

    def user_summary(self, user_id):
        user = self.storage.get_user(user_id)
        if user is None:
            return None
        return {"id": user.id, "username": user.username}

    def seller_info(self, seller_id):
        seller = self.storage.get_user(seller_id)
        if seller is None:
            return None
        return seller.public()
