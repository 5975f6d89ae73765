import logging

from pydantic import ValidationError

from be.model import db_conn
from be.model import error
from be.model.schema import ReviewInput

logger = logging.getLogger(__name__)


class ReviewLedger(db_conn.DBConn):
    def __init__(self, storage):
        db_conn.DBConn.__init__(self, storage)

    def list_reviews(self) -> (int, str, list):
        reviews = [
            {
                **r.model_dump(mode="json"),
                "buyer": self.user_summary(r.buyer_id),
                "seller": self.user_summary(r.seller_id),
            }
            for r in self.storage.get_all_reviews()
        ]
        return 200, "ok", reviews

    def seller_reviews(self, seller_id: str) -> (int, str, list, dict):
        reviews = [
            {**r.model_dump(mode="json"), "buyer": self.user_summary(r.buyer_id)}
            for r in self.storage.get_reviews_by_seller(seller_id)
        ]
        rating = self.storage.get_seller_rating(seller_id)
        return 200, "ok", reviews, rating.as_dict()

    def add_review(self, body: dict) -> (int, str, dict):
        try:
            new_review = ReviewInput.model_validate(body)
            # the store accepts duplicates, so one review per order is enforced here
            if self.storage.get_review_by_order(new_review.order_id) is not None:
                return error.error_exist_review(new_review.order_id) + (None,)
            review = self.storage.create_review(new_review)
            logger.info("review %s on order %s", review.id, review.order_id)
        except ValidationError as e:
            return error.error_validation(e) + (None,)
        except Exception as e:
            logging.error("add_review failed: {}".format(e))
            return 528, "{}".format(str(e)), None
        return 200, "ok", review.model_dump(mode="json")
