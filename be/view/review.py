from flask import Blueprint
from flask import current_app
from flask import jsonify
from be.model import error
from be.model import review
from be.view import payload

bp_review = Blueprint("review", __name__, url_prefix="/reviews")


@bp_review.route("/", methods=["GET"])
def list_reviews():
    ledger = review.ReviewLedger(current_app.config["STORAGE"])
    code, message, reviews = ledger.list_reviews()
    return jsonify({"message": message, "reviews": reviews}), code


@bp_review.route("/seller/<seller_id>", methods=["GET"])
def seller_reviews(seller_id):
    ledger = review.ReviewLedger(current_app.config["STORAGE"])
    code, message, reviews, rating = ledger.seller_reviews(seller_id)
    return jsonify({"message": message, "reviews": reviews, "rating": rating}), code


@bp_review.route("/", methods=["POST"])
def add_review():
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "review": None}), code
    ledger = review.ReviewLedger(current_app.config["STORAGE"])
    code, message, created = ledger.add_review(body)
    if code == 200:
        code = 201
    return jsonify({"message": message, "review": created}), code
