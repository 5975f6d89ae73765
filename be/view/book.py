from flask import Blueprint
from flask import current_app
from flask import request
from flask import jsonify
from be.model import error
from be.model import seller
from be.view import payload
from be.model.schema import BOOK_CONDITIONS, BOOK_STATUSES, BOOK_SUBJECTS

bp_book = Blueprint("book", __name__, url_prefix="/books")


@bp_book.route("/", methods=["GET"])
def list_books():
    s = seller.Seller(current_app.config["STORAGE"])
    code, message, books = s.list_books()
    return jsonify({"message": message, "books": books}), code


@bp_book.route("/options", methods=["GET"])
def options():
    return jsonify({
        "message": "ok",
        "subjects": list(BOOK_SUBJECTS),
        "conditions": list(BOOK_CONDITIONS),
        "statuses": list(BOOK_STATUSES),
    }), 200


@bp_book.route("/seller/<seller_id>", methods=["GET"])
def books_of_seller(seller_id):
    s = seller.Seller(current_app.config["STORAGE"])
    code, message, books = s.books_of_seller(seller_id)
    return jsonify({"message": message, "books": books}), code


@bp_book.route("/<book_id>", methods=["GET"])
def get_book(book_id):
    s = seller.Seller(current_app.config["STORAGE"])
    code, message, book = s.get_book(book_id)
    return jsonify({"message": message, "book": book}), code


@bp_book.route("/", methods=["POST"])
def add_book():
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "book": None}), code
    s = seller.Seller(current_app.config["STORAGE"])
    code, message, book = s.add_book(body)
    if code == 200:
        code = 201
    return jsonify({"message": message, "book": book}), code


@bp_book.route("/<book_id>", methods=["PATCH"])
def update_book(book_id):
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "book": None}), code
    body = dict(body)
    user_id = body.pop("user_id", None)
    s = seller.Seller(current_app.config["STORAGE"])
    code, message, book = s.update_book(user_id, book_id, body)
    return jsonify({"message": message, "book": book}), code


@bp_book.route("/<book_id>", methods=["DELETE"])
def delete_book(book_id):
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message}), code
    user_id = body.get("user_id") or request.args.get("user_id")
    s = seller.Seller(current_app.config["STORAGE"])
    code, message = s.delete_book(user_id, book_id)
    return jsonify({"message": message}), code
