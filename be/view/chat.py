import logging

from flask import Blueprint
from flask import current_app
from flask import request
from flask import jsonify
from be.model import assistant
from be.model import error
from be.view import payload

bp_chat = Blueprint("chat", __name__, url_prefix="/ai")


@bp_chat.route("/chat", methods=["POST"])
def chat():
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message}), code
    book_info = body.get("book_info")
    seller_info = body.get("seller_info")
    user_message = body.get("user_message")
    if not book_info or not seller_info or not user_message:
        return jsonify({"message": "Missing required fields"}), 400
    try:
        response = assistant.generate_chat_response(book_info, seller_info, user_message)
    except assistant.AssistantError as e:
        logging.error("AI Chat Error: {}".format(e))
        return jsonify({"message": str(e)}), 503
    return jsonify({"message": "ok", "response": response}), 200


@bp_chat.route("/suggest", methods=["GET"])
def suggest():
    storage = current_app.config["STORAGE"]
    books = [
        {"title": b.title, "author": b.author}
        for b in storage.get_all_books(lambda b: b.status == "available")
    ]
    suggestion = assistant.suggest_for_search(request.args.get("q", ""), books)
    return jsonify({"message": "ok", "suggestion": suggestion}), 200
