from flask import Blueprint, current_app, request, jsonify
from be.model.search import search_books

bp_search = Blueprint("search", __name__, url_prefix="/search")


def _int_arg(name, default=None):
    try:
        return int(request.args.get(name, default))
    except (TypeError, ValueError):
        return default


@bp_search.route("/", methods=["GET"])
def search():
    q = request.args.get("q", "")
    subject = request.args.get("subject") or None
    condition = request.args.get("condition") or None
    min_price = _int_arg("min_price")
    max_price = _int_arg("max_price")
    page = _int_arg("page", 1)
    page_size = _int_arg("page_size", 10)

    code, message, results, total = search_books(
        current_app.config["STORAGE"], q, subject=subject, condition=condition,
        min_price=min_price, max_price=max_price, page=page, page_size=page_size,
    )
    return jsonify({"message": message, "results": results, "total": total, "page": page, "page_size": page_size}), code
