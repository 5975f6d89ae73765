from flask import Blueprint
from flask import current_app
from flask import request
from flask import jsonify
from be.model import buyer
from be.model import error
from be.view import payload

bp_order = Blueprint("order", __name__, url_prefix="/orders")


@bp_order.route("/", methods=["GET"])
def list_orders():
    b = buyer.Buyer(current_app.config["STORAGE"])
    code, message, orders = b.list_orders(
        buyer_id=request.args.get("buyer_id"), seller_id=request.args.get("seller_id")
    )
    return jsonify({"message": message, "orders": orders}), code


@bp_order.route("/<order_id>", methods=["GET"])
def get_order(order_id):
    b = buyer.Buyer(current_app.config["STORAGE"])
    code, message, order = b.get_order(order_id)
    return jsonify({"message": message, "order": order}), code


@bp_order.route("/", methods=["POST"])
def new_order():
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "order": None}), code
    b = buyer.Buyer(current_app.config["STORAGE"])
    code, message, order = b.new_order(body)
    if code == 200:
        code = 201
    return jsonify({"message": message, "order": order}), code


@bp_order.route("/<order_id>", methods=["PATCH"])
def update_order(order_id):
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "order": None}), code
    body = dict(body)
    user_id = body.pop("user_id", None)
    b = buyer.Buyer(current_app.config["STORAGE"])
    code, message, order = b.update_order(user_id, order_id, body)
    return jsonify({"message": message, "order": order}), code
