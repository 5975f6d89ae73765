from flask import Blueprint
from flask import current_app
from flask import jsonify
from be.model import error
from be.model import user
from be.view import payload

bp_auth = Blueprint("auth", __name__, url_prefix="/auth")


@bp_auth.route("/register", methods=["POST"])
def register():
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "user": None}), code
    u = user.User(current_app.config["STORAGE"])
    code, message, profile = u.register(body)
    return jsonify({"message": message, "user": profile}), code


@bp_auth.route("/login", methods=["POST"])
def login():
    body = payload.json_object()
    if body is None:
        code, message = error.error_invalid_input()
        return jsonify({"message": message, "user": None}), code
    username = body.get("username", "")
    password = body.get("password", "")
    u = user.User(current_app.config["STORAGE"])
    code, message, profile = u.login(username=username, password=password)
    return jsonify({"message": message, "user": profile}), code


@bp_auth.route("/users/<user_id>", methods=["GET"])
def profile(user_id):
    u = user.User(current_app.config["STORAGE"])
    code, message, info = u.get_profile(user_id)
    return jsonify({"message": message, "user": info}), code
