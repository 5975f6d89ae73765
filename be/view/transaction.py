from flask import Blueprint
from flask import current_app
from flask import jsonify
from be.model import transaction

bp_transaction = Blueprint("transaction", __name__, url_prefix="/transactions")


@bp_transaction.route("/", methods=["GET"])
def list_transactions():
    t = transaction.Transaction(current_app.config["STORAGE"])
    code, message, transactions, stats = t.list_transactions()
    return jsonify({"message": message, "transactions": transactions, "stats": stats}), code
