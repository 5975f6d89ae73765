error_code = {
    "invalid_input": "invalid input data",
    "authorization_fail": "authorization fail.",
    "non_exist_user_id": "non exist user id {}",
    "exist_username": "exist username {}",
    "non_exist_book_id": "non exist book id {}",
    "non_exist_order_id": "non exist order id {}",
    "exist_review": "order {} already has a review",
    "missing_field": "missing field {}",
}


def error_non_exist_user_id(user_id):
    return 404, error_code["non_exist_user_id"].format(user_id)


def error_exist_username(username):
    return 409, error_code["exist_username"].format(username)


def error_non_exist_book_id(book_id):
    return 404, error_code["non_exist_book_id"].format(book_id)


def error_non_exist_order_id(order_id):
    return 404, error_code["non_exist_order_id"].format(order_id)


def error_exist_review(order_id):
    return 409, error_code["exist_review"].format(order_id)


def error_missing_field(name):
    return 400, error_code["missing_field"].format(name)


def error_invalid_input():
    return 400, error_code["invalid_input"]


def error_authorization_fail():
    return 401, error_code["authorization_fail"]


def error_and_message(code, message):
    return code, message


def error_validation(exc):
    details = "; ".join(
        "{}: {}".format(".".join(str(p) for p in e["loc"]) or "body", e["msg"])
        for e in exc.errors()
    )
    return 400, "{}: {}".format(error_code["invalid_input"], details)
