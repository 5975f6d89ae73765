from flask import request


def json_object():
    """The request's JSON body as a dict.

    A missing or unparsable body reads as ``{}``; a body that parses to
    anything other than an object (a list, a string, a number) gives ``None``.
    """
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        return None
    return body
