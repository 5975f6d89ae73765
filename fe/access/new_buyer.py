from fe import conf
from fe.access import buyer, auth


def register_new_buyer(username, password) -> buyer.Buyer:
    a = auth.Auth(conf.URL)
    code, user = a.register(username, password)
    assert code == 200
    return buyer.Buyer(conf.URL, user["id"], username)
