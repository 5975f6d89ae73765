from fe import conf
from fe.access import seller, auth


def register_new_seller(username, password) -> seller.Seller:
    a = auth.Auth(conf.URL)
    code, user = a.register(username, password)
    assert code == 200
    return seller.Seller(conf.URL, user["id"], username)
