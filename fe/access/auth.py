import requests
from urllib.parse import urljoin


class Auth:
    def __init__(self, url_prefix):
        self.url_prefix = urljoin(url_prefix, "auth/")

    def register(self, username: str, password: str, email: str = None, school: str = None) -> (int, dict):
        json = {
            "username": username,
            "password": password,
            "email": email or "{}@school.edu.tw".format(username),
            "school": school,
        }
        url = urljoin(self.url_prefix, "register")
        r = requests.post(url, json=json, timeout=5)
        return r.status_code, r.json().get("user")

    def login(self, username: str, password: str) -> (int, dict):
        json = {"username": username, "password": password}
        url = urljoin(self.url_prefix, "login")
        r = requests.post(url, json=json, timeout=5)
        return r.status_code, r.json().get("user")
