import logging

from pydantic import ValidationError

from be.model import db_conn
from be.model import error
from be.model.schema import NewUser

logger = logging.getLogger(__name__)


class User(db_conn.DBConn):
    def __init__(self, storage):
        db_conn.DBConn.__init__(self, storage)

    def register(self, body: dict) -> (int, str, dict):
        try:
            new_user = NewUser.model_validate(body)
            if self.storage.get_user_by_username(new_user.username) is not None:
                return error.error_exist_username(new_user.username) + (None,)
            user = self.storage.create_user(new_user)
            logger.info("registered user %s", user.username)
        except ValidationError as e:
            return error.error_validation(e) + (None,)
        except Exception as e:
            logging.error("register failed: {}".format(e))
            return 528, "{}".format(str(e)), None
        return 200, "ok", user.public()

    def check_password(self, username: str, password: str) -> (int, str):
        user = self.storage.get_user_by_username(username)
        if user is None or user.password != password:
            return error.error_authorization_fail()
        return 200, "ok"

    def login(self, username: str, password: str) -> (int, str, dict):
        if not username:
            return error.error_missing_field("username") + (None,)
        if not password:
            return error.error_missing_field("password") + (None,)
        try:
            code, message = self.check_password(username, password)
            if code != 200:
                return code, message, None
            user = self.storage.get_user_by_username(username)
        except Exception as e:
            logging.error("login failed: {}".format(e))
            return 528, "{}".format(str(e)), None
        return 200, "ok", user.public()

    def get_profile(self, user_id: str) -> (int, str, dict):
        if not self.user_id_exist(user_id):
            return error.error_non_exist_user_id(user_id) + (None,)
        return 200, "ok", self.seller_info(user_id)
