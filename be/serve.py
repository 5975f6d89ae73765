import logging
import os
import threading
from flask import Flask
from werkzeug.serving import make_server
from be.view import auth
from be.view import book
from be.view import order
from be.view import review
from be.view import transaction
from be.view import search
from be.view import chat
from be.model.store import MemStorage

init_completed_event = threading.Event()

_server = None


def create_app(storage=None):
    if storage is None:
        seed = os.environ.get("SEED_SAMPLE_DATA", "1") not in ("0", "false", "no")
        storage = MemStorage(seed=seed)
    app = Flask(__name__)
    app.config["STORAGE"] = storage
    app.register_blueprint(auth.bp_auth)
    app.register_blueprint(book.bp_book)
    app.register_blueprint(order.bp_order)
    app.register_blueprint(review.bp_review)
    app.register_blueprint(transaction.bp_transaction)
    app.register_blueprint(search.bp_search)
    app.register_blueprint(chat.bp_chat)
    return app


def run_backend(app=None):
    global _server
    if app is None:
        app = create_app()
    host = os.environ.get("BACKEND_HOST", "127.0.0.1")
    port = int(os.environ.get("BACKEND_PORT", 5000))
    # one request at a time: the store is never touched by two threads
    _server = make_server(host, port, app, threaded=False)
    logging.getLogger(__name__).info("backend listening on %s:%d", host, port)
    init_completed_event.set()
    _server.serve_forever()


def shutdown_backend():
    if _server is None:
        raise RuntimeError("Backend is not running")
    _server.shutdown()


logging.basicConfig(level=os.environ.get("LOG_LEVEL", "ERROR"))
handler = logging.StreamHandler()
formatter = logging.Formatter(
    "%(asctime)s [%(threadName)-12.12s] [%(levelname)-5.5s]  %(message)s"
)
handler.setFormatter(formatter)
logging.getLogger().addHandler(handler)

if __name__ == "__main__":
    run_backend()
