import os

URL = "http://{}:{}/".format(
    os.environ.get("BACKEND_HOST", "127.0.0.1"), os.environ.get("BACKEND_PORT", "5000")
)
