from contextlib import contextmanager

from . import config

import json
import flask
from functools import wraps


def envelope(payload, success=True, message=None):
    ret = {"success": success, "payload": payload}
    if message is not None:
        ret["message"] = message
    return ret


def json_api(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        ret = fn(*args, **kwargs)
        status = None
        if isinstance(ret, flask.Response):
            return ret
        if isinstance(ret, tuple):
            status = ret[1]
            ret = ret[0]
        return flask.Response(
            json.dumps(ret, ensure_ascii=False, separators=(',', ':')),
            status=status,
            headers={
                "Content-Type": "application/json; charset=utf-8",
            }
        )

    return wrapper


def with_db_session(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if "session" in kwargs:
            raise RuntimeError("A session argument already exists!")
        with db_session() as s:
            kwargs["session"] = s
            return fn(*args, **kwargs)

    return wrapper


@contextmanager
def db_session():
    session = config.db.create_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
