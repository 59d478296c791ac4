import logging

import flask
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.exc import NoResultFound
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound

from . import config
from .misc import envelope, json_api, with_db_session
from .types import Artist, Song
from .types.song import check_text_fields

L = logging.getLogger("playlist.app")

app = flask.Flask(__name__)
# /artists and /artists/ are the same endpoint
app.url_map.strict_slashes = False


@app.before_request
def request_logger():
    L.info("Request: {} {}".format(flask.request.method, flask.request.path))


def request_json():
    j = flask.request.get_json(force=True)
    if not isinstance(j, dict):
        raise ValueError("request body must be a JSON object")
    return j


@app.route("/playlist")
@json_api
@with_db_session
def playlist(session):
    songs = (session.query(Song)
             .options(joinedload(Song.singer))
             .filter_by(released=True)
             .order_by(Song.id)
             .all())
    return envelope([s.json(include_singer=True) for s in songs])


@app.route("/song/<int:id>")
@json_api
@with_db_session
def get_song(id, session):
    song = session.query(Song).filter_by(id=id).first()
    return envelope(song.json() if song else None)


@app.route("/artist", methods=["POST"])
@json_api
@with_db_session
def create_artist(session):
    artist = Artist.from_json(request_json())
    session.add(artist)
    session.flush()
    L.info(f"Created artist {artist}")
    return envelope(artist.json())


@app.route("/song", methods=["POST"])
@json_api
@with_db_session
def create_song(session):
    j = request_json()
    check_text_fields({'singerEmail': j.get('singerEmail')}, "song")
    song = Song.from_json({'title': j.get('title'), 'content': j.get('content')})
    song.singer = session.query(Artist).filter_by(email=j.get('singerEmail')).one()
    session.add(song)
    session.flush()
    L.info(f"Created song {song}")
    return envelope(song.json())


@app.route("/song/release/<int:id>", methods=["PUT"])
@json_api
@with_db_session
def release_song(id, session):
    song = session.query(Song).filter_by(id=id).one()
    song.released = True
    session.flush()
    return envelope(song.json())


@app.route("/song/<int:id>", methods=["DELETE"])
@json_api
@with_db_session
def delete_song(id, session):
    song = session.query(Song).filter_by(id=id).one()
    snapshot = song.json()
    session.delete(song)
    session.flush()
    L.info(f"Deleted song {id}")
    return envelope(snapshot)


@app.route("/artists")
@json_api
@with_db_session
def artists(session):
    return envelope([a.json() for a in session.query(Artist).order_by(Artist.id)])


def error(status, reason):
    return envelope(None, success=False,
                    message=f"API SAYS: {reason} for path: {flask.request.path}"), status


@app.errorhandler(NotFound)
@app.errorhandler(MethodNotAllowed)
@json_api
def endpoint_not_found(e):
    return error(404, "Endpoint not found")


@app.errorhandler(NoResultFound)
@json_api
def record_not_found(e):
    return error(404, "Record not found")


@app.errorhandler(BadRequest)
@app.errorhandler(ValueError)
@json_api
def bad_request(e):
    L.warning(f"Bad request on {flask.request.path}: {e}")
    return error(400, "Bad request")


@app.errorhandler(IntegrityError)
@json_api
def constraint_violation(e):
    L.warning(f"Constraint violation on {flask.request.path}: {e.orig}")
    return error(409, "Constraint violation")


@app.errorhandler(SQLAlchemyError)
@json_api
def database_error(e):
    L.error("Database error", exc_info=e)
    return error(500, "Database error")


if __name__ == '__main__':
    app.run(host=config.host or None, port=config.port)
