"""
Populates the database with a sample artist and song and prints what is
stored afterwards. Run with `python -m playlist.seed`.
"""
import logging
from pprint import pformat

from .misc import db_session
from .types import Artist

L = logging.getLogger("playlist.seed")


def create_sample_artist(session):
    artist = Artist.from_json({
        'name': 'Osinachi Kalu',
        'email': 'sinach@sinachmusic.com',
        'songs': {
            'create': {
                'title': 'I Know Who I Am',
            },
        },
    })
    session.add(artist)
    session.flush()
    return artist


def main():
    try:
        with db_session() as session:
            artist = create_sample_artist(session)
            print("Created new artist: ", artist.json())
            all_artists = session.query(Artist).order_by(Artist.id).all()
            print("All artists: ")
            print(pformat([a.json(include_songs=True) for a in all_artists]))
    except Exception:
        L.exception("Seeding the database failed")
        return 1
    return 0


if __name__ == '__main__':
    import sys
    sys.exit(main())
