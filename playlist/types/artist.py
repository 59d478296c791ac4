import sqlalchemy as sa

from ..database import Base
from .song import Song, check_text_fields

class Artist(Base):
    __tablename__ = "Artist"
    id = sa.Column(sa.Integer, primary_key=True)
    name = sa.Column(sa.Text, nullable=False)
    email = sa.Column(sa.Text, nullable=False, unique=True)
    songs = sa.orm.relationship("Song",
            order_by="Song.id",
            back_populates="singer")

    def json(self, include_songs=False):
        ret = {attr: getattr(self, attr) for attr in ('id', 'name', 'email')}
        if include_songs:
            ret['songs'] = [s.json() for s in self.songs]
        return ret

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @classmethod
    def from_json(cls, data):
        """
        Builds an artist from a request body. Songs created along with the
        artist go under `songs`, either wrapped as `{"create": ...}` or
        given directly, as one object or a list of them.
        """
        if not isinstance(data, dict):
            raise ValueError("artist must be a JSON object")
        data = dict(data)
        songs = data.pop('songs', None) or []
        if isinstance(songs, dict) and 'create' in songs:
            if len(songs) > 1:
                raise ValueError("songs only supports create")
            songs = songs['create'] or []
        if isinstance(songs, dict):
            songs = [songs]
        if not isinstance(songs, list):
            raise ValueError("songs must be an object or a list")
        unknown = set(data) - {'name', 'email'}
        if unknown:
            raise ValueError(f"unknown artist fields: {', '.join(sorted(unknown))}")
        check_text_fields(data, "artist")
        artist = cls(**data)
        for song in songs:
            artist.songs.append(Song.from_json(song))
        return artist
