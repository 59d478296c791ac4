import sqlalchemy as sa

from ..database import Base


def check_text_fields(data, kind):
    for field, value in data.items():
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{kind} field {field} must be a string")


class Song(Base):
    __tablename__ = "Song"
    id = sa.Column(sa.Integer, primary_key=True)
    title = sa.Column(sa.Text, nullable=False)
    content = sa.Column(sa.Text)
    released = sa.Column(sa.Boolean,
            default=False,
            server_default=sa.false(),
            nullable=False)

    singer_id = sa.Column(sa.Integer,
            sa.ForeignKey("Artist.id"),
            name="singerId",
            nullable=False)
    singer = sa.orm.relationship("Artist",
            back_populates="songs")

    def json(self, include_singer=False):
        ret = dict(
            **{attr: getattr(self, attr)
               for attr in ('id', 'title', 'content', 'released')},
            singerId=self.singer_id,
        )
        if include_singer:
            ret['singer'] = self.singer.json() if self.singer else None
        return ret

    def __str__(self):
        return f"{self.title} by {self.singer}"

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict):
            raise ValueError("song must be a JSON object")
        unknown = set(data) - {'title', 'content'}
        if unknown:
            raise ValueError(f"unknown song fields: {', '.join(sorted(unknown))}")
        check_text_fields(data, "song")
        return cls(title=data.get('title'), content=data.get('content'), released=False)
