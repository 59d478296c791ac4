from . import seed
from .misc import db_session
from .types import Artist


def test_seed(capsys):
    assert seed.main() == 0
    out = capsys.readouterr().out
    assert "Created new artist: " in out
    assert "All artists: " in out
    assert "I Know Who I Am" in out
    with db_session() as session:
        artist = session.query(Artist).one()
        assert artist.name == "Osinachi Kalu"
        assert [s.title for s in artist.songs] == ["I Know Who I Am"]
        assert artist.songs[0].released is False


def test_seed_twice_fails_on_duplicate_email(capsys):
    assert seed.main() == 0
    assert seed.main() == 1
    with db_session() as session:
        assert session.query(Artist).count() == 1
