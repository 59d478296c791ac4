from .artist import Artist
from .song import Song
