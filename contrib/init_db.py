#!/usr/bin/env python3

from playlist.config import db
import playlist.types

db.engine.echo = True
db.create_all()
