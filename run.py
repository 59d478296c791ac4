from playlist.app import app
from playlist import config
import logging
import os

app.debug = os.environ.get('FLASK_DEBUG', '0') == '1'
from gevent import pywsgi
server = pywsgi.WSGIServer((config.host, config.port), app, log=logging.getLogger("playlist.wsgi"))
logging.getLogger("playlist").info(f"REST API server ready at: http://localhost:{config.port}")
server.serve_forever()
