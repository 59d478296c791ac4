#!/usr/bin/env python3
from setuptools import setup
import subprocess
import os


def version():
    ver = os.environ.get("PKGVER")
    if ver:
        return ver
    try:
        ver = subprocess.run(['git', 'describe', '--tags'],
                             stdout=subprocess.PIPE, stderr=subprocess.DEVNULL).stdout.decode().strip()
    except OSError:
        ver = None
    return ver or "0.1.0"


reqs = []
with open('requirements.txt') as f:
    for l in f:
        if l.strip():
            reqs.append(l.strip())

setup(
    name = 'playlist-api',
    packages = [
        'playlist',
        'playlist.types',
        ],
    version = version(),
    description = 'REST API for artists and their songs',
    install_requires = reqs,
    extras_require = {
        'test': ['pytest'],
    },
    license = 'MIT',
)
