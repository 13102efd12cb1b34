import io

import pytest
from PIL import Image

from app import create_app
from config import TestingConfig
from models import db as _db
from models.user import User


@pytest.fixture
def app(tmp_path):
    media_root = tmp_path / 'media'
    media_root.mkdir()

    class _Config(TestingConfig):
        MEDIA_ROOT = str(media_root)
        UPLOADS_DIR = str(media_root / 'uploads')

    app = create_app(_Config)
    with app.app_context():
        _db.create_all()
    yield app
    with app.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def db(ctx):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(username, role='customer', password='secret123', **fields):
        with app.app_context():
            user = User(username=username, role=role, **fields)
            user.set_password(password)
            _db.session.add(user)
            _db.session.commit()
            return user.id
    return _make_user


@pytest.fixture
def login(client):
    def _login(username, password='secret123'):
        return client.post('/auth/login', data={'username': username, 'password': password})
    return _login


def image_bytes(fmt='PNG'):
    buf = io.BytesIO()
    Image.new('RGB', (4, 4), 'red').save(buf, fmt)
    return buf.getvalue()
