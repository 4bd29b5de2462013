import pytest

from app import create_app
from extensions import db
from models import Portfolio


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in(client, sub='auth0|alice', name='Alice'):
    """Seed the Flask-Login session the way the auth callback does"""
    with client.session_transaction() as sess:
        sess['_user_id'] = sub
        sess['_fresh'] = True
        sess['user'] = {'sub': sub, 'name': name}


@pytest.fixture
def alice(app):
    client = app.test_client()
    sign_in(client, 'auth0|alice', 'Alice')
    return client


@pytest.fixture
def bob(app):
    client = app.test_client()
    sign_in(client, 'auth0|bob', 'Bob')
    return client


@pytest.fixture
def ungated(app):
    """Leave the JSON API outside the session gate so its own 401 is reachable"""
    app.config['PROTECTED_PATHS'] = ['/dashboard/*']
    return app


@pytest.fixture
def insert_raw(app):
    """Store a document directly, bypassing the API (legacy/malformed data)"""
    def _insert(**fields):
        fields.setdefault('owner_id', 'auth0|legacy')
        fields.setdefault('title', 'Legacy')
        fields.setdefault('description', 'Stored before the current schema')
        with app.app_context():
            portfolio = Portfolio(**fields)
            db.session.add(portfolio)
            db.session.commit()
            return portfolio.id
    return _insert
