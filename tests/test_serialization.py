from datetime import datetime
import uuid

from models import DEFAULT_COLORS
from utils.serialization import (
    serialize_for_client, normalize_colors, normalize_project,
    normalize_portfolio, select_template
)


def test_serialize_for_client_converts_nested_values():
    identifier = uuid.UUID('12345678-1234-5678-1234-567812345678')
    value = {'id': identifier, 'items': [{'at': datetime(2024, 3, 1, 12, 30)}], 'n': 3}

    assert serialize_for_client(value) == {
        'id': '12345678-1234-5678-1234-567812345678',
        'items': [{'at': '2024-03-01T12:30:00'}],
        'n': 3,
    }


def test_legacy_image_url_becomes_list():
    project = normalize_project({'title': 'P', 'description': 'D', 'imageUrl': 'https://i.imgur.com/a.png'})
    assert project['imageUrls'] == ['https://i.imgur.com/a.png']


def test_image_urls_take_precedence_over_legacy_field():
    project = normalize_project({
        'title': 'P', 'description': 'D',
        'imageUrls': ['https://i.imgur.com/new.png'],
        'imageUrl': 'https://i.imgur.com/old.png',
    })
    assert project['imageUrls'] == ['https://i.imgur.com/new.png']


def test_project_without_images():
    project = normalize_project({'title': 'P', 'description': 'D'})
    assert project['imageUrls'] == []
    assert project['technologies'] == []
    assert project['projectUrl'] is None


def test_colors_default_per_key():
    assert normalize_colors(None) == DEFAULT_COLORS
    assert normalize_colors({'primary': '#000'}) == dict(DEFAULT_COLORS, primary='#000')


def test_normalize_portfolio_fills_defaults_and_drops_owner():
    portfolio = normalize_portfolio({
        'id': 'abc',
        'ownerId': 'auth0|alice',
        'title': 'T',
        'description': 'D',
        'template': None,
        'colors': None,
        'skills': ['Python', 7],
        'projects': None,
        'education': [{'institution': 'U', 'degree': 'BSc', 'field': 'CS', 'startDate': '2015-09-01'}],
    })

    assert 'ownerId' not in portfolio
    assert portfolio['template'] == 'minimalistic'
    assert portfolio['colors'] == DEFAULT_COLORS
    assert portfolio['skills'] == ['Python']
    assert portfolio['projects'] == []
    assert portfolio['experience'] == []
    assert portfolio['education'][0]['endDate'] is None


def test_select_template():
    assert select_template({'template': 'modern'}) == 'portfolio/modern.html'
    assert select_template({'template': 'minimalistic'}) == 'portfolio/minimalistic.html'
    assert select_template({'template': 'retro'}) == 'portfolio/minimalistic.html'
    assert select_template({}) == 'portfolio/minimalistic.html'
