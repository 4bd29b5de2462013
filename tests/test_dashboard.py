from urllib.parse import urlparse, parse_qs

import pytest

from extensions import db
from models import Portfolio

DETAILS = {
    'title': 'Folio',
    'description': 'About me',
    'template': 'minimalistic',
    'color_primary': '#3B82F6',
    'color_secondary': '#1E40AF',
    'color_highlight': '#F59E0B',
}


def selected_id(response):
    assert response.status_code == 302
    return parse_qs(urlparse(response.headers['Location']).query)['id'][0]


def load(app, portfolio_id):
    with app.app_context():
        return db.session.get(Portfolio, portfolio_id)


@pytest.fixture
def portfolio_id(alice):
    response = alice.post('/dashboard/create', data=dict(DETAILS, skills='Python, SQL'))
    return selected_id(response)


def test_create_from_form(app, alice, portfolio_id):
    portfolio = load(app, portfolio_id)
    assert portfolio.owner_id == 'auth0|alice'
    assert portfolio.skills == ['Python', 'SQL']
    assert portfolio.colors['primary'] == '#3B82F6'

    html = alice.get(f'/dashboard/?id={portfolio_id}').get_data(as_text=True)
    assert 'Portfolio created' in html
    assert 'data-dismiss-after="4000"' in html


def test_create_validation_error_is_flashed(app, alice):
    response = alice.post('/dashboard/create', data=dict(DETAILS, title='x' * 101))

    assert response.status_code == 302
    with app.app_context():
        assert Portfolio.query.count() == 0
    html = alice.get('/dashboard/').get_data(as_text=True)
    assert 'Title must be 100 characters or less' in html
    assert 'data-dismiss-after="5000"' in html


def test_dashboard_selects_first_portfolio_by_default(alice, portfolio_id):
    html = alice.get('/dashboard/').get_data(as_text=True)
    assert f'/portfolio/{portfolio_id}' in html


def test_update_details(app, alice, portfolio_id):
    alice.post(f'/dashboard/{portfolio_id}/details',
               data=dict(DETAILS, title='Renamed', template='modern'))

    portfolio = load(app, portfolio_id)
    assert portfolio.title == 'Renamed'
    assert portfolio.template == 'modern'
    assert portfolio.skills == ['Python', 'SQL']


def test_add_edit_remove_skill(app, alice, portfolio_id):
    alice.post(f'/dashboard/{portfolio_id}/skills/add', data={'skill': 'Go'})
    assert load(app, portfolio_id).skills == ['Python', 'SQL', 'Go']

    alice.post(f'/dashboard/{portfolio_id}/skills/1/edit', data={'skill': 'PostgreSQL'})
    assert load(app, portfolio_id).skills == ['Python', 'PostgreSQL', 'Go']

    alice.post(f'/dashboard/{portfolio_id}/skills/0/delete')
    assert load(app, portfolio_id).skills == ['PostgreSQL', 'Go']


def test_add_project_keeps_other_sections(app, alice, portfolio_id):
    response = alice.post(f'/dashboard/{portfolio_id}/projects/add', data={
        'title': 'Site', 'description': 'A site', 'technologies': 'Flask',
        'imageUrls': 'https://i.imgur.com/a.png'})

    assert response.status_code == 302
    portfolio = load(app, portfolio_id)
    assert portfolio.projects == [{
        'title': 'Site', 'description': 'A site', 'technologies': ['Flask'],
        'imageUrls': ['https://i.imgur.com/a.png'],
    }]
    assert portfolio.skills == ['Python', 'SQL']


def test_add_experience(app, alice, portfolio_id):
    alice.post(f'/dashboard/{portfolio_id}/experience/add', data={
        'company': 'Acme', 'position': 'Engineer', 'description': 'Built things',
        'startDate': '2019-01-01'})

    assert load(app, portfolio_id).experience == [{
        'company': 'Acme', 'position': 'Engineer', 'description': 'Built things',
        'startDate': '2019-01-01'}]


def test_invalid_education_is_not_saved(app, alice, portfolio_id):
    alice.post(f'/dashboard/{portfolio_id}/education/add', data={
        'institution': 'U', 'degree': 'BSc', 'field': 'CS', 'startDate': '2999-01-01'})

    assert load(app, portfolio_id).education == []
    html = alice.get(f'/dashboard/?id={portfolio_id}').get_data(as_text=True)
    assert 'Start date cannot be in the future' in html


def test_stale_index_is_flashed(app, alice, portfolio_id):
    alice.post(f'/dashboard/{portfolio_id}/skills/9/delete')

    assert load(app, portfolio_id).skills == ['Python', 'SQL']
    html = alice.get(f'/dashboard/?id={portfolio_id}').get_data(as_text=True)
    assert 'Item no longer exists' in html


def test_unknown_section(alice, portfolio_id):
    response = alice.post(f'/dashboard/{portfolio_id}/hobbies/add', data={'skill': 'chess'})
    assert response.status_code == 404


def test_other_owner_cannot_edit(app, bob, portfolio_id):
    bob.post(f'/dashboard/{portfolio_id}/skills/add', data={'skill': 'Hacking'})

    assert load(app, portfolio_id).skills == ['Python', 'SQL']
    html = bob.get('/dashboard/').get_data(as_text=True)
    assert 'Portfolio not found' in html


def test_delete(app, alice, portfolio_id):
    response = alice.post(f'/dashboard/{portfolio_id}/delete')

    assert response.status_code == 302
    assert load(app, portfolio_id) is None
    assert 'Portfolio deleted' in alice.get('/dashboard/').get_data(as_text=True)


def test_aliases_redirect_into_dashboard(alice, portfolio_id):
    create = alice.get('/create-portfolio')
    assert create.status_code == 302
    assert 'focus=create' in create.headers['Location']

    edit = alice.get(f'/edit-portfolio/{portfolio_id}')
    assert edit.status_code == 302
    assert selected_id(edit) == portfolio_id
