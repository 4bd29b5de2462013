import pytest


def test_unknown_portfolio_renders_not_found(client):
    response = client.get('/portfolio/does-not-exist')
    assert response.status_code == 404
    assert b'Not found' in response.data


def test_modern_template(client, insert_raw):
    portfolio_id = insert_raw(title='Modern Folio', template='modern')

    response = client.get(f'/portfolio/{portfolio_id}')

    assert response.status_code == 200
    assert b'template-modern' in response.data
    assert b'Modern Folio' in response.data


def test_unrecognized_template_falls_back_to_minimalistic(client, insert_raw):
    portfolio_id = insert_raw(template='retro')

    response = client.get(f'/portfolio/{portfolio_id}')

    assert response.status_code == 200
    assert b'template-minimalistic' in response.data


def test_missing_colors_render_with_defaults(client, insert_raw):
    portfolio_id = insert_raw(colors=None)

    response = client.get(f'/portfolio/{portfolio_id}')

    assert b'#3B82F6' in response.data


def test_only_allow_listed_images_are_rendered(client, insert_raw):
    portfolio_id = insert_raw(projects=[{
        'title': 'Gallery',
        'description': 'Screenshots',
        'imageUrls': ['https://i.imgur.com/ok.png', 'https://evil.example.com/bad.png'],
    }])

    html = client.get(f'/portfolio/{portfolio_id}').get_data(as_text=True)

    assert 'https://i.imgur.com/ok.png' in html
    assert 'evil.example.com' not in html


def test_legacy_single_image_is_rendered(client, insert_raw):
    portfolio_id = insert_raw(projects=[
        {'title': 'Old', 'description': 'legacy', 'imageUrl': 'https://i.imgur.com/legacy.png'}])

    html = client.get(f'/portfolio/{portfolio_id}').get_data(as_text=True)

    assert 'https://i.imgur.com/legacy.png' in html


def test_description_is_escaped(client, insert_raw):
    portfolio_id = insert_raw(description='<script>alert(1)</script>\n\nSecond paragraph')

    html = client.get(f'/portfolio/{portfolio_id}').get_data(as_text=True)

    assert '<script>alert(1)</script>' not in html
    assert '&lt;script&gt;' in html
    assert '<p>Second paragraph</p>' in html


def test_share_url_points_at_page(client, insert_raw):
    portfolio_id = insert_raw()

    html = client.get(f'/portfolio/{portfolio_id}').get_data(as_text=True)

    assert f'data-share-url="http://localhost/portfolio/{portfolio_id}"' in html


def test_public_page_needs_no_session_and_hides_owner(client, insert_raw):
    portfolio_id = insert_raw(owner_id='auth0|secret-owner')

    html = client.get(f'/portfolio/{portfolio_id}').get_data(as_text=True)

    assert 'secret-owner' not in html


MESSY_EXPERIENCE = [
    {'company': 'Acme', 'position': 'Engineer', 'description': 'Backwards dates',
     'startDate': '2999-01-01', 'endDate': '1990-01-01'},
    {'company': 'Initech', 'position': 'Analyst', 'description': 'Unparseable dates',
     'startDate': 'garbage', 'endDate': 12},
]
MESSY_EDUCATION = [
    {'institution': 'State U', 'degree': 'BSc', 'field': 'CS',
     'startDate': '2020-01-01T00:00:00.000Z'},
    {'institution': 'Night School', 'degree': 'Cert', 'field': 'Art',
     'startDate': '2021-05-01', 'endDate': 'someday'},
]


@pytest.mark.parametrize('template', ['modern', 'minimalistic'])
def test_entries_with_bad_dates_still_render(client, insert_raw, template):
    portfolio_id = insert_raw(template=template, experience=MESSY_EXPERIENCE, education=MESSY_EDUCATION)

    page = client.get(f'/portfolio/{portfolio_id}')
    api = client.get(f'/api/portfolios/{portfolio_id}')

    assert page.status_code == 200
    html = page.get_data(as_text=True)
    assert 'Initech' in html
    assert 'Night School' in html
    assert 'State U' in html
    assert api.status_code == 200
    assert len(api.get_json()['portfolio']['experience']) == 2


def test_experience_dates_render_as_months(client, insert_raw):
    portfolio_id = insert_raw(experience=[
        {'company': 'Acme', 'position': 'Engineer', 'description': 'Built things',
         'startDate': '2019-03-01', 'endDate': '2021-07-15'},
        {'company': 'Globex', 'position': 'Lead', 'description': 'Current role',
         'startDate': '2021-08-01'},
    ])

    html = client.get(f'/portfolio/{portfolio_id}').get_data(as_text=True)

    assert 'Mar 2019' in html
    assert 'Jul 2021' in html
    assert 'Present' in html
