import pytest

PROTECTED_ROUTES = [
    '/dashboard',
    '/child/some-child',
    '/messages',
]

ADMIN_ROUTES = [
    '/admin',
    '/admin/children',
    '/admin/children/new',
    '/admin/children/some-child',
    '/admin/messages',
    '/admin/progress/some-child',
    '/admin/sponsorships',
]


def _location_path(response):
    return response.headers['Location'].split('?')[0].replace('http://localhost', '')


def test_public_pages_render(client):
    r = client.get('/')
    assert r.status_code == 200
    assert 'Promesas English Academy' in r.get_data(as_text=True)

    for path in ('/children', '/login', '/signup'):
        assert client.get(path).status_code == 200


@pytest.mark.parametrize('path', PROTECTED_ROUTES + ADMIN_ROUTES)
def test_unauthenticated_redirects_to_login(client, path):
    r = client.get(path)
    assert r.status_code in (301, 302)
    assert _location_path(r) == '/login'


@pytest.mark.parametrize('path', ADMIN_ROUTES)
def test_sponsor_is_sent_to_dashboard_from_admin_pages(client, sponsor, path):
    r = client.get(path)
    assert r.status_code in (301, 302)
    assert _location_path(r) == '/dashboard'


def test_unknown_path_redirects_home(client):
    r = client.get('/no/such/page')
    assert r.status_code in (301, 302)
    assert _location_path(r) == '/'


def test_sponsor_nav_links(client, sponsor):
    body = client.get('/dashboard').get_data(as_text=True)
    assert 'Your Sponsorships' in body
    assert 'Sam Sponsor' in body
    assert '/messages' in body
    assert '/admin/children' not in body


def test_admin_pages_render(client, admin, make_child):
    child_id = make_child()

    r = client.get('/admin')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Admin Dashboard' in body
    assert '/admin/children' in body

    for path in ('/admin/children', '/admin/children/new', f'/admin/children/{child_id}',
                 '/admin/messages', f'/admin/progress/{child_id}', '/admin/sponsorships'):
        assert client.get(path).status_code == 200, path


def test_admin_login_page_redirects_when_signed_in(client, admin):
    r = client.get('/login')
    assert r.status_code in (301, 302)
    assert _location_path(r) == '/admin'


def test_dashboard_statistics(client, admin, make_child, make_profile, make_sponsorship, make_message):
    sponsor_id = make_profile()
    sponsored = make_child(first_name='Luis')
    make_child(first_name='Maria')
    make_sponsorship(sponsored, sponsor_id)
    make_message(sponsored, sponsor_id)

    body = client.get('/admin').get_data(as_text=True)
    assert 'Total Children' in body
    assert 'Pending Messages' in body
    assert 'No progress updates yet.' in body
