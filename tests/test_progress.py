from sponsor_portal.extensions import db
from sponsor_portal.models import Child, ProgressUpdate


def test_progress_update_changes_level(client, app, admin, make_child):
    child_id = make_child(english_level='Beginner')

    r = client.post(f'/admin/progress/{child_id}', data={
        'title': 'Week 4: Present Simple',
        'description': 'Great improvement in reading.',
        'english_level_after': 'A2',
    })
    assert r.status_code in (301, 302)

    with app.app_context():
        update = ProgressUpdate.query.one()
        assert update.created_by == admin
        assert update.english_level_after == 'A2'
        assert db.session.get(Child, child_id).english_level == 'A2'


def test_blank_level_keeps_current(client, app, admin, make_child):
    child_id = make_child(english_level='B1')
    client.post(f'/admin/progress/{child_id}', data={
        'title': 'Vocabulary: School',
        'description': 'Learned twenty new words.',
        'english_level_after': '',
    })
    with app.app_context():
        assert ProgressUpdate.query.count() == 1
        assert db.session.get(Child, child_id).english_level == 'B1'


def test_progress_requires_title_and_description(client, app, admin, make_child):
    child_id = make_child()
    r = client.post(f'/admin/progress/{child_id}', data={'title': 'Only a title'})
    assert r.status_code == 200
    assert 'Title and description are required.' in r.get_data(as_text=True)
    with app.app_context():
        assert ProgressUpdate.query.count() == 0


def test_sponsor_sees_timeline(client, app, sponsor, make_child, make_sponsorship):
    child_id = make_child()
    make_sponsorship(child_id, sponsor)
    with app.app_context():
        db.session.add(ProgressUpdate(child_id=child_id, title='Reading club',
                                      description='Read a full story.', english_level_after='A1'))
        db.session.commit()

    body = client.get(f'/child/{child_id}').get_data(as_text=True)
    assert 'Reading club' in body
    assert 'New Level: A1' in body

    body = client.get('/dashboard').get_data(as_text=True)
    assert 'Last update:' in body
