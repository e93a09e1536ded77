def test_home_requires_login(client, db_session):
    """Anonymous visitors are sent to the sign-in page"""
    response = client.get('/')
    assert response.status_code == 302
    assert '/users/sign-in' in response.headers['Location']


def test_home_redirect_shows_sign_in(client, db_session):
    response = client.get('/', follow_redirects=True)
    assert response.status_code == 200
    assert b'Sign In' in response.data
    assert b'Please sign in to continue.' in response.data


def test_health_endpoint(client):
    """Test the health check endpoint"""
    response = client.get('/health')
    assert response.status_code == 200
    assert response.json['status'] == 'healthy'
    assert 'timestamp' in response.json


def test_404_error(client):
    """Test that non-existent routes return 404"""
    response = client.get('/nonexistent')
    assert response.status_code == 404
    assert b'Page Not Found' in response.data


def test_dashboard_lists_habits(logged_in_client, test_habit):
    response = logged_in_client.get('/')
    assert response.status_code == 200
    assert b'Test Habit' in response.data
    assert b'Test Description' in response.data
    assert b'Sign Out' in response.data


def test_dashboard_empty_state(logged_in_client):
    response = logged_in_client.get('/')
    assert response.status_code == 200
    assert b'No habits yet' in response.data


def test_dashboard_page_structure(logged_in_client):
    """Test that the dashboard has proper HTML structure"""
    response = logged_in_client.get('/')
    assert b'<!DOCTYPE html>' in response.data
    assert b'<html' in response.data
    assert b'<body' in response.data
    assert b'</html>' in response.data


def test_weekly_view_shows_last_seven_days(logged_in_client, test_user, test_habit, db_session):
    from habit_tracker.models.utils import last_n_date_keys
    test_user.view = 'weekly'
    db_session.commit()

    response = logged_in_client.get('/')
    assert response.status_code == 200
    assert b'This Week' in response.data
    for key in last_n_date_keys(7):
        assert key.encode() in response.data
    assert b'0/7 days done' in response.data


def test_weekly_view_counts_completed_days(logged_in_client, test_user, test_habit, db_session):
    from habit_tracker.models.utils import last_n_date_keys
    keys = last_n_date_keys(7)
    test_habit.toggle(keys[0])
    test_habit.toggle(keys[-1])
    test_user.view = 'weekly'
    db_session.commit()

    response = logged_in_client.get('/')
    assert b'2/7 days done' in response.data


def test_500_renders_error_page_and_rolls_back(app, client, db_session, monkeypatch):
    """Unhandled errors render the error page after a session rollback"""
    from habit_tracker.models import db

    app.config['PROPAGATE_EXCEPTIONS'] = False

    @app.route('/explode')
    def explode():
        raise RuntimeError('boom')

    session_cls = type(db.session())
    real_rollback = session_cls.rollback
    rollbacks = []

    def counting_rollback(self):
        rollbacks.append(True)
        return real_rollback(self)

    monkeypatch.setattr(session_cls, 'rollback', counting_rollback)

    response = client.get('/explode')

    assert response.status_code == 500
    assert b'Internal Server Error' in response.data
    assert rollbacks
