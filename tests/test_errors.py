from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from petition_api.core.database import get_db


class BrokenSession:
    """Sesión que falla en cada acceso a la base de datos."""

    def __init__(self):
        self.rollbacks = 0

    def _fail(self):
        raise OperationalError('SELECT 1', {}, Exception('database is down'))

    def add(self, obj):
        pass

    async def get(self, *args, **kwargs):
        self._fail()

    async def execute(self, *args, **kwargs):
        self._fail()

    async def commit(self):
        self._fail()

    async def rollback(self):
        self.rollbacks += 1


def _broken_client(app):
    session = BrokenSession()

    async def broken_db():
        yield session

    app.dependency_overrides[get_db] = broken_db
    return TestClient(app), session


def test_unknown_route_uses_error_payload(client):
    r = client.get('/courses')
    assert r.status_code == 404
    assert r.json() == {'error': 'Not Found'}


def test_method_not_allowed_uses_error_payload(client):
    r = client.patch('/academics/1', json={})
    assert r.status_code == 405
    assert 'error' in r.json()


def test_create_storage_failure_is_client_error(app):
    client, session = _broken_client(app)
    r = client.post('/academics', json={'AcademicName': 'Math'})
    assert r.status_code == 400
    assert r.json() == {'error': 'saving failed'}
    assert session.rollbacks == 1


def test_update_storage_failure_is_client_error(app):
    client, _ = _broken_client(app)
    r = client.put('/academics/1', json={'AcademicName': 'Math'})
    assert r.status_code == 400
    assert r.json() == {'error': 'update failed'}


def test_list_storage_failure_is_client_error(app):
    client, _ = _broken_client(app)
    r = client.get('/academics')
    assert r.status_code == 400
    assert 'database is down' in r.json()['error']


def test_get_and_delete_storage_failure_is_internal_error(app):
    client, _ = _broken_client(app)
    for r in (client.get('/academics/1'), client.delete('/academics/1')):
        assert r.status_code == 500
        assert r.json() == {'error': 'internal server error'}


def test_health(client):
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json()['status'] == 'ok'


def test_openapi_documents_request_bodies(client):
    spec = client.get('/openapi.json').json()
    body = spec['paths']['/academics']['post']['requestBody']['content']['application/json']['schema']
    assert 'AcademicName' in body['properties']
    assert '/subjects/{entity_id}' in spec['paths']


class CrashingSession(BrokenSession):
    """Sesión que falla con un error ajeno a SQLAlchemy."""

    def _fail(self):
        raise RuntimeError('driver exploded')


def test_unexpected_error_uses_error_payload(app):
    session = CrashingSession()

    async def crashing_db():
        yield session

    app.dependency_overrides[get_db] = crashing_db
    # ServerErrorMiddleware responde y luego relanza la excepción
    client = TestClient(app, raise_server_exceptions=False)
    r = client.get('/academics/1')
    assert r.status_code == 500
    assert r.headers['content-type'].startswith('application/json')
    assert r.json() == {'error': 'internal server error'}
