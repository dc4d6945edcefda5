"""
Tests for the Flask host endpoints.
"""

import pytest

from app import app
from quickdb import SqlCon
from tests.conftest import PEOPLE_DDL


@pytest.fixture
def client(db_url, monkeypatch):
    with SqlCon(db_url) as db:
        db.execute(PEOPLE_DDL)
    monkeypatch.setitem(app.config, 'DB_CONFIG', {'conn_str': db_url, 'log_queries': False})
    monkeypatch.setitem(app.config, 'TESTING', True)
    with app.test_client() as c:
        yield c


def post(client, path, payload):
    resp = client.post(path, json=payload)
    return resp.status_code, resp.get_json()


class TestPreview:
    """Without execute the generated SQL is returned."""

    def test_select_preview(self, client):
        status, body = post(client, '/query/select', {'table': 'people', 'where': {'id': 1}, 'cardinality': 'one'})
        assert status == 200
        assert body == {'sql': 'SELECT * FROM "people" WHERE "id" = ? LIMIT 1', 'params': [1]}

    def test_insert_preview_does_not_write(self, client, db_url):
        status, body = post(client, '/query/insert', {'table': 'people', 'data': {'name': 'Alice'}})
        assert status == 200
        assert body == {'sql': 'INSERT INTO "people" ("name") VALUES (?)', 'params': ['Alice']}
        with SqlCon(db_url) as db:
            assert db.quick_select('people', {}) == []

    def test_delete_preview_null(self, client):
        status, body = post(client, '/query/delete', {'table': 'people', 'where': {'status': None}})
        assert body == {'sql': 'DELETE FROM "people" WHERE "status" IS NULL', 'params': []}


class TestExecute:
    """With execute the query runs against the configured database."""

    def test_crud_round_trip(self, client):
        status, body = post(client, '/query/insert',
                            {'table': 'people', 'data': {'name': 'Alice', 'age': 30}, 'execute': True})
        assert (status, body) == (200, {'status': 'success', 'rows_affected': 1})

        status, body = post(client, '/query/update',
                            {'table': 'people', 'where': {'name': 'Alice'}, 'data': {'status': 'done'},
                             'execute': True})
        assert body['rows_affected'] == 1

        status, body = post(client, '/query/select',
                            {'table': 'people', 'where': {'name': 'Alice'}, 'cardinality': 'one', 'execute': True})
        assert body['result']['status'] == 'done'
        assert body['result']['age'] == 30

        status, body = post(client, '/query/select', {'table': 'people', 'where': {}, 'execute': True})
        assert len(body['result']) == 1

        status, body = post(client, '/query/delete',
                            {'table': 'people', 'where': {'id': [1, 2]}, 'execute': True})
        assert body['rows_affected'] == 1

    def test_select_one_missing_is_null(self, client):
        status, body = post(client, '/query/select',
                            {'table': 'people', 'where': {'id': 5}, 'cardinality': 'one', 'execute': True})
        assert (status, body) == (200, {'result': None})


class TestErrors:
    """Malformed requests and database failures become 400 responses."""

    def test_bad_operator(self, client):
        status, body = post(client, '/query/select', {'table': 'people', 'where': {'id': {'DROP': 1}}})
        assert status == 400
        assert body['type'] == 'UnrecognizedOperator'

    def test_missing_where(self, client):
        status, body = post(client, '/query/delete', {'table': 'people', 'execute': True})
        assert status == 400
        assert body['type'] == 'InvalidPredicateMap'

    def test_missing_table(self, client):
        status, body = post(client, '/query/select', {'where': {}})
        assert status == 400
        assert body['type'] == 'InvalidTableName'

    def test_missing_data(self, client):
        status, body = post(client, '/query/insert', {'table': 'people'})
        assert body['type'] == 'InvalidFieldMap'

    def test_bad_cardinality(self, client):
        status, body = post(client, '/query/select', {'table': 'people', 'where': {}, 'cardinality': 'few'})
        assert status == 400
        assert body['type'] == 'InvalidCardinality'

    def test_non_json_body(self, client):
        resp = client.post('/query/select', data='nope', content_type='text/plain')
        assert resp.status_code == 400

    def test_execution_failure(self, client):
        status, body = post(client, '/query/insert', {'table': 'missing', 'data': {'a': 1}, 'execute': True})
        assert status == 400
        assert body['type'] == 'ExecutionFailure'
        assert 'no such table' in body['error']

    def test_unknown_route_stays_404(self, client):
        assert client.get('/nope').status_code == 404
