"""Tests for the API service and entity store."""
import pytest
import requests
from unittest.mock import Mock, patch
from shared.enums import EquipmentKind
from src.sitewalk_app.services.api_service import APIService, APIError
from src.sitewalk_app.services.entity_store import EntityStore, equipment_query_key


def make_response(status_code=200, body=None, reason='OK'):
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.content = b'' if body is None else b'{}'
    response.json.return_value = body
    response.text = ''
    return response


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def api(session):
    return APIService('http://sitewalk.test/', max_retries=3, retry_delay=0, session=session)


class TestAPIService:

    def test_request_json_success(self, api, session):
        session.request.return_value = make_response(200, [{'id': 1}])
        assert api.request_json('GET', '/api/projects') == [{'id': 1}]
        session.request.assert_called_once_with('GET', 'http://sitewalk.test/api/projects', json=None, timeout=10.0)

    def test_no_content(self, api, session):
        session.request.return_value = make_response(204)
        assert api.request_json('DELETE', '/api/cameras/1') is None

    def test_client_error_not_retried(self, api, session):
        session.request.return_value = make_response(404, {'error': 'Camera not found'}, 'NOT FOUND')
        with pytest.raises(APIError) as exc_info:
            api.request_json('GET', '/api/cameras/9')
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == 'Camera not found'
        assert session.request.call_count == 1

    @patch('src.sitewalk_app.services.api_service.time.sleep')
    def test_server_error_retried(self, mock_sleep, api, session):
        session.request.side_effect = [make_response(503, reason='Unavailable'), make_response(200, {'id': 1})]
        assert api.request_json('GET', '/api/cameras/1') == {'id': 1}
        assert session.request.call_count == 2
        mock_sleep.assert_called_once_with(0)

    @patch('src.sitewalk_app.services.api_service.time.sleep')
    def test_server_error_exhausts_retries(self, mock_sleep, api, session):
        session.request.return_value = make_response(500, {'error': 'Failed to update camera'}, 'ERROR')
        with pytest.raises(APIError) as exc_info:
            api.request_json('PUT', '/api/cameras/1', json={'notes': 'x'})
        assert exc_info.value.status_code == 500
        assert session.request.call_count == 3

    @patch('src.sitewalk_app.services.api_service.time.sleep')
    def test_connection_error(self, mock_sleep, api, session):
        session.request.side_effect = requests.exceptions.ConnectionError('refused')
        with pytest.raises(APIError, match='Could not reach server'):
            api.request_json('GET', '/api/projects')
        assert session.request.call_count == 3
        assert mock_sleep.call_count == 2


class TestEntityStore:

    @pytest.fixture
    def store(self):
        api = Mock()
        return EntityStore(api), api

    def test_list(self, store):
        entity_store, api = store
        api.request_json.return_value = [{'id': 1}]
        assert entity_store.list(EquipmentKind.CAMERAS, 3) == [{'id': 1}]
        api.request_json.assert_called_once_with('GET', '/api/projects/3/cameras')

    def test_update_accepts_kind_value(self, store):
        entity_store, api = store
        api.request_json.return_value = {'id': 5, 'location': 'Main Lobby'}
        entity = entity_store.update('access-points', 5, {'location': 'Main Lobby'})
        assert entity['location'] == 'Main Lobby'
        api.request_json.assert_called_once_with('PUT', '/api/access-points/5', json={'location': 'Main Lobby'})

    def test_unknown_kind(self, store):
        entity_store, _ = store
        with pytest.raises(ValueError):
            entity_store.list('turnstiles', 1)

    def test_create_duplicate_delete(self, store):
        entity_store, api = store
        api.request_json.return_value = {'id': 8}
        entity_store.create(EquipmentKind.INTERCOMS, {'project_id': 1, 'location': 'Gate'})
        api.request_json.assert_called_with('POST', '/api/intercoms', json={'project_id': 1, 'location': 'Gate'})
        entity_store.duplicate(EquipmentKind.INTERCOMS, 8)
        api.request_json.assert_called_with('POST', '/api/intercoms/8/duplicate')
        entity_store.delete(EquipmentKind.INTERCOMS, 8)
        api.request_json.assert_called_with('DELETE', '/api/intercoms/8')

    def test_lookup_and_report(self, store):
        entity_store, api = store
        entity_store.lookup()
        api.request_json.assert_called_with('GET', '/api/lookup')
        entity_store.report(2, 'camera-schedule')
        api.request_json.assert_called_with('GET', '/api/projects/2/reports/camera-schedule')
        with pytest.raises(ValueError):
            entity_store.report(2, 'fire-alarms')

    def test_errors_propagate(self, store):
        entity_store, api = store
        api.request_json.side_effect = APIError('Project not found', 404)
        with pytest.raises(APIError):
            entity_store.list(EquipmentKind.ELEVATORS, 99)


def test_equipment_query_key():
    assert equipment_query_key(4, 'cameras') == ('/api/projects', 4, 'cameras')
