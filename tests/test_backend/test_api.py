"""Tests for backend API endpoints."""
import json
import pytest
from backend.models import db, Project, AccessPoint, Camera, Elevator


def new_access_point(project_id, **overrides):
    data = {
        'project_id': project_id,
        'location': 'Stairwell B',
        'quick_config': 'Single Standard Door Exit Only Interior',
        'reader_type': 'RP40',
        'lock_type': 'Standard',
        'monitoring_type': 'Prop',
    }
    data.update(overrides)
    return data


class TestProjects:
    """Test projects API endpoints."""

    def test_list_projects(self, client, project_id):
        response = client.get('/api/projects')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert len(data) == 1
        assert data[0]['id'] == project_id
        assert data[0]['name'] == 'Tower One'
        assert data[0]['replace_readers'] is False

    def test_create_project(self, client):
        response = client.post('/api/projects', json={'name': '  Harbor Plaza ', 'client': 'Bay Holdings'})
        assert response.status_code == 201
        data = json.loads(response.data)
        assert data['name'] == 'Harbor Plaza'
        assert data['client'] == 'Bay Holdings'
        assert data['progress_percentage'] == 0
        assert 'id' in data

    def test_create_project_requires_name(self, client):
        response = client.post('/api/projects', json={'client': 'No Name Inc'})
        assert response.status_code == 400
        assert 'name' in json.loads(response.data)['error']

    def test_create_project_rejects_non_object(self, client):
        response = client.post('/api/projects', json=['not', 'an', 'object'])
        assert response.status_code == 400

    def test_create_project_sanitizes_html(self, client):
        response = client.post('/api/projects', json={'name': 'Lab', 'scope_notes': '<script>x</script><b>ok</b>'})
        assert response.status_code == 201
        assert '<script>' not in json.loads(response.data)['scope_notes']

    def test_partial_update_returns_entity(self, client, project_id):
        response = client.put(f'/api/projects/{project_id}', json={'progress_percentage': 40, 'rush': True})
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['progress_percentage'] == 40
        assert data['rush'] is True
        # Untouched fields keep their values
        assert data['client'] == 'Acme Corp'

    def test_update_rejects_out_of_range(self, client, project_id):
        response = client.put(f'/api/projects/{project_id}', json={'progress_percentage': 140})
        assert response.status_code == 400

    def test_update_rejects_unknown_field(self, client, project_id):
        response = client.put(f'/api/projects/{project_id}', json={'colour': 'blue'})
        assert response.status_code == 400
        assert 'colour' in json.loads(response.data)['error']

    def test_get_missing_project(self, client):
        response = client.get('/api/projects/999')
        assert response.status_code == 404
        assert json.loads(response.data)['error'] == 'Project not found'

    def test_delete_project_cascades(self, client, app, project_id):
        response = client.delete(f'/api/projects/{project_id}')
        assert response.status_code == 204
        with app.app_context():
            assert db.session.get(Project, project_id) is None
            assert AccessPoint.query.count() == 0
            assert Camera.query.count() == 0


class TestEquipment:
    """Test equipment API endpoints."""

    def test_list_is_scoped_to_project(self, client, app, project_id):
        with app.app_context():
            other = Project(name="Other")
            db.session.add(other)
            db.session.flush()
            db.session.add(AccessPoint(**new_access_point(other.id, location='Elsewhere')))
            db.session.commit()

        response = client.get(f'/api/projects/{project_id}/access-points')
        assert response.status_code == 200
        locations = [row['location'] for row in json.loads(response.data)]
        assert locations == ['Lobby', 'Roof']

    def test_list_for_missing_project(self, client):
        response = client.get('/api/projects/404/cameras')
        assert response.status_code == 404

    def test_unknown_kind_is_404(self, client, project_id):
        response = client.get(f'/api/projects/{project_id}/turnstiles')
        assert response.status_code == 404
        assert 'error' in json.loads(response.data)

    def test_create_access_point(self, client, project_id):
        response = client.post('/api/access-points', json=new_access_point(project_id))
        assert response.status_code == 201
        data = json.loads(response.data)
        assert data['location'] == 'Stairwell B'
        assert data['project_id'] == project_id
        assert data['lock_provider'] is None

    def test_create_for_missing_project(self, client):
        response = client.post('/api/access-points', json=new_access_point(999))
        assert response.status_code == 404

    def test_create_missing_required_field(self, client, project_id):
        data = new_access_point(project_id)
        del data['reader_type']
        response = client.post('/api/access-points', json=data)
        assert response.status_code == 400
        assert 'reader_type' in json.loads(response.data)['error']

    def test_create_elevator_with_floor_count(self, client, project_id):
        response = client.post('/api/elevators', json={
            'project_id': project_id, 'location': 'Core', 'elevator_type': 'Standard', 'floor_count': 22,
        })
        assert response.status_code == 201
        assert json.loads(response.data)['floor_count'] == 22

    def test_update_single_field(self, client, app, project_id):
        with app.app_context():
            ap_id = AccessPoint.query.filter_by(location='Lobby').first().id

        response = client.put(f'/api/access-points/{ap_id}', json={'location': 'Main Lobby'})
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['location'] == 'Main Lobby'
        assert data['reader_type'] == 'KR-100'

    def test_update_clears_optional_field_with_null(self, client, app, project_id):
        with app.app_context():
            ap_id = AccessPoint.query.filter_by(location='Roof').first().id

        response = client.put(f'/api/access-points/{ap_id}', json={'lock_provider': None})
        assert response.status_code == 200
        assert json.loads(response.data)['lock_provider'] is None

    def test_update_rejects_null_required_field(self, client, app, project_id):
        with app.app_context():
            ap_id = AccessPoint.query.filter_by(location='Roof').first().id

        response = client.put(f'/api/access-points/{ap_id}', json={'location': None})
        assert response.status_code == 400

        response = client.get(f'/api/access-points/{ap_id}')
        assert json.loads(response.data)['location'] == 'Roof'

    def test_update_missing_entity(self, client):
        response = client.put('/api/cameras/999', json={'notes': 'x'})
        assert response.status_code == 404
        assert json.loads(response.data)['error'] == 'Camera not found'

    def test_delete_equipment(self, client, app, project_id):
        with app.app_context():
            camera_id = Camera.query.first().id

        response = client.delete(f'/api/cameras/{camera_id}')
        assert response.status_code == 204
        assert client.get(f'/api/cameras/{camera_id}').status_code == 404

    def test_duplicate_equipment(self, client, app, project_id):
        with app.app_context():
            original = AccessPoint.query.filter_by(location='Roof').first()
            original_id = original.id

        response = client.post(f'/api/access-points/{original_id}/duplicate')
        assert response.status_code == 201
        data = json.loads(response.data)
        assert data['id'] != original_id
        assert data['location'] == 'Roof (Copy)'
        assert data['lock_provider'] == 'Kastle'
        assert data['project_id'] == project_id

    def test_duplicate_missing_entity(self, client):
        response = client.post('/api/elevators/999/duplicate')
        assert response.status_code == 404


def test_lookup(client):
    response = client.get('/api/lookup')
    assert response.status_code == 200
    data = json.loads(response.data)
    assert 'KR-100' in data['readerTypes']
    assert data['cameraTypes'][0] == 'Dome Indoor'
    # Legacy aliases stay available
    assert 'doorTypes' in data
