"""
Tests for the delivery API
"""
import pytest


@pytest.mark.integration
class TestDeliveryAcknowledgements:
    """Tests for the cancel/complete endpoints, which do not persist anything"""

    def test_cancel_echoes_body(self, client):
        response = client.post('/api/crm/deliveries/abc123/cancel', json={'reason': 'x'})
        assert response.status_code == 200
        assert response.get_json() == {
            'success': True,
            'message': 'Delivery abc123 cancelled successfully',
            'data': {'id': 'abc123', 'reason': 'x'},
        }

    def test_complete_echoes_body(self, client):
        response = client.post('/api/crm/deliveries/abc123/complete', json={'signedBy': 'Ann'})
        assert response.status_code == 200
        body = response.get_json()
        assert body['message'] == 'Delivery abc123 completed successfully'
        assert body['data'] == {'id': 'abc123', 'signedBy': 'Ann'}

    def test_cancel_does_not_touch_stored_delivery(self, client, login):
        login(role='manager')
        delivery = client.post('/api/crm/deliveries',
                               json={'customerName': 'Ann', 'address': '1 Main St'}).get_json()['data']
        client.post(f"/api/crm/deliveries/{delivery['id']}/cancel", json={})
        listed = client.get('/api/crm/deliveries').get_json()['data']['deliveries']
        assert listed[0]['status'] == 'scheduled'

    def test_malformed_body_returns_500_envelope(self, client):
        response = client.post('/api/crm/deliveries/abc123/cancel', data='{not json',
                               content_type='application/json')
        assert response.status_code == 500
        assert response.get_json() == {'success': False, 'error': 'Failed to cancel delivery'}

    def test_null_body_echoes_only_id(self, client):
        response = client.post('/api/crm/deliveries/d1/cancel', data='null',
                               content_type='application/json')
        assert response.status_code == 200
        assert response.get_json() == {
            'success': True,
            'message': 'Delivery d1 cancelled successfully',
            'data': {'id': 'd1'},
        }

    def test_null_body_on_complete(self, client):
        response = client.post('/api/crm/deliveries/d1/complete', data='null',
                               content_type='application/json')
        assert response.status_code == 200
        assert response.get_json()['data'] == {'id': 'd1'}

    def test_non_object_body_returns_500_envelope(self, client):
        response = client.post('/api/crm/deliveries/abc123/complete', json=[1, 2])
        assert response.status_code == 500
        assert response.get_json()['error'] == 'Failed to complete delivery'


@pytest.mark.integration
class TestDeliveries:
    """Tests for listing and scheduling deliveries"""

    def test_create_delivery_assigns_number(self, client, login):
        login(role='warehouse')
        response = client.post('/api/crm/deliveries', json={
            'customerName': 'Ann', 'address': '1 Main St',
            'items': [{'sku': 'WDG-001', 'quantity': 2}],
        })
        assert response.status_code == 201
        data = response.get_json()['data']
        assert data['deliveryNumber'].startswith('DEL-')
        assert data['deliveryNumber'].endswith('-00001')
        assert data['items'] == [{'sku': 'WDG-001', 'quantity': 2}]

    def test_list_filters_by_status(self, client, login):
        login(role='warehouse')
        client.post('/api/crm/deliveries', json={'customerName': 'A', 'address': 'x'})
        client.post('/api/crm/deliveries', json={'customerName': 'B', 'address': 'y', 'status': 'in-transit'})
        listed = client.get('/api/crm/deliveries?status=in-transit').get_json()['data']
        assert [d['customerName'] for d in listed['deliveries']] == ['B']
        assert listed['pagination']['total'] == 1

    def test_create_requires_fields(self, client, login):
        login(role='warehouse')
        response = client.post('/api/crm/deliveries', json={'customerName': 'A'})
        assert response.status_code == 400

    def test_viewer_cannot_create(self, client, login):
        login(role='viewer')
        response = client.post('/api/crm/deliveries', json={'customerName': 'A', 'address': 'x'})
        assert response.status_code == 403


@pytest.mark.integration
class TestErrorEnvelopes:
    """Tests for framework-level errors returning envelopes"""

    def test_unknown_route_returns_404_envelope(self, client):
        response = client.get('/api/does-not-exist')
        assert response.status_code == 404
        assert response.get_json()['success'] is False

    def test_wrong_method_returns_405_envelope(self, client):
        response = client.get('/api/crm/deliveries/abc/cancel')
        assert response.status_code == 405
        assert response.get_json()['success'] is False
