"""
Tests for the supplier API
"""
import pytest


@pytest.fixture
def admin_client(client, login):
    login(role='admin')
    return client


@pytest.mark.integration
class TestSuppliers:
    """Tests for /api/suppliers"""

    def test_create_supplier(self, admin_client, sample_supplier_data):
        response = admin_client.post('/api/suppliers', json=sample_supplier_data)
        assert response.status_code == 201
        body = response.get_json()
        assert body['success'] is True
        assert body['message'] == 'Supplier created successfully'
        assert body['data']['createdBy'] == 'user-1'

    def test_create_supplier_requires_name_and_email(self, admin_client):
        response = admin_client.post('/api/suppliers', json={'name': 'Acme'})
        assert response.status_code == 400
        assert response.get_json() == {'success': False, 'error': 'Name and email are required'}

    def test_list_sorted_by_name(self, admin_client):
        for name in ('Zeta Parts', 'Alpha Metals', 'Mid Supplies'):
            admin_client.post('/api/suppliers', json={'name': name, 'email': 'a@b.co'})
        body = admin_client.get('/api/suppliers').get_json()
        assert body['message'] == 'Suppliers fetched successfully'
        names = [s['name'] for s in body['data']['suppliers']]
        assert names == ['Alpha Metals', 'Mid Supplies', 'Zeta Parts']
        assert body['data']['pagination']['total'] == 3

    def test_list_respects_limit(self, admin_client):
        for i in range(3):
            admin_client.post('/api/suppliers', json={'name': f'S{i}', 'email': 'a@b.co'})
        body = admin_client.get('/api/suppliers?limit=2').get_json()['data']
        assert len(body['suppliers']) == 2
        assert body['pagination']['pages'] == 2

    def test_delete_deactivates(self, admin_client, sample_supplier_data):
        supplier = admin_client.post('/api/suppliers', json=sample_supplier_data).get_json()['data']
        assert admin_client.delete(f"/api/suppliers/{supplier['id']}").status_code == 200
        assert admin_client.get('/api/suppliers').get_json()['data']['suppliers'] == []
        detail = admin_client.get(f"/api/suppliers/{supplier['id']}").get_json()['data']
        assert detail['isActive'] is False

    def test_update_supplier(self, admin_client, sample_supplier_data):
        supplier = admin_client.post('/api/suppliers', json=sample_supplier_data).get_json()['data']
        response = admin_client.put(f"/api/suppliers/{supplier['id']}", json={'paymentTerms': 'Net 60'})
        assert response.status_code == 200
        assert response.get_json()['data']['paymentTerms'] == 'Net 60'

    def test_missing_supplier_returns_404(self, admin_client):
        response = admin_client.get('/api/suppliers/unknown')
        assert response.status_code == 404
        assert response.get_json()['error'] == 'Supplier not found'

    def test_sales_role_cannot_read_suppliers(self, client, login):
        login(role='sales')
        assert client.get('/api/suppliers').status_code == 403
