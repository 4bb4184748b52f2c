"""
Tests for the lead API
"""
import pytest


@pytest.fixture
def sales_client(client, login):
    login(role='sales')
    return client


@pytest.mark.integration
class TestLeads:
    """Tests for /api/leads"""

    def test_create_and_list(self, sales_client, sample_lead_data):
        response = sales_client.post('/api/leads', json=sample_lead_data)
        assert response.status_code == 201
        assert response.get_json()['message'] == 'Lead created successfully'

        body = sales_client.get('/api/leads').get_json()['data']
        assert len(body['leads']) == 1
        assert body['pagination'] == {'page': 1, 'limit': 50, 'total': 1, 'pages': 1}

    def test_filters(self, sales_client):
        sales_client.post('/api/leads', json={'name': 'Ann Lee', 'email': 'ann@x.co', 'status': 'new', 'assignedTo': 'rep-1'})
        sales_client.post('/api/leads', json={'name': 'Bob Ray', 'email': 'bob@y.co', 'status': 'qualified',
                                              'company': 'Ray Farms'})

        qualified = sales_client.get('/api/leads?status=qualified').get_json()['data']['leads']
        assert [lead['name'] for lead in qualified] == ['Bob Ray']

        by_company = sales_client.get('/api/leads?search=farms').get_json()['data']['leads']
        assert [lead['name'] for lead in by_company] == ['Bob Ray']

        assigned = sales_client.get('/api/leads?assignedTo=rep-1').get_json()['data']['leads']
        assert [lead['name'] for lead in assigned] == ['Ann Lee']

    def test_invalid_pagination_is_tolerated(self, sales_client, sample_lead_data):
        sales_client.post('/api/leads', json=sample_lead_data)
        response = sales_client.get('/api/leads?page=-4&limit=zero')
        assert response.status_code == 200
        pagination = response.get_json()['data']['pagination']
        assert (pagination['page'], pagination['limit']) == (1, 50)

    def test_invalid_lead_rejected(self, sales_client):
        response = sales_client.post('/api/leads', json={'name': 'No Email'})
        assert response.status_code == 400

    def test_update_lead(self, sales_client, sample_lead_data):
        lead = sales_client.post('/api/leads', json=sample_lead_data).get_json()['data']
        response = sales_client.put(f"/api/leads/{lead['id']}", json={'status': 'contacted'})
        assert response.status_code == 200
        assert response.get_json()['data']['status'] == 'contacted'

    def test_sales_cannot_delete(self, sales_client, sample_lead_data):
        lead = sales_client.post('/api/leads', json=sample_lead_data).get_json()['data']
        assert sales_client.delete(f"/api/leads/{lead['id']}").status_code == 403

    def test_manager_can_delete(self, client, login, sample_lead_data):
        login(role='manager')
        lead = client.post('/api/leads', json=sample_lead_data).get_json()['data']
        assert client.delete(f"/api/leads/{lead['id']}").status_code == 200
        assert client.get(f"/api/leads/{lead['id']}").status_code == 404
