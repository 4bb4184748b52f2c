"""
Pytest configuration and shared fixtures
"""
import os
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def app_config():
    """Fixture providing test configuration"""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def app(app_config):
    """Flask app on a fresh in-memory SQLite database"""
    from app_init import create_app
    from database import reset_engine

    flask_app = create_app(app_config)
    yield flask_app
    reset_engine()


@pytest.fixture
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture
def login(client):
    """Log the test client in with a given role and company"""
    def _login(role='admin', company_id='company-1', user_id='user-1', name='Test User'):
        with client.session_transaction() as sess:
            sess['user_id'] = user_id
            sess['user_name'] = name
            sess['user_role'] = role
            sess['company_id'] = company_id
    return _login


@pytest.fixture
def test_env_vars():
    """Fixture providing test environment variables"""
    original_env = os.environ.copy()

    os.environ['FLASK_ENV'] = 'testing'
    os.environ['SECRET_KEY'] = 'bizabode-qa-session-signing-key-0a9b8c7d6e5f4'
    os.environ['DATABASE_URL'] = 'sqlite://'

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_item_data():
    """Fixture providing a valid inventory item payload"""
    return {
        'sku': 'WDG-001',
        'name': 'Steel Widget',
        'category': 'hardware',
        'quantity': 25,
        'reorderLevel': 10,
        'unitPrice': 12.5,
        'costPrice': 7.25,
    }


@pytest.fixture
def sample_supplier_data():
    """Fixture providing a valid supplier payload"""
    return {
        'name': 'Acme Supplies',
        'email': 'orders@acme.example.com',
        'phone': '+18765551234',
        'contactPerson': 'Jane Brown',
        'paymentTerms': 'Net 30',
    }


@pytest.fixture
def sample_lead_data():
    """Fixture providing a valid lead payload"""
    return {
        'name': 'Marcus Green',
        'email': 'marcus@greenfarms.example.com',
        'company': 'Green Farms Ltd',
        'source': 'website',
        'status': 'new',
        'estimatedValue': 15000,
    }
