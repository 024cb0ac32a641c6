"""
Tests for the health check endpoint
"""
from unittest.mock import patch
from django.db import DatabaseError
from django.test import TestCase, Client


class HealthCheckTest(TestCase):
    """Test GET /health/"""

    def setUp(self):
        self.client = Client()

    def test_health_endpoint(self):
        response = self.client.get('/health/')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        for field in ['status', 'timestamp', 'version', 'database', 'response_time_ms']:
            self.assertIn(field, data)
        self.assertEqual(data['status'], 'healthy')
        self.assertEqual(data['database']['status'], 'healthy')
        self.assertGreaterEqual(data['response_time_ms'], 0)

    def test_health_endpoint_reports_database_failure(self):
        with patch('apps.common.health_views.connection') as connection:
            connection.cursor.side_effect = DatabaseError('connection refused')
            response = self.client.get('/health/')

        self.assertEqual(response.status_code, 503)
        data = response.json()
        self.assertEqual(data['status'], 'unhealthy')
        self.assertEqual(data['database']['error'], 'Database connectivity error')
