"""
Unit tests for the HTTP client wrapper.
"""

import pytest
from unittest.mock import Mock, patch
import requests

from authproxy.infrastructure.http.client import HttpClient


class TestHttpClient:
    """Test the HttpClient class."""

    @pytest.fixture
    def http_client(self):
        """Create an HTTP client instance."""
        return HttpClient('https://api.example.com')

    @pytest.fixture
    def mock_response(self):
        response = Mock()
        response.status_code = 200
        response.headers = {'Content-Length': '16'}
        return response

    def test_client_initialization(self):
        """Test HTTP client initialization."""
        client = HttpClient('https://api.example.com/', timeout=60)

        assert client.base_url == 'https://api.example.com'  # Trailing slash removed
        assert client.timeout == 60
        assert client.session is not None

    def test_client_with_existing_session(self):
        """Test client with provided session."""
        mock_session = Mock(spec=requests.Session)
        mock_session.headers = {}
        client = HttpClient('https://api.example.com', session=mock_session)

        assert client.session == mock_session

    def test_default_headers_applied_to_session(self):
        client = HttpClient(headers={'X-Api-Key': 'abc'})

        assert client.session.headers['X-Api-Key'] == 'abc'

    def test_build_url_relative(self, http_client):
        """Test building URL from relative endpoint."""
        assert http_client._build_url('/api/data') == 'https://api.example.com/api/data'
        assert http_client._build_url('api/data') == 'https://api.example.com/api/data'

    def test_build_url_absolute(self, http_client):
        """Test building URL from absolute endpoint."""
        url = http_client._build_url('https://other.example.com/data')
        assert url == 'https://other.example.com/data'

    def test_build_url_without_base(self):
        client = HttpClient()

        assert client._build_url('https://api.example.com/x') == 'https://api.example.com/x'
        assert client._build_url('/relative') == '/relative'

    @patch('requests.Session.request')
    def test_get_request(self, mock_request, http_client, mock_response):
        """Test GET request."""
        mock_request.return_value = mock_response

        response = http_client.get('/api/data', params={'key': 'value'})

        assert response == mock_response
        mock_request.assert_called_once_with(
            'GET',
            'https://api.example.com/api/data',
            params={'key': 'value'},
            timeout=30
        )

    @patch('requests.Session.request')
    def test_post_request_with_json(self, mock_request, http_client, mock_response):
        """Test POST request with JSON data."""
        mock_request.return_value = mock_response

        http_client.post('/api/json', json={'key': 'value'})

        mock_request.assert_called_once_with(
            'POST',
            'https://api.example.com/api/json',
            data=None,
            json={'key': 'value'},
            timeout=30
        )

    @pytest.mark.parametrize('method', ['put', 'patch'])
    @patch('requests.Session.request')
    def test_body_methods(self, mock_request, method, http_client, mock_response):
        mock_request.return_value = mock_response

        getattr(http_client, method)('items/1', data='payload')

        args, kwargs = mock_request.call_args
        assert args == (method.upper(), 'https://api.example.com/items/1')
        assert kwargs['data'] == 'payload'

    @pytest.mark.parametrize('method', ['delete', 'head'])
    @patch('requests.Session.request')
    def test_bodyless_methods(self, mock_request, method, http_client, mock_response):
        mock_request.return_value = mock_response

        getattr(http_client, method)('items/1')

        mock_request.assert_called_once_with(
            method.upper(), 'https://api.example.com/items/1', timeout=30
        )

    @patch('requests.Session.request')
    def test_custom_timeout(self, mock_request, http_client, mock_response):
        """Test request with custom timeout."""
        mock_request.return_value = mock_response

        http_client.get('/api/data', timeout=60)

        assert mock_request.call_args[1]['timeout'] == 60

    @patch('requests.Session.request')
    def test_no_default_timeout(self, mock_request, mock_response):
        mock_request.return_value = mock_response
        client = HttpClient('https://api.example.com', timeout=None)

        client.get('/')

        assert mock_request.call_args[1]['timeout'] is None

    @patch('requests.Session.request')
    def test_errors_propagate(self, mock_request, http_client):
        mock_request.side_effect = requests.exceptions.ProxyError('407 Proxy Authentication Required')

        with pytest.raises(requests.exceptions.ProxyError):
            http_client.get('/api/data')

    def test_close_session(self, http_client):
        """Test closing the session."""
        http_client.session = Mock()
        http_client.close()

        http_client.session.close.assert_called_once()

    def test_context_manager_closes(self):
        session = Mock(spec=requests.Session)
        session.headers = {}

        with HttpClient(session=session) as client:
            assert client.session is session

        session.close.assert_called_once()
