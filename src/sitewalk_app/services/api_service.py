"""API service for HTTP client abstraction."""
import requests
import time
import logging


class APIError(Exception):
    """Raised when the backend answers with a non-success status or cannot be reached."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class APIService:
    """HTTP client for backend API calls with error handling and retry logic."""

    def __init__(self, base_url='http://localhost:5000', max_retries=3, retry_delay=1.0, timeout=10.0, session=None):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logging.getLogger(self.__class__.__name__)

    def _make_request(self, method, url, **kwargs):
        """Make HTTP request with retry logic."""
        kwargs.setdefault('timeout', self.timeout)
        last_exception = None
        response = None

        for attempt in range(self.max_retries):
            try:
                response = self.session.request(method, url, **kwargs)
                # Don't retry on client errors (4xx) except for specific cases
                if 400 <= response.status_code < 500:
                    if response.status_code not in [408, 429]:  # Retry timeout and rate limit
                        return response
                elif response.status_code < 500:
                    return response

                if attempt < self.max_retries - 1:
                    self.logger.warning(f"Request failed (attempt {attempt + 1}/{self.max_retries}): {response.status_code} {response.reason}")
                    time.sleep(self.retry_delay * (2 ** attempt))  # Exponential backoff

            except requests.exceptions.RequestException as e:
                last_exception = e
                if attempt < self.max_retries - 1:
                    self.logger.warning(f"Request exception (attempt {attempt + 1}/{self.max_retries}): {e}")
                    time.sleep(self.retry_delay * (2 ** attempt))  # Exponential backoff
                else:
                    self.logger.error(f"Request failed after {self.max_retries} attempts: {e}")

        # Retries exhausted on a retryable status: hand back the last response
        if response is not None and last_exception is None:
            return response
        if last_exception:
            raise last_exception
        raise requests.exceptions.RequestException("All retry attempts failed")

    def request_json(self, method, endpoint, json=None):
        """Send a request and decode the JSON body.

        Returns:
            Decoded body, or None for empty responses (204)

        Raises:
            APIError: On a non-2xx status or when the server is unreachable
        """
        url = f"{self.base_url}{endpoint}"
        try:
            response = self._make_request(method, url, json=json)
        except requests.exceptions.RequestException as e:
            raise APIError(f"Could not reach server: {e}") from e

        if not 200 <= response.status_code < 300:
            raise APIError(self._error_message(response), response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON from {method} {endpoint}", response.status_code) from e

    @staticmethod
    def _error_message(response):
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason or 'Request failed'
        if isinstance(body, dict) and body.get('error'):
            return str(body['error'])
        return response.reason or 'Request failed'

