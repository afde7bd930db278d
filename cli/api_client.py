"""REST API client for kanadrill server."""

import requests


class DrillAPIClient:
    """Client for communicating with the kanadrill REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {})
        response.raise_for_status()
        return response.json()

    def _delete(self, endpoint: str) -> dict:
        """Make a DELETE request."""
        response = self.session.delete(f"{self.base_url}{endpoint}")
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/")

    def get_groups(self) -> list[dict]:
        """List the available kana groups."""
        return self._get("/api/groups")['groups']

    def start_session(self, groups: list[int]) -> dict:
        """Start a drill session over the given group indices."""
        return self._post("/api/sessions", {'user_id': self.user_id, 'groups': groups})

    def get_session(self, session_id: str) -> dict:
        """Get current round, mode and stats."""
        return self._get(f"/api/sessions/{session_id}")

    def submit_answer(self, session_id: str, choice: str, answer_ms: int = None) -> dict:
        """Submit a choice for the current round."""
        return self._post(f"/api/sessions/{session_id}/answer", {
            'choice': choice,
            'answer_ms': answer_ms
        })

    def end_session(self, session_id: str) -> dict:
        return self._delete(f"/api/sessions/{session_id}")

    def get_weights(self) -> dict:
        """Get this user's character weights."""
        return self._get(f"/api/users/{self.user_id}/weights")['weights']

    def reset_weights(self) -> dict:
        return self._post(f"/api/users/{self.user_id}/weights/reset")
