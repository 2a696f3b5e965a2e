"""REST API client for the quiz arcade server."""

import requests


class QuizAPIClient:
    """Client for communicating with the quiz arcade REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()
        self.session_id = None

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def list_games(self) -> list[dict]:
        return self._get("/api/games")['games']

    def get_levels(self, game: str, mode: str = None, group: str = None) -> list[dict]:
        params = {}
        if mode:
            params['mode'] = mode
        if group:
            params['group'] = group
        return self._get(f"/api/games/{game}/levels", params)['levels']

    def get_progress(self, game: str) -> dict:
        """Get stars, rank and totals for a game."""
        return self._get(f"/api/games/{game}/progress")

    def start_session(self, game: str, seed: int = None) -> dict:
        """Create a session and remember its id. Returns the initial state."""
        data = {'game': game, 'user_id': self.user_id}
        if seed is not None:
            data['seed'] = seed
        result = self._post("/api/sessions", data)
        self.session_id = result['session_id']
        return result['state']

    def get_state(self) -> dict:
        response = self.session.get(f"{self.base_url}/api/sessions/{self.session_id}")
        response.raise_for_status()
        return response.json()

    def send(self, command: str, value=None, challenge_id: str = None) -> tuple[bool, dict]:
        """Send a session command. Returns (accepted, state).

        challenge_id pins an answer or skip to the challenge the player saw.
        """
        data = {'command': command}
        if value is not None:
            data['value'] = value
        if challenge_id is not None:
            data['challenge_id'] = challenge_id
        result = self._post(f"/api/sessions/{self.session_id}/commands", data)
        return result['accepted'], result['state']

    def end_session(self) -> None:
        if self.session_id is None:
            return
        response = self.session.delete(f"{self.base_url}/api/sessions/{self.session_id}")
        response.raise_for_status()
        self.session_id = None
