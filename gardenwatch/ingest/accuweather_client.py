"""AccuWeather daily forecast API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

ACCUWEATHER_BASE_URL = "http://dataservice.accuweather.com"
DEFAULT_USER_AGENT = "gardenwatch/0.1.0"


class ForecastRetrievalError(Exception):
    """Raised when the forecast cannot be fetched or is malformed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AccuWeatherClient:
    """Single-request client for the 5-day daily forecast endpoint.

    No retries: a failed request is reported to the caller as-is.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = ACCUWEATHER_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        details: bool = True,
    ):
        if not api_key:
            raise ForecastRetrievalError("AccuWeather API key not set")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.details = details

    def get_daily_forecast(self, location_key: str) -> dict:
        """Fetch the 5-day daily forecast for an AccuWeather location key."""
        url = f"{self.base_url}/forecasts/v1/daily/5day/{location_key}"
        params = {
            "apikey": self.api_key,
            "details": "true" if self.details else "false",
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Error fetching weather data: %s", e)
            raise ForecastRetrievalError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error(
                "AccuWeather %d for location %s: %s",
                resp.status_code, location_key, resp.text,
            )
            raise ForecastRetrievalError(
                f"HTTP {resp.status_code}: {resp.text}", resp.status_code
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise ForecastRetrievalError(f"Response is not JSON: {e}") from e
        if not isinstance(data, dict):
            raise ForecastRetrievalError("Response is not a JSON object")
        return data
