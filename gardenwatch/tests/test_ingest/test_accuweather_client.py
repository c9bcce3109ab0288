"""Tests for AccuWeather API client with mocked httpx."""

import httpx
import pytest
import respx

from gardenwatch.ingest.accuweather_client import AccuWeatherClient, ForecastRetrievalError

FORECAST_URL = "https://test-aw.example.com/forecasts/v1/daily/5day/349727"


@pytest.fixture
def accuweather() -> AccuWeatherClient:
    return AccuWeatherClient(api_key="aw-key", base_url="https://test-aw.example.com/")


class TestGetDailyForecast:
    @respx.mock
    def test_success(self, accuweather: AccuWeatherClient, accuweather_response: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=accuweather_response)
        )

        result = accuweather.get_daily_forecast("349727")
        assert len(result["DailyForecasts"]) == 5

    @respx.mock
    def test_query_params_and_headers(
        self, accuweather: AccuWeatherClient, accuweather_response: dict
    ):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=accuweather_response)
        )

        accuweather.get_daily_forecast("349727")
        request = route.calls[0].request
        assert request.url.params["apikey"] == "aw-key"
        assert request.url.params["details"] == "true"
        assert "gardenwatch" in request.headers["user-agent"]

    @respx.mock
    def test_http_error_not_retried(self, accuweather: AccuWeatherClient):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(503, text="Service Unavailable")
        )

        with pytest.raises(ForecastRetrievalError, match="503") as exc_info:
            accuweather.get_daily_forecast("349727")
        assert exc_info.value.status_code == 503
        assert route.call_count == 1

    @respx.mock
    def test_unauthorized(self, accuweather: AccuWeatherClient):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(401, json={"Code": "Unauthorized"})
        )

        with pytest.raises(ForecastRetrievalError) as exc_info:
            accuweather.get_daily_forecast("349727")
        assert exc_info.value.status_code == 401

    @respx.mock
    def test_network_error(self, accuweather: AccuWeatherClient):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ForecastRetrievalError, match="Request failed") as exc_info:
            accuweather.get_daily_forecast("349727")
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_non_json_body(self, accuweather: AccuWeatherClient):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )

        with pytest.raises(ForecastRetrievalError, match="not JSON"):
            accuweather.get_daily_forecast("349727")

    def test_missing_api_key(self):
        with pytest.raises(ForecastRetrievalError, match="API key"):
            AccuWeatherClient(api_key="")
