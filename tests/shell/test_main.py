"""Tests for the Cloud Function and local entry points."""

import os
from unittest.mock import Mock, patch

import pytest

from soonami.core.config import Config
from soonami.core.formatter import DisplayText
from soonami.main import _get_config, latest_earthquake, run_local


SAMPLE_TEXT = DisplayText(
    title="M 7.0 - offshore",
    date="Thu, 2 Jan 2014 at 00:02:00 UTC",
    alert="Tsunami alert was issued",
)


def _show_sample(display):
    display.show(SAMPLE_TEXT)
    return True


class TestGetConfig:
    """Tests for _get_config()."""

    def test_uses_config_path(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("display_timezone: Asia/Tokyo\n")

        with patch.dict(os.environ, {"CONFIG_PATH": str(path)}, clear=True):
            config = _get_config()

        assert config.display_timezone == "Asia/Tokyo"

    def test_uses_env_when_timezone_set(self):
        env = {"SOONAMI_TIMEZONE": "Europe/Lisbon"}
        with patch.dict(os.environ, env, clear=True):
            config = _get_config()

        assert config.display_timezone == "Europe/Lisbon"

    @pytest.mark.parametrize(
        "name", ["SOONAMI_CONNECT_TIMEOUT", "SOONAMI_READ_TIMEOUT"]
    )
    def test_uses_env_when_any_timeout_set(self, name):
        with patch.dict(os.environ, {name: "3"}, clear=True):
            config = _get_config()

        assert getattr(config, name.removeprefix("SOONAMI_").lower()) == 3.0

    @patch("soonami.main.load_config", return_value=Config())
    def test_falls_back_to_config_file(self, mock_load_config):
        with patch.dict(os.environ, {}, clear=True):
            _get_config()

        mock_load_config.assert_called_once_with()


class TestLatestEarthquake:
    """Tests for the HTTP entry point."""

    @patch("soonami.main._get_config", return_value=Config())
    @patch("soonami.main.Pipeline")
    def test_returns_display_strings(self, mock_pipeline_class, _config):
        mock_pipeline_class.return_value.update.side_effect = _show_sample

        response, status = latest_earthquake(Mock())

        assert status == 200
        assert response == {
            "status": "success",
            "title": "M 7.0 - offshore",
            "date": "Thu, 2 Jan 2014 at 00:02:00 UTC",
            "alert": "Tsunami alert was issued",
        }

    @patch("soonami.main._get_config", return_value=Config())
    @patch("soonami.main.Pipeline")
    def test_no_data(self, mock_pipeline_class, _config):
        mock_pipeline_class.return_value.update.return_value = False

        response, status = latest_earthquake(Mock())

        assert status == 200
        assert response == {"status": "no_data"}

    @patch("soonami.main._get_config", side_effect=ValueError("bad config"))
    def test_unexpected_error_returns_500(self, _config):
        response, status = latest_earthquake(Mock())

        assert status == 500
        assert response["status"] == "error"
        assert "bad config" in response["message"]


class TestRunLocal:
    """Tests for the local runner."""

    @patch("soonami.main._get_config", return_value=Config())
    @patch("soonami.main.EarthquakeTask")
    def test_exit_code_zero_when_displayed(self, mock_task_class, _config):
        mock_task_class.return_value.wait.return_value = True

        assert run_local(timeout=1) == 0
        mock_task_class.return_value.start.assert_called_once()

    @patch("soonami.main._get_config", return_value=Config())
    @patch("soonami.main.EarthquakeTask")
    def test_exit_code_one_without_event(self, mock_task_class, _config):
        mock_task_class.return_value.wait.return_value = False

        assert run_local(timeout=1) == 1
