"""Tests for advisor_api.core.config module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from advisor_api.core.config import (
    DEFAULT_DATA_PATH,
    get_analysis_delay,
    get_catalog_path,
    get_data_path,
    get_default_currency,
)
from advisor_api.domain.entities import Currency


class TestGetDataPath:
    """Tests for get_data_path."""

    def test_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_data_path() == DEFAULT_DATA_PATH

    def test_reads_from_env(self) -> None:
        with patch.dict(os.environ, {"ADVISOR_DATA_PATH": "/srv/advisor"}, clear=True):
            assert get_data_path() == Path("/srv/advisor")


class TestGetCatalogPath:
    """Tests for get_catalog_path."""

    def test_unset_means_builtin_sample(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_catalog_path() is None

    def test_reads_from_env(self) -> None:
        with patch.dict(os.environ, {"INSTRUMENT_CATALOG_PATH": "catalog.json"}, clear=True):
            assert get_catalog_path() == Path("catalog.json")


class TestGetAnalysisDelay:
    """Tests for get_analysis_delay."""

    def test_default_is_zero(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_analysis_delay() == 0.0

    def test_reads_from_env(self) -> None:
        with patch.dict(os.environ, {"ANALYSIS_DELAY_SECONDS": "2"}, clear=True):
            assert get_analysis_delay() == 2.0

    @pytest.mark.parametrize("value", ["soon", "-1", "inf", "nan"])
    def test_invalid_raises(self, value: str) -> None:
        with patch.dict(os.environ, {"ANALYSIS_DELAY_SECONDS": value}, clear=True):
            with pytest.raises(ValueError, match="ANALYSIS_DELAY_SECONDS"):
                get_analysis_delay()


class TestGetDefaultCurrency:
    """Tests for get_default_currency."""

    def test_default_is_brl(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_default_currency() == Currency.BRL

    def test_case_insensitive(self) -> None:
        with patch.dict(os.environ, {"DEFAULT_CURRENCY": "usd"}, clear=True):
            assert get_default_currency() == Currency.USD

    def test_invalid_lists_valid_values(self) -> None:
        with patch.dict(os.environ, {"DEFAULT_CURRENCY": "GBP"}, clear=True):
            with pytest.raises(ValueError, match="BRL, USD, EUR"):
                get_default_currency()


class TestSuiteIsolation:
    """The suite never reads or writes the working directory's data dir."""

    def test_data_path_is_under_tmp_path(self, tmp_path) -> None:
        assert get_data_path() == tmp_path / "data"

    def test_other_env_vars_are_cleared(self) -> None:
        assert "INSTRUMENT_CATALOG_PATH" not in os.environ
        assert "ANALYSIS_DELAY_SECONDS" not in os.environ
        assert "DEFAULT_CURRENCY" not in os.environ
