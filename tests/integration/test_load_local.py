"""
Integration tests: load the fixture files from local disk with the
default fetcher (no ``fetch=`` argument).
"""

from __future__ import annotations

import pandas as pd
import pytest

import load_data
from load_data import AnnotatedDocument, LoaderConfig
from load_data.config import ParseConfig
from tests.conftest import (
    ATSV_FILE,
    ATSV_TSV_FILE,
    CSV_FILE,
    JSON_FILE,
    RESULT,
    RESULT_META,
    TSV_FILE,
    TXT_FILE,
)

pytestmark = pytest.mark.integration


class TestLoadLocal:
    def test_paths(self):
        results = load_data.load_sync([JSON_FILE, CSV_FILE, TSV_FILE])
        assert results == [RESULT, RESULT, RESULT]

    def test_annotated_files(self):
        expected = AnnotatedDocument(meta=RESULT_META, data=RESULT)
        results = load_data.load_sync([str(ATSV_FILE), str(ATSV_TSV_FILE), TXT_FILE.as_uri()])
        assert results == [expected, expected, expected]

    def test_as_frame(self):
        config = LoaderConfig(parse=ParseConfig(as_frame=True))
        doc = load_data.load_sync(ATSV_FILE, config=config)
        assert isinstance(doc.data, pd.DataFrame)
        assert doc.data.to_dict(orient="records") == RESULT
        assert doc.meta == RESULT_META

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_data.load_sync([CSV_FILE, tmp_path / "missing.csv"])
