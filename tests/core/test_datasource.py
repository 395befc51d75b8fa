"""
Tests for DataSource: CSV ingestion and column classification.
"""

import numpy as np
import pandas as pd
import pytest

from pydescstats.core.datasource import DataSource
from pydescstats.core.exceptions import EmptyDataError, ValidationError


GRADES_CSV = (
    "name,score,age\n"
    "ana,7.5,19\n"
    "bia,8,21\n"
    "caio,6,n/a\n"
    "duda,9.5,20\n"
)


class TestFromText:

    def test_columns_in_file_order(self):
        ds = DataSource.from_text(GRADES_CSV)
        assert ds.columns == ('name', 'score', 'age')
        assert ds.keys() == frozenset({'name', 'score', 'age'})
        assert ds.n_observations == 4

    def test_numeric_columns(self):
        ds = DataSource.from_text(GRADES_CSV)
        numeric = ds.numeric_columns()
        assert set(numeric) == {'score', 'age'}
        np.testing.assert_array_equal(numeric['score'], [7.5, 8.0, 6.0, 9.5])
        # 'n/a' is not a number: 3 of 4 cells parse (75% >= 70%)
        np.testing.assert_array_equal(numeric['age'], [19.0, 21.0, 20.0])

    def test_text_columns(self):
        ds = DataSource.from_text(GRADES_CSV)
        assert ds.text_columns() == ('name',)

    def test_decimal_comma_and_symbols(self):
        ds = DataSource.from_text('price;qty\nR$ 3,50;2\nR$ 10,00;5\n', sep=';')
        np.testing.assert_allclose(ds.parsed_column('price'), [3.5, 10.0])

    def test_crlf_line_endings(self):
        ds = DataSource.from_text("a,b\r\n1,2\r\n3,4\r\n")
        assert ds.n_observations == 2
        np.testing.assert_array_equal(ds.numeric_columns()['b'], [2.0, 4.0])

    def test_whitespace_trimmed(self):
        ds = DataSource.from_text(" a , b \n 1 , 2 \n3,4\n")
        assert ds.columns == ('a', 'b')
        np.testing.assert_array_equal(ds.parsed_column('a'), [1.0, 3.0])

    def test_short_rows_skipped(self):
        ds = DataSource.from_text("a,b\n1,2\n3\n5,6\n")
        assert ds.n_observations == 2
        assert ds.metadata['n_skipped_lines'] == 1

    def test_long_rows_skipped(self):
        ds = DataSource.from_text("a,b\n1,2\n3,4,5\n5,6\n")
        assert ds.n_observations == 2
        assert ds.metadata['n_skipped_lines'] == 1

    def test_numeric_ratio(self):
        ds = DataSource.from_text(GRADES_CSV)
        assert ds.numeric_ratio('score') == 1.0
        assert ds.numeric_ratio('age') == 0.75
        assert ds.numeric_ratio('name') == 0.0

    def test_min_count(self):
        ds = DataSource.from_text("a,b\n1,x\n")
        assert 'a' not in ds.numeric_columns()
        assert 'a' in ds.numeric_columns(min_count=1)


class TestReadErrors:

    def test_empty_input(self):
        with pytest.raises(EmptyDataError):
            DataSource.from_text("")

    def test_header_only(self):
        with pytest.raises(ValidationError, match="at least one data line"):
            DataSource.from_text("a,b\n")

    def test_no_valid_rows(self):
        with pytest.raises(EmptyDataError, match="no valid data lines"):
            DataSource.from_text("a,b\n1\n2\n")

    def test_duplicate_headers(self):
        with pytest.raises(ValidationError, match="duplicate"):
            DataSource.from_text("a,a\n1,2\n")

    def test_empty_header(self):
        with pytest.raises(ValidationError, match="empty column headers"):
            DataSource.from_text("a,\n1,2\n")

    @pytest.mark.parametrize("header", ["<b>", "x{1}", "a|b"])
    def test_forbidden_header_characters(self, header):
        with pytest.raises(ValidationError, match="invalid characters"):
            DataSource.from_text(f"{header},ok\n1,2\n")


class TestAccess:

    def test_getitem_missing(self):
        ds = DataSource.from_text(GRADES_CSV)
        with pytest.raises(KeyError, match="no column 'height'"):
            ds['height']

    def test_contains(self):
        ds = DataSource.from_text(GRADES_CSV)
        assert 'score' in ds
        assert 'height' not in ds

    def test_metadata_is_copy(self):
        ds = DataSource.from_text(GRADES_CSV)
        ds.metadata['n_observations'] = 99
        assert ds.n_observations == 4


class TestFactories:

    def test_from_dataframe(self):
        df = pd.DataFrame({'x': [1, 2, 3], 'label': ['a', 'b', 'c']})
        ds = DataSource.from_dataframe(df)
        assert ds['x'].dtype == np.float64
        assert ds.text_columns() == ('label',)
        assert ds.metadata['source'] == 'dataframe'

    def test_from_file_csv(self, tmp_path):
        path = tmp_path / "grades.csv"
        path.write_text(GRADES_CSV, encoding='utf-8')
        ds = DataSource.from_file(path)
        assert ds.n_observations == 4
        assert ds.metadata['source_path'] == str(path)

    def test_from_file_tsv(self, tmp_path):
        path = tmp_path / "grades.tsv"
        path.write_text("a\tb\n1\t2\n3\t4\n", encoding='utf-8')
        ds = DataSource.from_file(path)
        np.testing.assert_array_equal(ds.numeric_columns()['a'], [1.0, 3.0])

    def test_unknown_suffix(self, tmp_path):
        with pytest.raises(ValidationError, match="Unknown file format"):
            DataSource.from_file(tmp_path / "grades.xlsx")

    def test_build_dispatch(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a\n1\n2\n", encoding='utf-8')
        assert DataSource.build(str(path)).n_observations == 2
        assert DataSource.build(path).n_observations == 2
        assert DataSource.build("a\n1\n2\n").n_observations == 2
        assert DataSource.build(pd.DataFrame({'a': [1.0]})).n_observations == 1

    def test_build_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Cannot build"):
            DataSource.build(42)
