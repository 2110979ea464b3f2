"""Unit tests for the CSV transcoder."""

import csv
import io
from datetime import date

import pytest

from brick_catalog.application.services.csv_transcoder import CSV_HEADER, CsvTranscoder
from brick_catalog.domain.entities import CatalogRecord
from brick_catalog.domain.exceptions import CsvFormatError

HEADER_LINE = ",".join(CSV_HEADER)


@pytest.fixture
def transcoder() -> CsvTranscoder:
    return CsvTranscoder()


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


class TestExport:
    def test_empty_collection_is_header_only(self, transcoder: CsvTranscoder):
        assert transcoder.export([]) == HEADER_LINE + "\n"

    def test_row_layout(self, transcoder: CsvTranscoder):
        record = CatalogRecord(
            set_number="10497",
            title="Galaxy Explorer",
            owned=True,
            quantity_owned=1,
            release_year=2022,
            series="Icons",
            num_parts=1254,
            num_minifigs=4,
            approximate_value=99.9,
            value_last_updated=date(2024, 3, 5),
        )
        rows = _rows(transcoder.export([record]))

        assert rows[1] == [
            "10497", "", "Galaxy Explorer", "true", "1", "2022", "", "Icons",
            "1254", "4", "", "99.90", "2024-03-05", "",
        ]

    def test_quotes_commas_and_newlines(self, transcoder: CsvTranscoder):
        record = CatalogRecord(
            set_number="6929",
            title="War Machine",
            description='Big, "grey" ship\nwith wings',
        )
        rows = _rows(transcoder.export([record]))
        assert rows[1][6] == 'Big, "grey" ship\nwith wings'
        assert rows[1][3] == "false"

    def test_write_returns_row_count(self, transcoder: CsvTranscoder):
        buffer = io.StringIO()
        records = [CatalogRecord(set_number=str(i), title=f"Set {i}") for i in range(3)]
        assert transcoder.write(records, buffer) == 3


class TestParse:
    def test_parses_lenient_cells(self, transcoder: CsvTranscoder):
        text = (
            HEADER_LINE + "\n"
            "10497,,Galaxy Explorer,TRUE,x,199x,,Icons,1254,4,,abc,05/03/2024,\n"
        )
        [request] = transcoder.parse(text)

        assert request.set_number == "10497"
        assert request.alternate_set_number is None
        assert request.owned is True
        assert request.quantity_owned == 0
        assert request.release_year is None
        assert request.num_parts == 1254
        assert request.approximate_value is None
        assert request.value_last_updated is None

    @pytest.mark.parametrize("cell,expected", [("true", True), ("1", True), ("yes", False), ("", False)])
    def test_owned_flag(self, transcoder: CsvTranscoder, cell: str, expected: bool):
        text = HEADER_LINE + f"\n1,,Title,{cell},0,,,,0,0,,,,\n"
        [request] = transcoder.parse(text)
        assert request.owned is expected

    def test_non_finite_value_is_absent(self, transcoder: CsvTranscoder):
        text = HEADER_LINE + "\n1,,Title,true,1,,,,0,0,,NaN,,\n"
        [request] = transcoder.parse(text)
        assert request.approximate_value is None

    def test_skips_rows_without_set_number(self, transcoder: CsvTranscoder):
        text = (
            HEADER_LINE + "\n"
            ",,Orphan,true,1,,,,0,0,,,,\n"
            "\n"
            "2,,Kept,false,0,,,,0,0,,,,\n"
        )
        requests = transcoder.parse(text)
        assert [r.title for r in requests] == ["Kept"]

    def test_renamed_header_with_right_width_is_accepted(self, transcoder: CsvTranscoder):
        header = ",".join(f"col{i}" for i in range(len(CSV_HEADER)))
        text = header + "\n1,,Title,true,1,,,,0,0,,,,\n"
        assert len(transcoder.parse(text)) == 1

    def test_empty_input(self, transcoder: CsvTranscoder):
        with pytest.raises(CsvFormatError, match="failed to read CSV header"):
            transcoder.parse("")

    def test_wrong_header_width(self, transcoder: CsvTranscoder):
        with pytest.raises(CsvFormatError, match="expected 14 columns, got 3"):
            transcoder.parse("Set Number,Title,Owned\n1,A,true\n")

    def test_short_data_row_aborts(self, transcoder: CsvTranscoder):
        text = HEADER_LINE + "\n1,,Title,true,1,,,,0,0,,,,\n2,,Short\n"
        with pytest.raises(CsvFormatError) as exc_info:
            transcoder.parse(text)
        assert exc_info.value.line == 3

    def test_export_then_parse_keeps_values(self, transcoder: CsvTranscoder):
        record = CatalogRecord(
            set_number="10497",
            alternate_set_number="10497-1",
            title="Galaxy Explorer",
            owned=True,
            quantity_owned=2,
            release_year=2022,
            description="Classic, reimagined",
            series="Icons",
            num_parts=1254,
            num_minifigs=4,
            bricklink_url="https://www.bricklink.com/v2/catalog/catalogitem.page?S=10497-1",
            approximate_value=99.99,
            value_last_updated=date(2024, 3, 5),
            notes="Sealed",
            rebrickable_url="https://rebrickable.com/sets/10497-1/",
        )
        [request] = transcoder.parse(transcoder.export([record]))

        assert request.set_number == record.set_number
        assert request.description == record.description
        assert request.approximate_value == 99.99
        assert request.value_last_updated == date(2024, 3, 5)
        assert request.notes == "Sealed"
        # not part of the column layout
        assert request.rebrickable_url is None
