"""Unit tests for the CsvExchangeService (bulk import / export)."""

import pytest

from brick_catalog.application.schemas import CatalogRecordCreate
from brick_catalog.application.services import CsvExchangeService
from brick_catalog.application.services.catalog_service import record_from_create
from brick_catalog.application.services.csv_transcoder import CSV_HEADER
from brick_catalog.domain.entities import RecordQuery
from brick_catalog.domain.exceptions import CsvFormatError

HEADER_LINE = ",".join(CSV_HEADER)


@pytest.fixture
def service(repository) -> CsvExchangeService:
    return CsvExchangeService(repository)


async def _seed(repository, set_number: str, title: str, **kwargs) -> None:
    await repository.create(
        record_from_create(CatalogRecordCreate(set_number=set_number, title=title, **kwargs))
    )


@pytest.mark.asyncio
async def test_export_then_import_into_empty_store(repository, service):
    await _seed(repository, "10497", "Galaxy Explorer", owned=True, quantity_owned=1, approximate_value=99.99)
    await _seed(repository, "6929", "War Machine", series="Space")
    exported = await service.export_csv()

    target_repository = type(repository)()
    result = await CsvExchangeService(target_repository).import_csv(exported.encode("utf-8"))

    assert result.imported == 2
    assert result.skipped == 0
    assert result.errors == []
    imported = await target_repository.get_by_set_number("10497")
    assert imported.title == "Galaxy Explorer"
    assert imported.approximate_value == 99.99


@pytest.mark.asyncio
async def test_import_skips_existing_set_numbers(repository, service):
    await _seed(repository, "10497", "Galaxy Explorer")
    content = (
        HEADER_LINE + "\n"
        "10497,,Galaxy Explorer (copy),true,1,,,,0,0,,,,\n"
        "6929,,War Machine,false,0,,,,0,0,,,,\n"
    )
    result = await service.import_csv(content)

    assert result.imported == 1
    assert result.skipped == 1
    existing = await repository.get_by_set_number("10497")
    assert existing.title == "Galaxy Explorer"


@pytest.mark.asyncio
async def test_import_twice_skips_everything(service):
    content = HEADER_LINE + "\n1,,One,true,1,,,,0,0,,,,\n2,,Two,true,1,,,,0,0,,,,\n"
    await service.import_csv(content)
    second = await service.import_csv(content)

    assert second.imported == 0
    assert second.skipped == 2


@pytest.mark.asyncio
async def test_import_collects_row_errors_and_continues(repository, service):
    repository.failing_set_numbers = {"2"}
    content = (
        HEADER_LINE + "\n"
        "1,,One,true,1,,,,0,0,,,,\n"
        "2,,Two,true,1,,,,0,0,,,,\n"
        "3,,,true,1,,,,0,0,,,,\n"
        "4,,Four,true,1,,,,0,0,,,,\n"
    )
    result = await service.import_csv(content)

    assert result.imported == 2
    assert result.skipped == 0
    assert len(result.errors) == 2
    assert result.errors[0].startswith("Error checking set 2:")
    assert result.errors[1].startswith("Error importing set 3:")


@pytest.mark.asyncio
async def test_bad_header_creates_nothing(repository, service):
    with pytest.raises(CsvFormatError):
        await service.import_csv("Set Number,Title\n1,One\n")
    assert await repository.list_records(RecordQuery()) == []


@pytest.mark.asyncio
async def test_malformed_row_aborts_before_any_write(repository, service):
    content = HEADER_LINE + "\n1,,One,true,1,,,,0,0,,,,\n2,,Short\n"
    with pytest.raises(CsvFormatError):
        await service.import_csv(content)
    assert await repository.list_records(RecordQuery()) == []


@pytest.mark.asyncio
async def test_import_accepts_utf8_bom(service):
    content = ("\ufeff" + HEADER_LINE + "\n1,,Ünïcode,true,1,,,,0,0,,,,\n").encode("utf-8")
    result = await service.import_csv(content)
    assert result.imported == 1


@pytest.mark.asyncio
async def test_import_rejects_non_utf8(service):
    with pytest.raises(CsvFormatError):
        await service.import_csv(b"\xff\xfe\x00bad")
