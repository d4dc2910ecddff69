"""Tests for GetLog, ListLogs, UpdateLogStatus and DeleteLog use cases."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from logdrop.application.use_cases.delete_log import DeleteLog
from logdrop.application.use_cases.get_log import GetLog
from logdrop.application.use_cases.list_logs import ListLogs
from logdrop.application.use_cases.update_log_status import UpdateLogStatus
from logdrop.domain.entities.log_record import LogRecord
from logdrop.domain.errors import LogRecordNotFoundError
from logdrop.domain.services.path_sanitizer import PathSanitizer
from logdrop.domain.value_objects.log_filter import LogFilter
from logdrop.domain.value_objects.log_status import LogStatus
from logdrop.infrastructure.persistence.artifact_store import FileArtifactStore


@pytest.fixture
def mock_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_store() -> AsyncMock:
    store = AsyncMock()
    store.delete.return_value = True
    return store


class TestGetLog:
    @pytest.mark.asyncio
    async def test_returns_record(self, mock_repo: AsyncMock) -> None:
        expected = LogRecord(id=3, device_id="dev-7")
        mock_repo.get.return_value = expected

        assert await GetLog(mock_repo).execute(3) is expected

    @pytest.mark.asyncio
    async def test_missing_raises(self, mock_repo: AsyncMock) -> None:
        mock_repo.get.return_value = None

        with pytest.raises(LogRecordNotFoundError):
            await GetLog(mock_repo).execute(3)


class TestListLogs:
    @pytest.mark.asyncio
    async def test_passes_filters(self, mock_repo: AsyncMock) -> None:
        filters = LogFilter(device_id="dev-7")
        mock_repo.list_records.return_value = []

        assert await ListLogs(mock_repo).execute(filters) == []
        mock_repo.list_records.assert_awaited_once_with(filters)


class TestUpdateLogStatus:
    @pytest.mark.asyncio
    async def test_updates(self, mock_repo: AsyncMock) -> None:
        updated = LogRecord(id=1, device_id="dev-7", status=LogStatus.COMPLETED)
        mock_repo.update_status.return_value = updated

        result = await UpdateLogStatus(mock_repo).execute(1, LogStatus.COMPLETED)

        assert result is updated
        mock_repo.update_status.assert_awaited_once_with(1, LogStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_missing_raises(self, mock_repo: AsyncMock) -> None:
        mock_repo.update_status.return_value = None

        with pytest.raises(LogRecordNotFoundError) as exc_info:
            await UpdateLogStatus(mock_repo).execute(9, LogStatus.FAILED)

        assert exc_info.value.record_id == 9


class TestDeleteLog:
    @pytest.mark.asyncio
    async def test_deletes_record_and_artifact(
        self, mock_repo: AsyncMock, mock_store: AsyncMock, sanitizer: PathSanitizer
    ) -> None:
        record = LogRecord(id=1, device_id="dev-7", file_path="uploads/dev-7_1.gz")
        mock_repo.delete.return_value = record

        result = await DeleteLog(mock_repo, mock_store, sanitizer).execute(1)

        assert result is record
        mock_store.delete.assert_awaited_once_with(sanitizer.sanitize("uploads/dev-7_1.gz"))

    @pytest.mark.asyncio
    async def test_record_without_artifact(
        self, mock_repo: AsyncMock, mock_store: AsyncMock, sanitizer: PathSanitizer
    ) -> None:
        mock_repo.delete.return_value = LogRecord(id=1, device_id="dev-7")

        await DeleteLog(mock_repo, mock_store, sanitizer).execute(1)

        mock_store.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_already_removed_artifact_is_fine(
        self, mock_repo: AsyncMock, mock_store: AsyncMock, sanitizer: PathSanitizer
    ) -> None:
        mock_repo.delete.return_value = LogRecord(id=1, device_id="dev-7", file_path="uploads/a.gz")
        mock_store.delete.return_value = False

        result = await DeleteLog(mock_repo, mock_store, sanitizer).execute(1)

        assert result.id == 1

    @pytest.mark.asyncio
    async def test_unsafe_reference_is_not_followed(
        self, mock_repo: AsyncMock, mock_store: AsyncMock, sanitizer: PathSanitizer
    ) -> None:
        mock_repo.delete.return_value = LogRecord(
            id=1, device_id="dev-7", file_path="../../etc/passwd"
        )

        await DeleteLog(mock_repo, mock_store, sanitizer).execute(1)

        mock_store.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_reference_into_record_store_is_left_alone(
        self,
        mock_repo: AsyncMock,
        artifact_store: FileArtifactStore,
        sanitizer: PathSanitizer,
        storage_root: Path,
    ) -> None:
        record_file = storage_root / "records" / "00000002.json"
        record_file.parent.mkdir()
        record_file.write_text("{}")
        mock_repo.delete.return_value = LogRecord(
            id=1, device_id="dev-7", file_path="records/00000002.json"
        )

        result = await DeleteLog(mock_repo, artifact_store, sanitizer).execute(1)

        assert result.id == 1
        assert record_file.exists()

    @pytest.mark.asyncio
    async def test_missing_record_raises(
        self, mock_repo: AsyncMock, mock_store: AsyncMock, sanitizer: PathSanitizer
    ) -> None:
        mock_repo.delete.return_value = None

        with pytest.raises(LogRecordNotFoundError):
            await DeleteLog(mock_repo, mock_store, sanitizer).execute(1)

        mock_store.delete.assert_not_called()
