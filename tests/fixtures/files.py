from pathlib import Path

import pytest


class FilesFixture:
    """A fixture providing access to test files."""

    def __init__(self, directory: str):
        self._base_path = Path(__file__).parent.parent
        self.directory = self._base_path / "files" / directory

    def sample_data(self, filename) -> bytes:
        return self.sample_path(filename).read_bytes()

    def sample_text(self, filename) -> str:
        return self.sample_path(filename).read_text()

    def sample_path(self, filename) -> Path:
        return self.directory / filename

    def sample_path_str(self, filename) -> str:
        return str(self.sample_path(filename))


class CollectionFilesFixture(FilesFixture):
    """A fixture providing access to collection metadata documents."""

    def __init__(self):
        super().__init__("collections")


@pytest.fixture()
def collection_files_fixture() -> CollectionFilesFixture:
    """A fixture providing access to collection metadata documents."""
    return CollectionFilesFixture()
