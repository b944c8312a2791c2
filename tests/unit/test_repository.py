"""Tests for the JSON design repository and the material catalog."""

import logging
from pathlib import Path

import pytest

from cabinet_studio.application.document import export_design, import_design
from cabinet_studio.contracts import (
    DesignNotFoundError,
    DesignRepositoryProtocol,
    MaterialCatalogProtocol,
    UnreadableDesignError,
)
from cabinet_studio.domain import Design
from cabinet_studio.infrastructure import DirectoryMaterialCatalog, JsonDesignRepository
from cabinet_studio.infrastructure.material_catalog import parse_texture_name


@pytest.fixture
def repository(tmp_path: Path) -> JsonDesignRepository:
    return JsonDesignRepository(tmp_path / "designs")


class TestJsonDesignRepository:
    """Tests for JsonDesignRepository."""

    def test_implements_protocol(self, repository: JsonDesignRepository) -> None:
        assert isinstance(repository, DesignRepositoryProtocol)

    def test_save_and_load(
        self, repository: JsonDesignRepository, furnished_design: Design
    ) -> None:
        design_id = repository.save_design(export_design(furnished_design))

        stored = repository.load_design(design_id)

        assert stored.id == design_id
        assert import_design(stored.document) == furnished_design
        assert (repository.directory / f"{design_id}.json").exists()

    def test_overwrite_keeps_created_at(
        self, repository: JsonDesignRepository, furnished_design: Design
    ) -> None:
        design_id = repository.save_design(export_design(furnished_design))
        first = repository.load_design(design_id)

        furnished_design.name = "Renamed"
        repository.save_design(export_design(furnished_design), design_id)
        second = repository.load_design(design_id)

        assert second.created_at == first.created_at
        assert second.updated_at >= first.updated_at
        assert second.document["name"] == "Renamed"

    def test_list_newest_first(self, repository: JsonDesignRepository, design: Design) -> None:
        first = repository.save_design(export_design(design))
        second = repository.save_design(export_design(design))
        repository.save_design(export_design(design), first)

        assert [d.id for d in repository.list_designs()] == [first, second]

    def test_list_empty_directory(self, repository: JsonDesignRepository) -> None:
        assert repository.list_designs() == []

    def test_delete(self, repository: JsonDesignRepository, design: Design) -> None:
        design_id = repository.save_design(export_design(design))
        repository.delete_design(design_id)

        with pytest.raises(DesignNotFoundError):
            repository.load_design(design_id)

    def test_missing_design(self, repository: JsonDesignRepository) -> None:
        with pytest.raises(DesignNotFoundError, match="Design not found: nope"):
            repository.load_design("nope")
        with pytest.raises(DesignNotFoundError):
            repository.delete_design("nope")

    @pytest.mark.parametrize("content", ["{}", "{not json", "[1, 2]", '{"id": "x", "created_at": 5}'])
    def test_list_skips_unreadable_files(
        self, repository: JsonDesignRepository, design: Design, content: str, caplog
    ) -> None:
        design_id = repository.save_design(export_design(design))
        (repository.directory / "junk.json").write_text(content, encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            listed = repository.list_designs()

        assert [d.id for d in listed] == [design_id]
        assert "junk" in caplog.text

    def test_load_unreadable_file(self, repository: JsonDesignRepository, design: Design) -> None:
        repository.save_design(export_design(design))
        (repository.directory / "junk.json").write_text("{}", encoding="utf-8")

        with pytest.raises(UnreadableDesignError, match="Design file is unreadable: junk"):
            repository.load_design("junk")

    def test_save_replaces_unreadable_file(
        self, repository: JsonDesignRepository, design: Design
    ) -> None:
        repository.directory.mkdir(parents=True)
        (repository.directory / "junk.json").write_text("{not json", encoding="utf-8")

        repository.save_design(export_design(design), "junk")

        assert repository.load_design("junk").document["name"] == design.name

    @pytest.mark.parametrize("design_id", ["../escape", "..", "a\\b", ".hidden"])
    def test_ids_cannot_leave_directory(
        self, repository: JsonDesignRepository, design: Design, design_id: str
    ) -> None:
        with pytest.raises(DesignNotFoundError):
            repository.save_design(export_design(design), design_id)


class TestMaterialCatalog:
    """Tests for DirectoryMaterialCatalog."""

    @pytest.fixture
    def catalog(self, tmp_path: Path) -> DirectoryMaterialCatalog:
        (tmp_path / "white-oak-wood.jpg").write_bytes(b"jpeg")
        (tmp_path / "walnut-wood.png").write_bytes(b"png")
        (tmp_path / "concrete.webp").write_bytes(b"webp")
        (tmp_path / "readme.txt").write_text("not a texture")
        return DirectoryMaterialCatalog(tmp_path)

    def test_implements_protocol(self, catalog: DirectoryMaterialCatalog) -> None:
        assert isinstance(catalog, MaterialCatalogProtocol)

    def test_lists_textures(self, catalog: DirectoryMaterialCatalog) -> None:
        materials = catalog.list_materials()

        assert [m.name for m in materials] == ["concrete", "walnut", "white oak"]
        assert materials[0].category == "other"
        assert materials[0].mime_type == "image/webp"
        assert materials[2].image_data == b"jpeg"

    def test_filter_by_category(self, catalog: DirectoryMaterialCatalog) -> None:
        materials = catalog.list_materials("wood")
        assert {m.id for m in materials} == {"white-oak-wood", "walnut-wood"}

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert DirectoryMaterialCatalog(tmp_path / "none").list_materials() == []

    @pytest.mark.parametrize(
        "stem, expected",
        [
            ("white-oak-wood", ("white oak", "wood")),
            ("concrete", ("concrete", "other")),
            ("Marble-Stone", ("Marble", "stone")),
        ],
    )
    def test_parse_texture_name(self, stem: str, expected: tuple[str, str]) -> None:
        assert parse_texture_name(stem) == expected
