"""
Unit tests for paths and the projects collection.
"""

import time

import pytest

from saasistent.storage import (
    ProjectNotFoundError,
    ProjectRecord,
    ProjectStatus,
    ProjectStore,
    get_projects_dir,
    get_saasistent_home,
    slugify,
)
from saasistent.wizard import ProjectConfig


class TestPaths:
    """Tests for path helpers."""

    def test_home_from_environment(self, saasistent_home):
        """Test that SAASISTENT_HOME relocates everything."""
        assert get_saasistent_home() == saasistent_home.resolve()
        assert get_projects_dir() == saasistent_home.resolve() / "projects"

    def test_home_default(self, monkeypatch):
        """Test the default home directory."""
        monkeypatch.delenv("SAASISTENT_HOME")
        assert get_saasistent_home().name == ".saasistent"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Acme", "acme"),
            ("My Cool App!", "my-cool-app"),
            ("  spaced   out  ", "spaced-out"),
            ("", "project"),
            ("***", "project"),
        ],
    )
    def test_slugify(self, name, expected):
        """Test file-name slugs for project names."""
        assert slugify(name) == expected


class TestProjectStore:
    """Tests for the JSON-file projects collection."""

    def test_empty_store(self, temp_dir):
        """Test listing a store that does not exist yet."""
        assert ProjectStore(temp_dir / "projects").list_projects() == []

    def test_save_and_get(self, temp_dir, acme_config):
        """Test persisting a project built from a configuration."""
        store = ProjectStore(temp_dir)
        record = store.save(ProjectRecord.from_config(acme_config))

        loaded = store.get(record.id)
        assert loaded.name == "Acme"
        assert loaded.status == ProjectStatus.CONFIGURED
        assert loaded.framework == "nextjs"
        assert loaded.config == acme_config

    def test_default_directory(self, saasistent_home, acme_config):
        """Test that the store lives under the home directory by default."""
        record = ProjectStore().save(ProjectRecord.from_config(acme_config))
        assert (saasistent_home / "projects" / f"{record.id}.json").exists()

    def test_list_newest_first(self, temp_dir):
        """Test ordering by last update."""
        store = ProjectStore(temp_dir)
        older = store.save(ProjectRecord(name="Older"))
        time.sleep(0.01)
        newer = store.save(ProjectRecord(name="Newer"))

        assert [r.id for r in store.list_projects()] == [newer.id, older.id]

    def test_unreadable_files_skipped(self, temp_dir):
        """Test that corrupt files do not break listing."""
        store = ProjectStore(temp_dir)
        store.save(ProjectRecord(name="Good"))
        (temp_dir / "broken.json").write_text("{not json", encoding="utf-8")

        assert [r.name for r in store.list_projects()] == ["Good"]

    def test_mark_generated(self, temp_dir, acme_config):
        """Test recording artifact paths."""
        store = ProjectStore(temp_dir)
        record = store.save(ProjectRecord.from_config(acme_config))

        updated = store.mark_generated(record.id, {"init_prompt": "/out/acme-init-prompt.md"})

        assert updated.status == ProjectStatus.GENERATED
        assert store.get(record.id).artifacts == {"init_prompt": "/out/acme-init-prompt.md"}
        assert updated.updated_at >= record.updated_at

    def test_missing_project(self, temp_dir):
        """Test errors for unknown ids."""
        store = ProjectStore(temp_dir)
        with pytest.raises(ProjectNotFoundError):
            store.get("missing")
        with pytest.raises(ProjectNotFoundError):
            store.delete("missing")

    def test_delete(self, temp_dir):
        """Test removing a project."""
        store = ProjectStore(temp_dir)
        record = store.save(ProjectRecord(name="Temp"))
        store.delete(record.id)
        assert store.list_projects() == []

    def test_record_trims_identity(self):
        """Test that records store trimmed name and description."""
        record = ProjectRecord.from_config(ProjectConfig(name=" Acme ", description=" d "))
        assert record.name == "Acme"
        assert record.description == "d"
