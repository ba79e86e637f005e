"""
Tests unitaires pour InMemoryTableStore et le registre des tables.
"""

import pytest

from portfolio_backup.infrastructure.adapters.memory_table_store import InMemoryTableStore
from portfolio_backup.infrastructure.persistence import table_registry


class TestTableRegistry:
    """Tests pour le registre des tables."""

    def test_fourteen_tables(self):
        """Le registre couvre les 14 tables du portfolio."""
        names = table_registry.table_names()

        assert len(names) == 14
        assert len(set(names)) == 14
        assert names[0] == "users"
        assert names[-1] == "seoSettings"

    def test_parents_before_children(self):
        """Aucune table enfant ne precede sa table parente."""
        assert table_registry.find_order_violations() == []

    def test_get_model(self):
        """get_model resout un nom logique."""
        assert table_registry.get_model("skills").__tablename__ == "skills"
        assert table_registry.get_model("skillCategories").__tablename__ == "skill_categories"
        assert table_registry.get_model("unknown") is None

    def test_cascade_children(self):
        """Les cascades suivent les cles etrangeres ON DELETE CASCADE."""
        assert table_registry.cascade_children("skillCategories") == ["skills"]
        assert table_registry.cascade_children("caseStudies") == ["portfolioImages"]
        assert table_registry.cascade_children("users") == []
        assert table_registry.cascade_children("unknown") == []


class TestInMemoryTableStore:
    """Tests pour InMemoryTableStore."""

    def test_default_tables(self):
        """Par defaut, les tables du registre."""
        store = InMemoryTableStore()

        assert store.table_names() == table_registry.table_names()
        assert store.has_table("caseStudies")
        assert not store.has_table("legacy")

    def test_insert_and_select(self):
        """Les lignes inserees sont relues dans l'ordre."""
        store = InMemoryTableStore(["a"])

        store.insert_rows("a", [{"id": 1}, {"id": 2}])

        assert store.select_all("a") == [{"id": 1}, {"id": 2}]

    def test_rows_are_copied(self):
        """Modifier une ligne relue ne modifie pas le store."""
        store = InMemoryTableStore(["a"])
        rows = [{"id": 1, "tags": ["x"]}]
        store.insert_rows("a", rows)

        rows[0]["tags"].append("y")
        store.select_all("a")[0]["id"] = 99

        assert store.select_all("a") == [{"id": 1, "tags": ["x"]}]

    def test_delete_all(self):
        """delete_all vide la table."""
        store = InMemoryTableStore(["a"])
        store.insert_rows("a", [{"id": 1}])

        store.delete_all("a")

        assert store.select_all("a") == []

    def test_unknown_table_raises(self):
        """Une table inconnue leve KeyError."""
        store = InMemoryTableStore(["a"])

        with pytest.raises(KeyError):
            store.select_all("b")
        with pytest.raises(KeyError):
            store.insert_rows("b", [{"id": 1}])

    def test_default_cascades_follow_registry(self):
        """Vider une table parente vide ses enfants."""
        store = InMemoryTableStore()
        store.insert_rows("skillCategories", [{"id": 1}])
        store.insert_rows("skills", [{"id": 1, "category_id": 1}])

        store.delete_all("skillCategories")

        assert store.cascade_targets("skillCategories") == ["skills"]
        assert store.select_all("skills") == []

    def test_explicit_names_have_no_cascade(self):
        """Avec des tables explicites, aucune cascade par defaut."""
        store = InMemoryTableStore(["parent", "child"])
        store.insert_rows("child", [{"id": 1}])

        store.delete_all("parent")

        assert store.select_all("child") == [{"id": 1}]

    def test_validate_rows_rejects_non_objects(self):
        """validate_rows refuse une ligne qui n'est pas un objet."""
        store = InMemoryTableStore(["a"])

        with pytest.raises(ValueError):
            store.validate_rows("a", [{"id": 1}, ["not", "a", "row"]])
