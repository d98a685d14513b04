"""Tests for tether package exports and metadata."""

import tether


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(tether.__version__, str)
        assert "0.1.0" in tether.__version__

    def test_free_threading_declaration(self) -> None:
        assert tether._Py_mod_gil == 0

    def test_all_exports_resolvable(self) -> None:
        for name in tether.__all__:
            getattr(tether, name)

    def test_lazy_exports_are_the_real_objects(self) -> None:
        from tether.compare.equality import deep_equal
        from tether.reactive.gate import ChangeGate

        assert tether.deep_equal is deep_equal
        assert tether.ChangeGate is ChangeGate

    def test_invalid_attribute_raises(self) -> None:
        import pytest

        with pytest.raises(AttributeError, match="no attribute"):
            tether.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018
