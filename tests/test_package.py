"""Tests for the top-level strata package."""

import strata


class TestPackage:
    """Tests for package metadata and re-exports."""

    def test_version_info(self) -> None:
        assert len(strata.__version_info__) == 3
        assert strata.__version__ == ".".join(str(x) for x in strata.__version_info__)

    def test_exports(self) -> None:
        for name in strata.__all__:
            assert hasattr(strata, name), name

    def test_quickstart(self) -> None:
        """The two headline scenarios work through the top-level API."""
        assert strata.Serialized.defaults({"numbers": [1, 2, 3]}).data() == {
            "default": {"numbers": [1, 2, 3]}
        }
        assert strata.Serialized.global_("a.b", 42).data() == {
            "global": {"a": {"b": 42}}
        }
