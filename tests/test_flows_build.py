"""
Tests for the gallery build flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

from inat_gallery.datasources.inaturalist.models import GalleryResult, NotFound
from inat_gallery.flows import build

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


class TestSlugify:
    """File names for gallery pages."""

    def test_standard_name(self) -> None:
        assert build.slugify("Amanita muscaria") == "amanita-muscaria"

    def test_provisional_name(self) -> None:
        assert build.slugify("Psathyrella 'alluvinana PNW10'") == "psathyrella-alluvinana-pnw10"

    def test_nothing_usable(self) -> None:
        assert build.slugify("'''") == "gallery"


class TestUniqueSlug:
    """Slugs that must not collide within one build."""

    def test_first_use(self) -> None:
        used: set[str] = set()
        assert build.unique_slug("Psathyrella x", used) == "psathyrella-x"
        assert used == {"psathyrella-x"}

    def test_collisions_get_suffixes(self) -> None:
        used: set[str] = set()
        slugs = [build.unique_slug(n, used) for n in ["Psathyrella 'x'", "Psathyrella x", "psathyrella_x"]]
        assert slugs == ["psathyrella-x", "psathyrella-x-2", "psathyrella-x-3"]

    def test_reserved_slug(self) -> None:
        assert build.unique_slug("Index", {"index"}) == "index-2"


class TestNewGalleryId:
    """Per-render DOM namespaces."""

    def test_unique(self) -> None:
        assert build.new_gallery_id() != build.new_gallery_id()

    def test_prefixed(self) -> None:
        assert build.new_gallery_id().startswith("inat-gallery-")


class TestRenderGalleryPage:
    """Page rendering task."""

    def test_gallery(self, gallery_result: GalleryResult) -> None:
        html = build.render_gallery_page.fn("Amanita muscaria", gallery_result, "inat-gallery-x", 24)
        assert "<title>Amanita muscaria</title>" in html
        assert 'id="inat-gallery-x"' in html

    def test_not_found(self) -> None:
        html = build.render_gallery_page.fn(
            "Amanita muscaria", NotFound("Amanita muscaria"), "inat-gallery-x", 24
        )
        assert "No observations found" in html


class TestWritePage:
    """Page writing task."""

    def test_creates_dir(self, tmp_path: Path) -> None:
        site = tmp_path / "site"
        path = build.write_page.fn(site, "a.html", "<p>hi</p>")
        assert path == site / "a.html"
        assert path.read_text(encoding="utf-8") == "<p>hi</p>"


class TestBuildGalleries:
    """The whole flow, with resolution mocked."""

    def test_builds_pages_and_index(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        gallery_result: GalleryResult,
    ) -> None:
        fetch = Mock(side_effect=[gallery_result, NotFound("Psathyrella 'alluvinana PNW10'")])
        monkeypatch.setattr(build, "fetch_gallery", fetch)

        result = build.build_galleries(
            ["Amanita_muscaria", "Psathyrella 'alluvinana PNW10'", "  "], site_dir=tmp_path
        )

        assert result == {"pages": 2, "found": 1, "output": str(tmp_path / "index.html")}
        assert [c.args[0] for c in fetch.call_args_list] == [
            "Amanita muscaria",
            "Psathyrella 'alluvinana PNW10'",
        ]
        assert (tmp_path / "amanita-muscaria.html").exists()
        assert "No observations found" in (
            tmp_path / "psathyrella-alluvinana-pnw10.html"
        ).read_text(encoding="utf-8")

        index = (tmp_path / "index.html").read_text(encoding="utf-8")
        assert 'href="amanita-muscaria.html"' in index
        assert "(no observations)" in index

    def test_colliding_names_get_separate_pages(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        gallery_result: GalleryResult,
    ) -> None:
        fetch = Mock(side_effect=[NotFound("Psathyrella 'x'"), gallery_result])
        monkeypatch.setattr(build, "fetch_gallery", fetch)

        result = build.build_galleries(["Psathyrella 'x'", "Psathyrella x"], site_dir=tmp_path)

        assert result["pages"] == 2
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "index.html",
            "psathyrella-x-2.html",
            "psathyrella-x.html",
        ]
        assert "No observations found" in (tmp_path / "psathyrella-x.html").read_text(encoding="utf-8")
        assert "No observations found" not in (tmp_path / "psathyrella-x-2.html").read_text(
            encoding="utf-8"
        )
        index = (tmp_path / "index.html").read_text(encoding="utf-8")
        assert 'href="psathyrella-x.html"' in index
        assert 'href="psathyrella-x-2.html"' in index

    def test_name_slugged_index_keeps_the_index(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(build, "fetch_gallery", Mock(return_value=NotFound("Index")))

        build.build_galleries(["Index"], site_dir=tmp_path)

        assert (tmp_path / "index-2.html").exists()
        assert 'href="index-2.html"' in (tmp_path / "index.html").read_text(encoding="utf-8")

    def test_empty_list(self, tmp_path: Path) -> None:
        with patch.object(build, "fetch_gallery") as fetch:
            result = build.build_galleries([], site_dir=tmp_path)
        fetch.assert_not_called()
        assert result["pages"] == 0
        assert "No galleries built." in (tmp_path / "index.html").read_text(encoding="utf-8")
