"""Tests for reconciling the in-memory portfolio against a fresh scan.

Verifies identity continuity by backing path, deletion propagation, defaults
for new entries, dense re-ranking, and preservation of unexported edits.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from sitebuilder.content_model import (
    AppState,
    Image,
    Meta,
    Project,
    reconcile_images,
    reconcile_projects,
    refresh_project,
    update_from_source,
)


def _make_project_dir(portfolio: Path, name: str, images: tuple[str, ...] = ()) -> Path:
    path = portfolio / name
    (path / "img").mkdir(parents=True)
    for image in images:
        (path / "img" / image).write_bytes(b"\x89PNG")
    return path


class ReconcileProjectsTests(unittest.TestCase):
    def test_matched_entry_keeps_in_memory_fields_and_new_entry_gets_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            a = _make_project_dir(portfolio, "a")
            b = _make_project_dir(portfolio, "b")
            previous = [Project(path=a, id=7, meta=Meta(title="A"), description="about a")]

            reconciled = reconcile_projects(previous, portfolio)

            self.assertEqual([project.path for project in reconciled], [a, b])
            self.assertEqual([project.id for project in reconciled], [0, 1])
            self.assertEqual(reconciled[0].meta.title, "A")
            self.assertEqual(reconciled[0].description, "about a")
            self.assertEqual(reconciled[1].meta, Meta())
            self.assertEqual(reconciled[1].description, "")

    def test_previous_collection_is_not_mutated(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            _make_project_dir(portfolio, "0-first")
            a = _make_project_dir(portfolio, "a")
            original = Project(path=a, id=0, meta=Meta(title="A", teammates=["kim"]))

            reconciled = reconcile_projects([original], portfolio)
            reconciled[1].meta.teammates.append("lee")

            self.assertEqual(original.id, 0)
            self.assertEqual(original.meta.teammates, ["kim"])
            self.assertIsNot(reconciled[1], original)

    def test_vanished_directory_is_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            a = _make_project_dir(portfolio, "a")
            c = _make_project_dir(portfolio, "c")
            gone = portfolio / "b"
            previous = [
                Project(path=a, id=0),
                Project(path=gone, id=1, meta=Meta(title="B")),
                Project(path=c, id=2, meta=Meta(title="C")),
            ]

            reconciled = reconcile_projects(previous, portfolio)

            self.assertNotIn(gone, [project.path for project in reconciled])
            self.assertEqual([project.id for project in reconciled], [0, 1])
            self.assertEqual(reconciled[1].meta.title, "C")

    def test_ids_are_dense_and_follow_scan_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            names = ["delta", "alpha", "charlie", "bravo"]
            for name in names:
                _make_project_dir(portfolio, name)
            previous = [Project(path=portfolio / "charlie", id=40), Project(path=portfolio / "alpha", id=3)]

            reconciled = reconcile_projects(previous, portfolio)

            self.assertEqual([project.id for project in reconciled], list(range(len(names))))
            self.assertEqual([project.path.name for project in reconciled], sorted(names))

    def test_files_under_portfolio_are_not_projects(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            a = _make_project_dir(portfolio, "a")
            (portfolio / "notes.txt").write_text("stray\n", encoding="utf-8")

            reconciled = reconcile_projects([], portfolio)

            self.assertEqual([project.path for project in reconciled], [a])

    def test_matching_does_not_depend_on_previous_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            paths = [_make_project_dir(portfolio, name) for name in ("a", "b", "c")]
            previous = [
                Project(path=paths[2], meta=Meta(title="C")),
                Project(path=paths[0], meta=Meta(title="A")),
                Project(path=paths[1], meta=Meta(title="B")),
            ]

            reconciled = reconcile_projects(previous, portfolio)

            self.assertEqual([project.meta.title for project in reconciled], ["A", "B", "C"])

    def test_new_project_is_populated_from_its_documents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            path = _make_project_dir(portfolio, "site", images=("2.png", "1.png"))
            (path / "content.md").write_text("# Site\n", encoding="utf-8")
            (path / "meta.toml").write_text('title = "Site"\nsubtitle = "web"\n', encoding="utf-8")

            [project] = reconcile_projects([], portfolio)

            self.assertEqual(project.description, "# Site\n")
            self.assertEqual(project.meta.title, "Site")
            self.assertEqual(project.meta.subtitle, "web")
            self.assertEqual([image.path.name for image in project.images], ["1.png", "2.png"])
            self.assertEqual([image.position for image in project.images], [0, 1])
            self.assertFalse(project.dirty)

    def test_matched_clean_project_rereads_documents_from_disk(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            path = _make_project_dir(portfolio, "a")
            (path / "meta.toml").write_text('title = "On disk"\n', encoding="utf-8")
            (path / "content.md").write_text("disk text", encoding="utf-8")
            previous = [Project(path=path, meta=Meta(title="Stale"), description="stale")]

            [project] = reconcile_projects(previous, portfolio)

            self.assertEqual(project.meta.title, "On disk")
            self.assertEqual(project.description, "disk text")

    def test_dirty_project_keeps_unexported_edits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            path = _make_project_dir(portfolio, "a", images=("x.jpg",))
            (path / "meta.toml").write_text('title = "On disk"\n', encoding="utf-8")
            (path / "content.md").write_text("disk text", encoding="utf-8")
            previous = [Project(path=path, meta=Meta(title="Edited"), description="edited", dirty=True)]

            [project] = reconcile_projects(previous, portfolio)

            self.assertEqual(project.meta.title, "Edited")
            self.assertEqual(project.description, "edited")
            self.assertTrue(project.dirty)
            self.assertEqual([image.path.name for image in project.images], ["x.jpg"])

    def test_unparsable_metadata_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            path = _make_project_dir(portfolio, "a")
            (path / "meta.toml").write_text("title = [unterminated\n", encoding="utf-8")
            previous = [Project(path=path, meta=Meta(title="Old"))]

            [project] = reconcile_projects(previous, portfolio)

            self.assertEqual(project.meta, Meta())

    def test_missing_portfolio_directory_yields_empty_collection(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            portfolio = Path(tmp) / "portfolio"
            previous = [Project(path=portfolio / "a", meta=Meta(title="A"))]

            self.assertEqual(reconcile_projects(previous, portfolio), [])


class ReconcileImagesTests(unittest.TestCase):
    def test_positions_are_reassigned_from_scan_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            img_dir = Path(tmp)
            for name in ("c.png", "a.png", "b.png"):
                (img_dir / name).write_bytes(b"img")
            previous = [Image(path=img_dir / "c.png", position=0), Image(path=img_dir / "gone.png", position=1)]

            images = reconcile_images(previous, img_dir)

            self.assertEqual([image.path.name for image in images], ["a.png", "b.png", "c.png"])
            self.assertEqual([image.position for image in images], [0, 1, 2])

    def test_subdirectories_are_not_images(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            img_dir = Path(tmp)
            (img_dir / "thumbs").mkdir()
            (img_dir / "a.png").write_bytes(b"img")

            images = reconcile_images([], img_dir)

            self.assertEqual([image.path.name for image in images], ["a.png"])

    def test_project_without_img_directory_has_no_images(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "a"
            path.mkdir()
            project = Project(path=path, images=[Image(path=path / "img" / "old.png")])

            refresh_project(project)

            self.assertEqual(project.images, [])


class UpdateFromSourceTests(unittest.TestCase):
    def test_rescan_routes_top_level_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp)
            _make_project_dir(source / "portfolio", "a")
            (source / "about.md").write_text("hello\n", encoding="utf-8")
            (source / "me.jpg").write_bytes(b"jpg")
            (source / "fonts").mkdir()
            (source / "fonts" / "Sans-Bold.ttf").write_bytes(b"ttf")
            (source / "fonts" / "Sans.ttf").write_bytes(b"ttf")
            state = AppState(source=source)

            update_from_source(state)

            self.assertEqual([project.path.name for project in state.website.portfolio], ["a"])
            self.assertEqual(state.website.about, "hello\n")
            self.assertEqual(state.website.image, source / "me.jpg")
            self.assertEqual(state.website.fonts.bold, source / "fonts" / "Sans-Bold.ttf")
            self.assertEqual(state.website.fonts.normal, source / "fonts" / "Sans.ttf")

    def test_rescan_without_source_leaves_state_untouched(self) -> None:
        state = AppState()
        state.website.portfolio.append(Project(path=Path("/nowhere/a")))

        update_from_source(state)

        self.assertEqual(len(state.website.portfolio), 1)

    def test_example_scenario(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp)
            portfolio = source / "portfolio"
            a = _make_project_dir(portfolio, "a")
            b = _make_project_dir(portfolio, "b")
            state = AppState(source=source)
            state.website.portfolio = [Project(path=a, meta=Meta(title="A"))]

            update_from_source(state)

            self.assertEqual(
                [(project.id, project.path, project.meta.title) for project in state.website.portfolio],
                [(0, a, "A"), (1, b, "")],
            )


if __name__ == "__main__":
    unittest.main()
