"""Tests for the browsing session: navigation actions, filters and store hooks."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from paperviewer.browser import PaperBrowser
from paperviewer.store import PaperStore
from paperviewer.tree_model import FileNode
from paperviewer.view import DEFAULT_FILTER, Session

MANIFEST = '\ufeff"2023/w/paper1_qp.pdf"\r\n"2023/w/paper1_ms.pdf"\r\n"2022/s/paper2_qp.pdf"\r\n,,\r\n'


class PaperBrowserTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.store = PaperStore(Path(self._tmp.name) / "store.json", clock=lambda: 7)
        self.browser = PaperBrowser.from_manifest_text(MANIFEST, self.store, base_url="https://cdn.example")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _names(self) -> list[str]:
        return [node.name for node in self.browser.visible_entries()]

    def test_load_reports_integrity_and_malformed_lines(self) -> None:
        self.assertIsNotNone(self.browser.integrity)
        self.assertTrue(self.browser.integrity.ok)
        self.assertEqual(self.browser.manifest.malformed_lines, 1)
        self.assertEqual(self._names(), ["2022", "2023"])

    def test_browser_always_carries_manifest_and_integrity(self) -> None:
        with self.assertRaises(TypeError):
            PaperBrowser(self.browser.tree, self.store)
        self.assertEqual(self.browser.integrity.files_in_tree, 3)

    def test_open_folder_clears_search(self) -> None:
        self.browser.set_search("2023")
        self.assertTrue(self.browser.open_folder("2023"))
        self.assertEqual(self.browser.search_query, "")
        self.assertEqual(self._names(), ["w"])
        self.assertFalse(self.browser.open_folder("missing"))
        self.assertEqual(self.browser.address, "2023")

    def test_navigate_to_breadcrumb(self) -> None:
        self.browser.restore_address("2023/w")
        self.browser.navigate_to(1)
        self.assertEqual(self.browser.address, "2023")

    def test_go_home_resets_navigation_search_and_filters(self) -> None:
        self.browser.restore_address("2023/w")
        self.browser.set_search("qp")
        self.browser.set_session(Session.WINTER)
        self.browser.set_year_range(2023, 2023)

        self.browser.go_home()

        self.assertEqual(self.browser.address, "")
        self.assertEqual(self.browser.search_query, "")
        self.assertEqual(self.browser.filter_state, DEFAULT_FILTER)

    def test_filters_apply_to_current_folder(self) -> None:
        self.browser.restore_address("2023/w")
        self.browser.set_session(Session.WINTER)
        self.browser.set_year_range(2023, 2023)
        self.assertEqual(self._names(), ["paper1_ms.pdf", "paper1_qp.pdf"])

        self.browser.set_session(Session.SUMMER)
        self.assertEqual(self._names(), [])

        self.browser.reset_filters()
        self.assertEqual(len(self._names()), 2)

    def test_unknown_address_shows_empty_folder(self) -> None:
        self.browser.restore_address("2023/w/paper1_qp.pdf")
        self.assertEqual(self._names(), [])

    def test_open_file_records_recent_and_returns_url(self) -> None:
        node = self.browser.find("2023/w/paper1_qp.pdf")
        self.assertIsInstance(node, FileNode)

        url = self.browser.open_file(node)

        self.assertEqual(url, "https://cdn.example/2023/w/paper1_qp.pdf")
        self.assertEqual([entry.path for entry in self.store.recent], ["2023/w/paper1_qp.pdf"])

    def test_download_url_does_not_touch_recent(self) -> None:
        node = self.browser.find("2022/s/paper2_qp.pdf")
        self.assertEqual(self.browser.download_url(node), "https://cdn.example/2022/s/paper2_qp.pdf")
        self.assertEqual(self.store.recent, [])

    def test_toggle_favorite_round_trip(self) -> None:
        node = self.browser.find("2023/w")
        self.assertTrue(self.browser.toggle_favorite(node))
        self.assertTrue(self.browser.is_favorite(node))
        self.assertFalse(self.browser.toggle_favorite(node))
        self.assertFalse(self.browser.is_favorite(node))


if __name__ == "__main__":
    unittest.main()
