"""Tests for the search → filter → sort view pipeline."""

from __future__ import annotations

import locale
import unicodedata
import unittest
from unittest import mock

from paperviewer.navigation import NavigationState
from paperviewer.tree_model import FileNode, FolderNode, build_tree
from paperviewer.view import (
    DEFAULT_FILTER,
    FilterState,
    Session,
    apply_filters,
    compute_view,
    search_entries,
    sort_entries,
)

TREE = build_tree(["2023/w/paper1_qp.pdf", "2023/w/paper1_ms.pdf", "2022/s/paper2_qp.pdf"])

MIXED = build_tree(
    [
        "0580/2019/s/0580_s19_qp.pdf",
        "0580/2020/w/0580_w20_ms.pdf",
        "0580/2021/m/0580_m21_qp.pdf",
        "0580/2021/w/0580_w21_qp.pdf",
        "0580/Beta/readme.pdf",
        "0580/alpha.pdf",
        "0580/Zeta.pdf",
        "0580/extra/2022/s/x.pdf",
    ]
)


def _names(nodes) -> list[str]:
    return [node.name for node in nodes]


class ExampleScenarioTests(unittest.TestCase):
    def test_winter_filter_keeps_both_winter_files(self) -> None:
        children = NavigationState(["2023", "w"]).resolve(TREE)
        state = FilterState(Session.WINTER, 2023, 2023)

        self.assertEqual(_names(compute_view(children, "", state)), ["paper1_ms.pdf", "paper1_qp.pdf"])

    def test_summer_filter_hides_winter_files(self) -> None:
        children = NavigationState(["2023", "w"]).resolve(TREE)
        state = FilterState(Session.SUMMER, 2023, 2023)

        self.assertEqual(compute_view(children, "", state), [])


class SearchTests(unittest.TestCase):
    def test_blank_query_keeps_everything(self) -> None:
        nodes = list(TREE.values())
        self.assertEqual(len(search_entries(nodes, "   ")), 2)

    def test_matches_name_or_path_case_insensitively(self) -> None:
        children = NavigationState(["2023", "w"]).resolve(TREE)
        self.assertEqual(_names(search_entries(children.values(), "QP")), ["paper1_qp.pdf"])
        self.assertEqual(len(search_entries(children.values(), "2023/W")), 2)

    def test_search_applies_to_folders(self) -> None:
        self.assertEqual(_names(compute_view(TREE, "202", DEFAULT_FILTER)), ["2022", "2023"])
        self.assertEqual(_names(compute_view(TREE, "2022")), ["2022"])


class FilterTests(unittest.TestCase):
    def test_default_filter_is_a_no_op(self) -> None:
        nodes = list(MIXED["0580"].children.values())
        self.assertEqual(apply_filters(nodes, DEFAULT_FILTER), nodes)

    def test_default_filter_keeps_files_without_year(self) -> None:
        files = [node for node in compute_view(MIXED["0580"].children) if not node.is_folder]
        self.assertEqual(_names(files), ["alpha.pdf", "Zeta.pdf"])

    def test_active_filter_drops_files_without_year_but_keeps_folders(self) -> None:
        state = DEFAULT_FILTER.with_years(2016, 2024)
        view = compute_view(MIXED["0580"].children, "", state)
        self.assertTrue(all(node.is_folder for node in view))
        self.assertEqual(len(view), 5)

    def test_narrowing_years_never_grows_results(self) -> None:
        files = [
            FileNode("a.pdf", "0580/2019/s/a.pdf"),
            FileNode("b.pdf", "0580/2020/w/b.pdf"),
            FileNode("c.pdf", "0580/2021/w/c.pdf"),
            FileNode("d.pdf", "0580/2024/m/d.pdf"),
        ]
        counts = []
        for year_min, year_max in [(2016, 2025), (2019, 2024), (2020, 2021), (2021, 2021), (2022, 2021)]:
            counts.append(len(apply_filters(files, FilterState(Session.ALL, year_min, year_max))))
        self.assertEqual(counts, sorted(counts, reverse=True))
        self.assertEqual(counts[-1], 0)

    def test_session_and_year_combine(self) -> None:
        files = [
            FileNode("0580_w20_ms.pdf", "0580/2020/w/0580_w20_ms.pdf"),
            FileNode("0580_w21_qp.pdf", "0580/2021/w/0580_w21_qp.pdf"),
            FileNode("0580_m21_qp.pdf", "0580/2021/m/0580_m21_qp.pdf"),
        ]
        state = FilterState(Session.WINTER, 2021, 2025)
        self.assertEqual(_names(apply_filters(files, state)), ["0580_w21_qp.pdf"])


class SortTests(unittest.TestCase):
    def test_folders_first_then_names_ascending(self) -> None:
        nodes = [
            FileNode("b.pdf", "b.pdf"),
            FolderNode("zeta", "zeta"),
            FileNode("A.pdf", "A.pdf"),
            FolderNode("Alpha", "Alpha"),
            FileNode("c.pdf", "c.pdf"),
        ]
        self.assertEqual(_names(sort_entries(nodes)), ["Alpha", "zeta", "A.pdf", "b.pdf", "c.pdf"])

    def test_view_is_deterministic(self) -> None:
        children = MIXED["0580"].children
        first = compute_view(children, "0", FilterState(Session.SUMMER, 2016, 2025))
        second = compute_view(dict(reversed(list(children.items()))), "0", FilterState(Session.SUMMER, 2016, 2025))
        self.assertEqual(_names(first), _names(second))

    def test_accepts_node_iterables(self) -> None:
        self.assertEqual(_names(compute_view(list(TREE.values()))), ["2022", "2023"])


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


class CollationTests(unittest.TestCase):
    NAMES = ["zed.pdf", "\u00e9clair.pdf", "Eagle.pdf", "a1.pdf"]

    def test_order_follows_locale_transform(self) -> None:
        nodes = [FileNode(name, name) for name in self.NAMES]
        with mock.patch("paperviewer.view.engine.locale.strxfrm", side_effect=_strip_accents):
            ordered = _names(sort_entries(nodes))
        self.assertEqual(ordered, ["a1.pdf", "Eagle.pdf", "\u00e9clair.pdf", "zed.pdf"])

    def test_accented_name_sorts_before_z_in_english_locale(self) -> None:
        saved = locale.setlocale(locale.LC_COLLATE)
        try:
            locale.setlocale(locale.LC_COLLATE, "en_US.UTF-8")
        except locale.Error:
            self.skipTest("en_US.UTF-8 locale is not installed")
        self.addCleanup(locale.setlocale, locale.LC_COLLATE, saved)

        ordered = _names(sort_entries(FileNode(name, name) for name in self.NAMES))
        self.assertLess(ordered.index("\u00e9clair.pdf"), ordered.index("zed.pdf"))


if __name__ == "__main__":
    unittest.main()
