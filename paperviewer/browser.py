"""Browsing session: tree, navigation, search/filter state and user actions.

``PaperBrowser`` is the one object a front end drives. The tree is built once
when the session is created and never changes afterwards; every view is
recomputed from the current state on demand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import DEFAULT_BASE_URL
from .links import file_url
from .manifest import ParsedManifest, load_manifest, parse_manifest
from .navigation import NavigationState
from .store import PaperStore
from .tree_model import (
    FileNode,
    IntegrityReport,
    Node,
    Tree,
    build_tree,
    check_tree_integrity,
    node_at,
)
from .view import DEFAULT_FILTER, FilterState, Session, compute_view

logger = logging.getLogger(__name__)


@dataclass
class BrowserState:
    navigation: NavigationState = field(default_factory=NavigationState)
    search_query: str = ""
    filter_state: FilterState = DEFAULT_FILTER


class PaperBrowser:
    """Navigable view over one manifest plus the persisted favorites store."""

    def __init__(
        self,
        tree: Tree,
        store: PaperStore,
        *,
        manifest: ParsedManifest,
        integrity: IntegrityReport,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.tree = tree
        self.store = store
        self.base_url = base_url
        self.manifest = manifest
        self.integrity = integrity
        self.state = BrowserState()

    @classmethod
    def from_manifest(
        cls,
        manifest: ParsedManifest,
        store: PaperStore,
        *,
        base_url: str = DEFAULT_BASE_URL,
    ) -> PaperBrowser:
        """Build the tree and integrity report for ``manifest``."""
        tree = build_tree(manifest.paths)
        integrity = check_tree_integrity(tree, manifest.paths)
        return cls(tree, store, manifest=manifest, integrity=integrity, base_url=base_url)

    @classmethod
    def from_manifest_text(cls, text: str, store: PaperStore, *, base_url: str = DEFAULT_BASE_URL) -> PaperBrowser:
        return cls.from_manifest(parse_manifest(text), store, base_url=base_url)

    @classmethod
    def from_manifest_file(cls, path: Path, store: PaperStore, *, base_url: str = DEFAULT_BASE_URL) -> PaperBrowser:
        logger.info("Loading manifest %s", path)
        return cls.from_manifest(load_manifest(path), store, base_url=base_url)

    @property
    def navigation(self) -> NavigationState:
        return self.state.navigation

    @property
    def filter_state(self) -> FilterState:
        return self.state.filter_state

    @property
    def search_query(self) -> str:
        return self.state.search_query

    @property
    def address(self) -> str:
        return self.navigation.to_address()

    def current_folder(self) -> Tree:
        return self.navigation.resolve(self.tree)

    def visible_entries(self) -> list[Node]:
        """Ordered entries of the current folder under search and filters."""
        return compute_view(self.current_folder(), self.state.search_query, self.state.filter_state)

    def restore_address(self, address: str) -> None:
        """Jump to a shareable address; unknown folders show as empty."""
        self.state.navigation = NavigationState.from_address(address)
        self.state.search_query = ""

    def open_folder(self, name: str) -> bool:
        """Enter child folder ``name`` and clear the search on success."""
        moved = self.navigation.descend(name, self.tree)
        if moved:
            self.state.search_query = ""
        return moved

    def navigate_to(self, depth: int) -> None:
        """Jump to the breadcrumb at ``depth`` and clear the search."""
        self.navigation.ascend(depth)
        self.state.search_query = ""

    def go_home(self) -> None:
        """Return to the root with search and filters reset."""
        self.navigation.reset()
        self.state.search_query = ""
        self.state.filter_state = DEFAULT_FILTER

    def set_search(self, query: str) -> None:
        self.state.search_query = query

    def set_session(self, session: Session) -> None:
        self.state.filter_state = self.state.filter_state.with_session(session)

    def set_year_range(self, year_min: int | None = None, year_max: int | None = None) -> None:
        self.state.filter_state = self.state.filter_state.with_years(year_min, year_max)

    def reset_filters(self) -> None:
        self.state.filter_state = DEFAULT_FILTER

    def find(self, path: str) -> Node | None:
        return node_at(self.tree, path)

    def url_for(self, path: str) -> str:
        return file_url(path, self.base_url)

    def open_file(self, node: FileNode) -> str:
        """Record ``node`` as recently opened and return its action URL."""
        self.store.record_recent(node.path, node.name)
        return self.url_for(node.path)

    def download_url(self, node: FileNode) -> str:
        """Return the action URL for downloading ``node`` (not tracked as recent)."""
        return self.url_for(node.path)

    def toggle_favorite(self, node: Node) -> bool:
        return self.store.toggle_favorite(node.path, node.name)

    def is_favorite(self, node: Node) -> bool:
        return self.store.is_favorite(node.path)
