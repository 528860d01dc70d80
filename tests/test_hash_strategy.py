import os
import sys
import unittest
from unittest.mock import MagicMock, patch

# Mock browser-specific modules
if 'js' not in sys.modules:
    sys.modules['js'] = MagicMock()
if 'pyodide' not in sys.modules:
    sys.modules['pyodide'] = MagicMock()
if 'pyodide.ffi' not in sys.modules:
    sys.modules['pyodide.ffi'] = MagicMock()

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeHost

from pagepilot.routing.hash_strategy import (
    FragmentNavigationStrategy,
    HASH_NAVIGATION_ROUTES,
    HASH_ROUTES,
    HASH_ROUTES_ARRAY,
)


class TestFragmentNavigationStrategy(unittest.TestCase):
    def setUp(self):
        self.host = FakeHost()
        self.strategy = FragmentNavigationStrategy(self.host)

    def test_current_path_strips_marker(self):
        self.host.hash = "#about-me"
        self.assertEqual(self.strategy.get_current_path(), "about-me")
        self.host.hash = ""
        self.assertEqual(self.strategy.get_current_path(), "")
        self.host.hash = "#/projects"
        self.assertEqual(self.strategy.get_current_path(), "/projects")

    def test_root_paths(self):
        for path in ("", "#", "/"):
            self.assertTrue(self.strategy.is_root_path(path), path)
        self.assertFalse(self.strategy.is_root_path("home"))

    def test_navigate_appends_history_entry(self):
        self.strategy.navigate_to_path("home")
        self.assertEqual(self.host.hash, "#home")
        self.assertEqual(len(self.host.entries), 2)

    def test_navigate_with_replace_keeps_history_length(self):
        self.strategy.navigate_to_path("home", replace=True)
        self.assertEqual(self.host.hash, "#home")
        self.assertEqual(len(self.host.entries), 1)

    def test_fragment_change_and_load_trigger_navigation(self):
        on_navigate = MagicMock()
        self.strategy.start_listening(on_navigate)
        self.assertTrue(self.strategy.is_listening)

        self.strategy.navigate_to_path("home")
        on_navigate.assert_not_called()
        self.host.flush()
        on_navigate.assert_called_once()

        self.host.fire("window", "load")
        self.assertEqual(on_navigate.call_count, 2)

    def test_stop_listening_detaches_handlers(self):
        on_navigate = MagicMock()
        self.strategy.start_listening(on_navigate)
        self.strategy.stop_listening()
        self.assertFalse(self.strategy.is_listening)
        self.host.fire("window", "hashchange")
        self.host.fire("window", "load")
        on_navigate.assert_not_called()

    def test_back_and_forward_use_session_history(self):
        self.strategy.navigate_to_path("home")
        self.strategy.navigate_to_path("about-me")
        self.strategy.back()
        self.assertEqual(self.strategy.get_current_path(), "home")
        self.strategy.forward()
        self.assertEqual(self.strategy.get_current_path(), "about-me")

    def test_href_and_location_details(self):
        self.host.hash = "#projects"
        self.assertEqual(self.strategy.href("projects"), "#projects")
        self.assertEqual(self.strategy.location_details(), {"fragment": "#projects"})

    def test_route_tables(self):
        self.assertEqual(HASH_ROUTES.HOME.path, "home")
        self.assertEqual(HASH_ROUTES.ABOUT.href, "#about-me")
        self.assertNotIn(HASH_ROUTES.NOT_FOUND, HASH_NAVIGATION_ROUTES)
        self.assertIn(HASH_ROUTES.NOT_FOUND, HASH_ROUTES_ARRAY)
        for route in HASH_ROUTES_ARRAY:
            self.assertEqual(route.href, self.strategy.href(route.path))


if __name__ == '__main__':
    unittest.main()
