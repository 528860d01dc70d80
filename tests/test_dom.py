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

from pagepilot.dom import BrowserHost, ContainerSink


class TestContainerSink(unittest.TestCase):
    def setUp(self):
        self.element = MagicMock()
        self.document = MagicMock()
        self.sink = ContainerSink(self.element, self.document)

    def test_clear_empties_element(self):
        self.element.innerHTML = "<p>old</p>"
        self.sink.clear()
        self.assertEqual(self.element.innerHTML, "")

    def test_append_unwraps_nodes(self):
        class Node:
            element = "real-element"

        self.sink.append(Node())
        self.element.appendChild.assert_called_with("real-element")

    def test_append_text(self):
        self.sink.append("hello")
        self.document.createTextNode.assert_called_once_with("hello")
        self.element.appendChild.assert_called_with(self.document.createTextNode.return_value)


class TestBrowserHost(unittest.TestCase):
    def setUp(self):
        self.window = MagicMock()
        self.document = MagicMock()
        self.host = BrowserHost(self.window, self.document)

    def test_location_accessors(self):
        self.window.location.hash = "#home"
        self.window.location.pathname = "/home"
        self.window.location.search = "?a=1"
        self.assertEqual(self.host.location_hash(), "#home")
        self.assertEqual(self.host.location_path(), "/home")
        self.assertEqual(self.host.location_search(), "?a=1")

    def test_empty_location_values(self):
        self.window.location.hash = ""
        self.window.location.search = None
        self.assertEqual(self.host.location_hash(), "")
        self.assertEqual(self.host.location_search(), "")

    def test_fragment_navigation(self):
        self.host.set_hash("#about")
        self.assertEqual(self.window.location.hash, "#about")
        self.host.replace_location("#home")
        self.window.location.replace.assert_called_once_with("#home")

    def test_history_navigation(self):
        self.host.push_state(None, "/about")
        self.window.history.pushState.assert_called_once_with(None, "", "/about")
        self.host.replace_state(None, "/home")
        self.window.history.replaceState.assert_called_once_with(None, "", "/home")
        self.host.back()
        self.host.forward()
        self.window.history.back.assert_called_once()
        self.window.history.forward.assert_called_once()

    def test_state_is_converted(self):
        with patch('pagepilot.dom.to_js', side_effect=lambda value, **kwargs: ("js", value)):
            self.host.push_state({"id": 1}, "/about")
        self.window.history.pushState.assert_called_once_with(("js", {"id": 1}), "", "/about")

    def test_title_and_container(self):
        self.host.set_title("Home")
        self.assertEqual(self.document.title, "Home")

        container = self.host.find_container("app")
        self.document.getElementById.assert_called_with("app")
        self.assertIsInstance(container, ContainerSink)
        self.assertIs(container.element, self.document.getElementById.return_value)

        self.document.getElementById.return_value = None
        self.assertIsNone(self.host.find_container("missing"))

    def test_listen_and_unsubscribe(self):
        handler = MagicMock()
        proxy = MagicMock()
        with patch('pagepilot.dom.create_proxy', return_value=proxy) as create_proxy:
            unsubscribe = self.host.listen("document", "click", handler)
            create_proxy.assert_called_once_with(handler)

        self.document.addEventListener.assert_called_once_with("click", proxy)
        self.window.addEventListener.assert_not_called()

        unsubscribe()
        self.document.removeEventListener.assert_called_once_with("click", proxy)
        proxy.destroy.assert_called_once()

    def test_dispatch_route_change(self):
        detail = {"from": "", "to": "/home", "params": {}}
        with patch('pagepilot.dom.to_js', side_effect=lambda value, **kwargs: value), \
                patch('pagepilot.dom.CustomEvent') as custom_event:
            self.host.dispatch_route_change(detail)
            custom_event.new.assert_called_once_with("routechange", {"detail": detail})
            self.window.dispatchEvent.assert_called_once_with(custom_event.new.return_value)


if __name__ == '__main__':
    unittest.main()
