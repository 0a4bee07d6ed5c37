from __future__ import annotations

import unittest

from menumanager.menus import (
    InvalidConfigurationError,
    MenuNode,
    create_menu,
    get_menu_type,
    register_menu_type,
    unregister_menu_type,
)


class AdminMenu(MenuNode):
    def default_items(self):
        return [
            {"key": "users", "label": "Users", "url": "/admin/users"},
            {"key": "settings", "label": "Settings", "url": "/admin/settings"},
        ]


class MenuFactoryTestCase(unittest.TestCase):
    def setUp(self):
        register_menu_type("admin", AdminMenu)

    def tearDown(self):
        unregister_menu_type("admin")

    def test_plain_descriptor_builds_menu_node(self):
        menu = create_menu({"label": "Tools", "items": [{"key": "a"}, {"key": "b"}]})
        self.assertIs(type(menu), MenuNode)
        self.assertEqual(menu.label, "Tools")
        self.assertEqual([c.key for c in menu.get_children()], ["a", "b"])

    def test_registered_type_adds_default_items_first(self):
        menu = create_menu({"type": "admin", "items": [{"key": "audit"}]})
        self.assertIsInstance(menu, AdminMenu)
        self.assertEqual([c.key for c in menu.get_children()], ["users", "settings", "audit"])

    def test_type_name_alone_is_a_descriptor(self):
        menu = create_menu("Admin")
        self.assertIsInstance(menu, AdminMenu)
        self.assertEqual(len(menu.children), 2)

    def test_add_and_merge_sources_are_applied_after_items(self):
        menu = create_menu(
            {
                "type": "admin",
                "add": [{"menu": {"items": [{"key": "logs"}]}, "where": {"after": "users"}}],
                "merge": [{"menu": {"items": [{"key": "users", "label": "ignored"}, {"key": "help"}]}}],
            }
        )
        self.assertEqual([c.key for c in menu.get_children()], ["users", "logs", "settings", "help"])
        self.assertEqual(menu.children["users"].label, "Users")

    def test_add_to_and_where_are_carried_on_the_node(self):
        menu = create_menu({"addTo": "sidebar", "where": {"after": "header"}, "items": [{"key": "x"}]})
        self.assertEqual(menu.add_to, "sidebar")
        self.assertEqual(menu.where, {"after": "header"})

    def test_unknown_type_is_a_configuration_error(self):
        with self.assertRaises(InvalidConfigurationError):
            create_menu({"type": "missing"})
        with self.assertRaises(InvalidConfigurationError):
            get_menu_type("missing")

    def test_non_mapping_descriptor_is_a_configuration_error(self):
        with self.assertRaises(InvalidConfigurationError):
            create_menu(42)

    def test_register_rejects_non_node_types(self):
        with self.assertRaises(TypeError):
            register_menu_type("broken", dict)
        with self.assertRaises(ValueError):
            register_menu_type("  ", AdminMenu)

    def test_existing_node_passes_through(self):
        node = MenuNode(key="ready")
        self.assertIs(create_menu(node), node)


if __name__ == "__main__":
    unittest.main()
