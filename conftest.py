"""Pytest-Plugins für das gesamte Projekt."""

pytest_plugins = ["cssmenu.tests.factories"]
