"""Test-framework integrations for json-shape.

The pytest plugin lives in ``_pytest_plugin`` and is loaded by pytest itself
through the ``pytest11`` entry point, so nothing is imported here.
"""
