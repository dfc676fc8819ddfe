"""Test fixtures for ToolsetKit tests.

This package provides reusable pytest fixtures and layout builders that
create Visual Studio directory structures in a temporary directory:

- visual_studio: VS 2017 / VS 2015 / VS 2013 layouts and vswhere output

Import fixtures in your tests using:
    from tests.fixtures.visual_studio import make_vs2017, vswhere_xml
"""

__all__ = [
    "visual_studio",
]
