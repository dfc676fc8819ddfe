"""
ToolsetKit - Visual Studio toolset discovery.

Finds installed Visual Studio instances and the MSVC toolsets they provide,
ordered preferred-first, for use by build drivers.
"""

__version__ = "0.1.0"
