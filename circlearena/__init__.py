"""A top-down arena survival game built on pygame: menus, a chasing horde and auto-firing shots."""

__version__ = "0.1.0"