"""Client library for the TeamCity REST API: projects, build configurations, parameters, dependencies, agent pools and groups."""

__version__ = "0.1.0"