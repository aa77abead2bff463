"""Client library for the Sentry web API: organizations, teams, projects and related endpoints."""

__version__ = "0.1.0"