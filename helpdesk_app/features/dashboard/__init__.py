"""Daily dashboard feature module."""

from helpdesk_app.features.dashboard.context import DashboardContext, build_dashboard_context

__all__ = ["DashboardContext", "build_dashboard_context"]
