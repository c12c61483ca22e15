from .auth_views import login_view, logout_view
from .dashboard_views import dashboard, role_home_url

__all__ = [
    "login_view",
    "logout_view",
    "dashboard",
    "role_home_url",
]
