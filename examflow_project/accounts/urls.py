from django.urls import path

from .views.auth_views import login_view, logout_view
from .views.dashboard_views import dashboard

app_name = "accounts"

urlpatterns = [
    path("login/", login_view, name="login"),
    path("logout/", logout_view, name="logout"),
    path("dashboard/", dashboard, name="dashboard"),
]
