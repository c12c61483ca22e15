from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from django.shortcuts import redirect


def root_redirect(request):
    if request.user.is_authenticated:
        return redirect("accounts:dashboard")
    return redirect("accounts:login")


urlpatterns = [
    # ROOT
    path("", root_redirect, name="root"),

    # DJANGO ADMIN (STAFF ONLY)
    path("django-admin/", admin.site.urls),

    # AUTH + ROLE DASHBOARD
    path("auth/", include("accounts.urls")),

    # WORKFLOW
    path("files/", include("exam_files.urls")),
    path("notifications/", include("notifications.urls")),
]

if settings.DEBUG:
    urlpatterns += static(
        settings.MEDIA_URL,
        document_root=settings.MEDIA_ROOT
    )
