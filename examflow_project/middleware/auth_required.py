from django.conf import settings
from django.shortcuts import redirect
from django.urls import resolve, Resolver404


class LoginRequiredMiddleware:
    """
    - Anonymous users may only reach the public prefixes
    - Role areas are fenced by URL prefix
    - Unknown URLs fall back to the role dashboard
    """

    ROLE_PREFIXES = {
        "/files/exam-unit/": "exam_unit",
        "/files/hos/": "hos",
    }

    def __init__(self, get_response):
        self.get_response = get_response

        self.PUBLIC_PREFIXES = (
            settings.LOGIN_URL,
            "/auth/",
            "/static/",
            "/django-admin/",  # Django admin (staff only, own login)
        )

    def __call__(self, request):
        path = request.path

        # Allow public paths
        if path.startswith(self.PUBLIC_PREFIXES):
            return self.get_response(request)

        # Block unauthenticated users
        if not request.user.is_authenticated:
            return redirect(settings.LOGIN_URL)

        # ROLE-BASED ACCESS CONTROL
        role = request.user.role

        for prefix, required_role in self.ROLE_PREFIXES.items():
            if path.startswith(prefix) and role != required_role:
                return redirect("accounts:dashboard")

        # Media is served only in DEBUG; otherwise validate the URL exists
        if path.startswith(settings.MEDIA_URL):
            return self.get_response(request)

        try:
            resolve(path)
        except Resolver404:
            return redirect("accounts:dashboard")

        return self.get_response(request)
