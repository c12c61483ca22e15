from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect
from django.urls import reverse

from accounts.models import User


ROLE_HOME = {
    User.Role.LECTURER: "exam_files:my-files",
    User.Role.HOS: "exam_files:hos-review",
    User.Role.EXAM_UNIT: "exam_files:exam-unit-review",
    User.Role.ADMIN: "admin:index",
}


def role_home_url(user):
    """Landing page for a user's role."""
    return reverse(ROLE_HOME.get(user.role, "exam_files:my-files"))


@login_required
def dashboard(request):
    return redirect(role_home_url(request.user))
