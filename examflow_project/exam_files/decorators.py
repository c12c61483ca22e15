from functools import wraps

from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect


def role_required(*roles):
    """
    Anonymous users go to the login page (login_required);
    users with any other role are sent back to their dashboard.
    """
    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def _wrapped(request, *args, **kwargs):
            if request.user.role not in roles:
                return redirect("accounts:dashboard")
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator
