import logging

from django.contrib.auth import authenticate, login, logout
from django.shortcuts import render, redirect
from django.contrib import messages
from django.conf import settings

logger = logging.getLogger(__name__)


def login_view(request):
    if request.user.is_authenticated:
        return redirect("accounts:dashboard")

    if request.method == "POST":
        username = request.POST.get("username")
        password = request.POST.get("password")

        user = authenticate(request, username=username, password=password)

        if user:
            login(request, user)
            logger.info("User %s signed in as %s", user.username, user.role)
            return redirect("accounts:dashboard")

        messages.error(request, "Invalid username or password")

    return render(request, "auth/login.html")


def logout_view(request):
    logout(request)
    return redirect(settings.LOGIN_URL)
