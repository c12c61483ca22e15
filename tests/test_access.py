"""Login, role dashboards and URL fencing."""

from django.urls import reverse

from accounts.models import User

from factories import PASSWORD, BaseTestCase, make_user


class DashboardTest(BaseTestCase):

    def test_each_role_lands_on_its_page(self):
        expected = {
            User.Role.LECTURER: reverse("exam_files:my-files"),
            User.Role.HOS: reverse("exam_files:hos-review"),
            User.Role.EXAM_UNIT: reverse("exam_files:exam-unit-review"),
            User.Role.ADMIN: reverse("admin:index"),
        }

        for role, url in expected.items():
            self.client.force_login(make_user(f"user-{role}", role=role))
            response = self.client.get(reverse("accounts:dashboard"))
            self.assertRedirects(response, url, fetch_redirect_response=False)

    def test_root(self):
        response = self.client.get("/")
        self.assertRedirects(response, reverse("accounts:login"), fetch_redirect_response=False)

        self.client.force_login(make_user("lecturer1"))
        response = self.client.get("/")
        self.assertRedirects(response, reverse("accounts:dashboard"), fetch_redirect_response=False)


class LoginTest(BaseTestCase):

    def test_login_redirects_to_dashboard(self):
        make_user("lecturer1")

        response = self.client.post(
            reverse("accounts:login"),
            {"username": "lecturer1", "password": PASSWORD},
        )

        self.assertRedirects(response, reverse("accounts:dashboard"), fetch_redirect_response=False)

    def test_bad_credentials(self):
        make_user("lecturer1")

        response = self.client.post(
            reverse("accounts:login"),
            {"username": "lecturer1", "password": "wrong"},
        )

        self.assertContains(response, "Invalid username or password")

    def test_logout(self):
        self.client.force_login(make_user("lecturer1"))

        response = self.client.post(reverse("accounts:logout"))

        self.assertRedirects(response, reverse("accounts:login"), fetch_redirect_response=False)
        self.assertEqual(self.client.get(reverse("exam_files:my-files")).status_code, 302)


class LoginRequiredMiddlewareTest(BaseTestCase):

    def test_unknown_url_goes_to_dashboard(self):
        self.client.force_login(make_user("lecturer1"))

        response = self.client.get("/no/such/page/")

        self.assertRedirects(response, reverse("accounts:dashboard"), fetch_redirect_response=False)

    def test_anonymous_unknown_url_goes_to_login(self):
        response = self.client.get("/no/such/page/")

        self.assertEqual(response["Location"], "/auth/login/")

    def test_role_prefixes_are_fenced(self):
        self.client.force_login(make_user("hos1", role=User.Role.HOS))

        response = self.client.get(reverse("exam_files:exam-unit-review"))
        self.assertRedirects(response, reverse("accounts:dashboard"), fetch_redirect_response=False)

        response = self.client.get(reverse("exam_files:hos-review"))
        self.assertEqual(response.status_code, 200)

    def test_login_page_is_public(self):
        self.assertEqual(self.client.get(reverse("accounts:login")).status_code, 200)
