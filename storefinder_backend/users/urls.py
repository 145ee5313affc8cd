# users/urls.py

from django.urls import path

from .views import LoginView, ResetPasswordView, account, forgot, logout_view, register

app_name = "users"

urlpatterns = [
    # ---------------- SESSION AUTH ----------------
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", logout_view, name="logout"),
    path("register/", register, name="register"),
    # ---------------- ACCOUNT ----------------
    path("account/", account, name="account"),
    path("account/forgot/", forgot, name="forgot"),
    path("account/reset/<str:token>/", ResetPasswordView.as_view(), name="reset"),
]
