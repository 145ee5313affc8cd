from .account import account, register
from .auth import LoginView, ResetPasswordView, forgot, logout_view

__all__ = [
    "LoginView",
    "ResetPasswordView",
    "account",
    "forgot",
    "logout_view",
    "register",
]
