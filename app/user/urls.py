from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from user.views import (
    AuthLoginView,
    AuthLogoutView,
    AuthRegisterView,
    CurrentUserView,
    SessionLoginView,
    SessionLogoutView,
    UserTypeListView,
    VerifyTokenView,
)

urlpatterns = [
    path("login/", AuthLoginView.as_view(), name="login"),
    path("register/", AuthRegisterView.as_view(), name="register"),
    path("logout/", AuthLogoutView.as_view(), name="logout"),
    path("user/", CurrentUserView.as_view(), name="current_user"),
    path("verify/", VerifyTokenView.as_view(), name="verify_token"),
    path("session/login/", SessionLoginView.as_view(), name="session_login"),
    path("session/logout/", SessionLogoutView.as_view(), name="session_logout"),
    path("user-types/", UserTypeListView.as_view(), name="user_types"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
