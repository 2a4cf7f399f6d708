from django.urls import path
from .views import AuthApiIndexView, RegisterView, LoginView, RefreshView, UserProfileView

urlpatterns = [
    path("", AuthApiIndexView.as_view(), name="auth-index"),
    path("register/", RegisterView.as_view(), name="auth-register"),
    path("login/", LoginView.as_view(), name="auth-login"),
    path("refresh/", RefreshView.as_view(), name="auth-refresh"),
    path("me/", UserProfileView.as_view(), name="auth-me"),
]
