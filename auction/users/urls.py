from django.urls import path
from users.views import (
    RegisterView, LoginView, LogoutView, UserProfileView, LeaderboardView
)

urlpatterns = [
    path('register', RegisterView.as_view(), name='register'),
    path('login', LoginView.as_view(), name='login'),
    path('me', UserProfileView.as_view(), name='profile'),
    path('logout', LogoutView.as_view(), name='logout'),
    path('leaderboard', LeaderboardView.as_view(), name='leaderboard'),
]
