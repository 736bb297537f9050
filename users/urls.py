# users/urls.py

from django.urls import path
from .views import *


urlpatterns = [
    path('auth/register', UserRegistrationView.as_view(), name='user-registration'),
    path('auth/login', UserLoginView.as_view(), name='user-login'),
    path('users/profile', GetUserProfileView.as_view(), name='user-profile'),
]
