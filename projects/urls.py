# projects/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('projects', ProjectListCreateView.as_view(), name='projects'),
    path('projects/<str:pk>', ProjectDetailView.as_view(), name='project-detail'),
]
