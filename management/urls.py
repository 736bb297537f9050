# management/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('projects/<str:pk>/collaborators', AddCollaboratorView.as_view(), name='project-collaborators'),
    path('projects/<str:pk>/collaborators/<str:user_id>', RemoveCollaboratorView.as_view(), name='project-collaborator'),
]
