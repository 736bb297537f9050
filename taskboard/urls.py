# taskboard/urls.py

from django.urls import path, include
from .views import ApiRootView

urlpatterns = [
    path('api', ApiRootView.as_view(), name='api-root'),
    path('api/', include('users.urls')),
    path('api/', include('projects.urls')),
    path('api/', include('management.urls')),
    path('api/', include('tasks.urls')),
    path('api/', include('dashboard.urls')),
]
