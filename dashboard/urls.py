# dashboard/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('dashboard/stats', DashboardStatsView.as_view(), name='dashboard-stats'),
]
