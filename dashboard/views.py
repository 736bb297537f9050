# dashboard/views.py

from rest_framework.generics import GenericAPIView
from rest_framework.response import Response
from .serializers import *
from .utils import *


# View for the dashboard summary: project count and tasks per status
class DashboardStatsView(GenericAPIView):
    serializer_class = DashboardStatsSerializer

    def get(self, request, *args, **kwargs):
        stats = get_dashboard_stats(request.user)
        serializer = self.get_serializer(stats)

        return Response(serializer.data)
