# dashboard/serializers.py

from rest_framework import serializers


# Serializer for the dashboard summary of the current user
class DashboardStatsSerializer(serializers.Serializer):
    totalProjects = serializers.IntegerField()
    totalTasks = serializers.IntegerField()
    tasksByStatus = serializers.DictField(child=serializers.IntegerField())
