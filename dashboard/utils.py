# dashboard/utils.py

from django.db.models import Count, Q
from projects.models import Project
from tasks.models import Task, TaskStatus


def get_user_projects(user):
    """
    Returns the projects the user owns or collaborates on.
    """
    return Project.objects.filter(Q(owner=user) | Q(collaborators=user)).distinct()


def get_dashboard_stats(user):
    """
    Counts the user's projects and their tasks, grouped by status.
    Every status is present in the result, statuses without tasks count as 0.
    """
    projects = get_user_projects(user)
    project_ids = list(projects.values_list('id', flat=True))

    tasks_by_status = {value: 0 for value in TaskStatus.values}

    status_distribution = (
        Task.objects
        .filter(project__in=project_ids)
        .values('status')
        .annotate(count=Count('id'))
        .order_by()
    )

    for row in status_distribution:
        tasks_by_status[row['status']] = row['count']

    return {
        'totalProjects': len(project_ids),
        'totalTasks': sum(tasks_by_status.values()),
        'tasksByStatus': tasks_by_status,
    }
