# taskboard_client/board.py

STATUS_PENDING = 'pendiente'
STATUS_IN_PROGRESS = 'en progreso'
STATUS_COMPLETED = 'completada'

COLUMNS = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED)

PRIORITIES = ('baja', 'media', 'alta')


def _same_id(left, right):
    return left is not None and right is not None and str(left) == str(right)


class KanbanBoard:
    """
    Kanban view over a TaskStore: one column per status, in fixed order.

    Filters only change what the board shows, the store keeps every task.
    Dropping a task on a column or on another task moves it to that status.
    """

    def __init__(self, task_store, project=None):
        self.task_store = task_store
        self.project = project
        self.search = ''
        self.priority = None
        self.assignee = None

    def set_project(self, project):
        self.project = project

    def set_filters(self, search=None, priority=None, assignee=None):
        if search is not None:
            self.search = search
        if priority is not None:
            self.priority = priority or None
        if assignee is not None:
            self.assignee = assignee or None

    def clear_filters(self):
        self.search = ''
        self.priority = None
        self.assignee = None

    def _matches(self, task):
        if self.search and self.search.lower() not in task['name'].lower():
            return False

        if self.priority and task['priority'] != self.priority:
            return False

        if self.assignee:
            assigned_to = task.get('assignedTo') or {}
            if not _same_id(assigned_to.get('id'), self.assignee):
                return False

        return True

    def visible_tasks(self):
        return [task for task in self.task_store.tasks if self._matches(task)]

    def columns(self):
        columns = {status: [] for status in COLUMNS}

        for task in self.visible_tasks():
            if task['status'] in columns:
                columns[task['status']].append(task)

        return columns

    def counts(self):
        return {status: len(tasks) for status, tasks in self.columns().items()}

    def members(self):
        """
        Users a task can be assigned to: the owner first, then the collaborators.
        """
        if not self.project:
            return []

        members = [self.project['owner']] if self.project.get('owner') else []
        return members + list(self.project.get('collaborators') or [])

    def find_task(self, task_id):
        for task in self.task_store.tasks:
            if _same_id(task['id'], task_id):
                return task
        return None

    def drop(self, task_id, destination):
        """
        Handles a drop of a task on a column (a status) or on another task.
        Returns True when a status change was sent to the store.
        """
        task = self.find_task(task_id)
        if task is None:
            return False

        if destination in COLUMNS:
            new_status = destination
        else:
            target = self.find_task(destination)
            if target is None:
                return False
            new_status = target['status']

        if task['status'] == new_status:
            return False

        self.task_store.update_task_status(task['id'], new_status)
        return True
