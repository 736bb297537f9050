# taskboard_client/stores.py

import logging

from .api import ApiError

logger = logging.getLogger(__name__)

SYNC_ERROR = 'Failed to update the task status. Synchronizing...'


class Store:
    """
    Base state container. Subscribers are called with the store
    after every state change.
    """

    def __init__(self, api):
        self.api = api
        self.error = None
        self.is_loading = False
        self._subscribers = []

    def subscribe(self, callback):
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self):
        for callback in list(self._subscribers):
            callback(self)

    def _start(self):
        self.is_loading = True
        self.error = None
        self.notify()

    def _fail(self, exc):
        self.is_loading = False
        self.error = exc.message
        self.notify()


# Store for the signed-in user and their token
class AuthStore(Store):

    def __init__(self, api):
        super().__init__(api)
        self.user = None
        self.token = None

    @property
    def is_authenticated(self):
        return self.token is not None and self.user is not None

    def _sign_in(self, data):
        self.token = data['token']
        self.user = data['user']
        self.api.set_token(self.token)
        self.is_loading = False
        self.notify()
        return self.user

    def register(self, name, email, password):
        self._start()
        try:
            data = self.api.post('/api/auth/register', {'name': name, 'email': email, 'password': password})
        except ApiError as exc:
            self._fail(exc)
            raise
        return self._sign_in(data)

    def login(self, email, password):
        self._start()
        try:
            data = self.api.post('/api/auth/login', {'email': email, 'password': password})
        except ApiError as exc:
            self._fail(exc)
            raise
        return self._sign_in(data)

    def restore(self, token):
        """
        Signs back in with a stored token. An invalid or expired token
        leaves the store signed out.
        """
        self.api.set_token(token)
        self._start()
        try:
            user = self.api.get('/api/users/profile')
        except ApiError as exc:
            logger.info("Stored token rejected: %s", exc)
            self.logout()
            return False
        self._sign_in({'token': token, 'user': user})
        return True

    def logout(self):
        self.token = None
        self.user = None
        self.is_loading = False
        self.api.set_token(None)
        self.notify()


# Store for the projects of the signed-in user
class ProjectStore(Store):

    def __init__(self, api):
        super().__init__(api)
        self.projects = []

    def _replace(self, project):
        found = False
        projects = []

        for item in self.projects:
            if item['id'] == project['id']:
                projects.append(project)
                found = True
            else:
                projects.append(item)

        if not found:
            projects.append(project)

        self.projects = projects

    def fetch_projects(self):
        self._start()
        try:
            self.projects = self.api.get('/api/projects')
        except ApiError as exc:
            self._fail(exc)
            return self.projects
        self.is_loading = False
        self.notify()
        return self.projects

    def create_project(self, name, description=None):
        payload = {'name': name}
        if description is not None:
            payload['description'] = description

        self._start()
        try:
            project = self.api.post('/api/projects', payload)
        except ApiError as exc:
            self._fail(exc)
            raise
        self.projects = self.projects + [project]
        self.is_loading = False
        self.notify()
        return project

    def get_project(self, project_id):
        try:
            project = self.api.get(f'/api/projects/{project_id}')
        except ApiError as exc:
            self._fail(exc)
            raise
        self._replace(project)
        self.notify()
        return project

    def update_project(self, project_id, **fields):
        try:
            project = self.api.put(f'/api/projects/{project_id}', fields)
        except ApiError as exc:
            self._fail(exc)
            raise
        self._replace(project)
        self.notify()
        return project

    def delete_project(self, project_id):
        try:
            self.api.delete(f'/api/projects/{project_id}')
        except ApiError as exc:
            self._fail(exc)
            raise
        self.projects = [p for p in self.projects if p['id'] != project_id]
        self.notify()

    def add_collaborator(self, project_id, email):
        try:
            data = self.api.post(f'/api/projects/{project_id}/collaborators', {'email': email})
        except ApiError as exc:
            self._fail(exc)
            raise
        self.get_project(project_id)
        return data['user']

    def remove_collaborator(self, project_id, user_id):
        try:
            self.api.delete(f'/api/projects/{project_id}/collaborators/{user_id}')
        except ApiError as exc:
            self._fail(exc)
            raise
        return self.get_project(project_id)


# Store for the tasks of the project shown on the board
class TaskStore(Store):

    def __init__(self, api):
        super().__init__(api)
        self.tasks = []
        self.project_id = None

    def get_task(self, task_id):
        for task in self.tasks:
            if task['id'] == task_id:
                return task
        return None

    def _replace(self, task):
        self.tasks = [task if item['id'] == task['id'] else item for item in self.tasks]

    def _load(self, project_id):
        self.project_id = project_id
        self.is_loading = True
        self.notify()
        try:
            self.tasks = self.api.get('/api/tasks', params={'project': project_id})
        except ApiError as exc:
            self._fail(exc)
            return self.tasks
        self.is_loading = False
        self.notify()
        return self.tasks

    def fetch_tasks(self, project_id):
        self.error = None
        return self._load(project_id)

    def resync(self, project_id):
        """
        Replaces the local tasks with the server state of the project.
        A recorded sync error is kept so the board can still show it, even
        when the refetch fails too.
        """
        logger.info("Resynchronizing tasks of project %s", project_id)
        error = self.error
        tasks = self._load(project_id)
        if error is not None and self.error != error:
            logger.warning("Resynchronization of project %s failed: %s", project_id, self.error)
            self.error = error
            self.notify()
        return tasks

    def create_task(self, name, project_id, description=None, priority=None, assigned_to=None):
        payload = {'name': name, 'projectId': project_id}
        if description is not None:
            payload['description'] = description
        if priority is not None:
            payload['priority'] = priority
        if assigned_to is not None:
            payload['assignedTo'] = assigned_to

        self._start()
        try:
            task = self.api.post('/api/tasks', payload)
        except ApiError as exc:
            self._fail(exc)
            raise
        self.tasks = self.tasks + [task]
        self.is_loading = False
        self.notify()
        return task

    def update_task(self, task_id, **fields):
        try:
            task = self.api.put(f'/api/tasks/{task_id}', fields)
        except ApiError as exc:
            self._fail(exc)
            raise
        self._replace(task)
        self.notify()
        return task

    def update_task_status(self, task_id, status):
        """
        Moves a task to another status right away, then confirms it with
        the server. When the server refuses, the error is recorded and the
        project's tasks are fetched again.
        """
        task = self.get_task(task_id)

        self.tasks = [dict(item, status=status) if item['id'] == task_id else item for item in self.tasks]
        self.notify()

        try:
            updated = self.api.put(f'/api/tasks/{task_id}', {'status': status})
        except ApiError as exc:
            logger.warning("Status update of task %s failed: %s", task_id, exc)
            self.error = SYNC_ERROR
            self.notify()

            project_id = task['project'] if task is not None else self.project_id
            if project_id is not None:
                self.resync(project_id)
            return False

        self._replace(updated)
        self.notify()
        return True

    def delete_task(self, task_id):
        try:
            self.api.delete(f'/api/tasks/{task_id}')
        except ApiError as exc:
            self._fail(exc)
            raise
        self.tasks = [task for task in self.tasks if task['id'] != task_id]
        self.notify()
