from .api import ApiClient, ApiError
from .board import KanbanBoard, COLUMNS, PRIORITIES
from .stores import AuthStore, ProjectStore, TaskStore
