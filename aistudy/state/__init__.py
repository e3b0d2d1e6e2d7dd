from .model import INITIAL_STATE, Subject, View, initial_state
from .persistence import FileStorage, MemoryStorage, PersistenceAdapter, SaveResult, StorageError, StorageFullError
from .store import AppState
from .navigation import Navigator, NAV_ITEMS
from .adapters import ChatSessions, Features, Grades, Lessons, ListHandle, Profile, StudyStats, TaskList

__all__ = [
    "INITIAL_STATE", "Subject", "View", "initial_state",
    "FileStorage", "MemoryStorage", "PersistenceAdapter", "SaveResult", "StorageError", "StorageFullError",
    "AppState", "Navigator", "NAV_ITEMS",
    "ChatSessions", "Features", "Grades", "Lessons", "ListHandle", "Profile", "StudyStats", "TaskList",
]
