from .directory import DirectoryClient
from .graph_client import GraphClient
from .workflow import grant_app_role

__all__ = ["DirectoryClient", "GraphClient", "grant_app_role"]
