"""Application ports (Protocols) implemented by infrastructure."""

from taskshare.application.interfaces.repositories import (
    ITaskRepository,
    ITaskShareRepository,
    IUserDirectory,
)

__all__ = ["ITaskRepository", "ITaskShareRepository", "IUserDirectory"]
