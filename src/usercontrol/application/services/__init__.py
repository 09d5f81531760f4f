"""Application services."""

from usercontrol.application.services.user_management import UserManagementService

__all__ = ["UserManagementService"]
