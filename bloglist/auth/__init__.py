from bloglist.auth.permissions import can_delete

__all__ = ["can_delete"]
