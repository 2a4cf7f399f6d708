from rest_framework.permissions import BasePermission


class IsOwner(BasePermission):
    """
    Permission class that ensures users can only touch rows they own.
    Notes and categories both carry a 'user' foreign key.
    """

    def has_object_permission(self, request, view, obj):
        owner_id = getattr(obj, "user_id", None)
        if owner_id is None:
            return False
        return owner_id == request.user.id
