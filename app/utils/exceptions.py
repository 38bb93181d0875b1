from fastapi import HTTPException, status


class ExpiryQueryError(Exception):
    """La récupération des aliments proches de la péremption a échoué"""


class MembershipLookupError(Exception):
    def __init__(self, group_id: int, message: str = ""):
        self.group_id = group_id
        super().__init__(message or f"Member lookup failed for group {group_id}")


class PushNotConfiguredError(Exception):
    pass


class PushDeliveryError(Exception):
    pass


class InvalidTokenException(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NoRolesAssignedException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN, detail="No roles assigned"
        )


class InsufficientPermissionException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: insufficient permissions",
        )


class InvalidPushTokenException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid push token"
        )


class JobNotFoundException(HTTPException):
    def __init__(self, job_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Job {job_id} not found"
        )
