from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    """Exception for resource not found."""
    
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class BadRequestException(HTTPException):
    """Exception for bad request."""
    
    def __init__(self, detail: str = "Bad request"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class ConflictException(HTTPException):
    """Exception for resource conflict."""
    
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


class InvalidStateException(HTTPException):
    """Exception for a transition the resource's current status does not allow."""
    
    def __init__(self, detail: str = "Operation not allowed in the current state"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )
