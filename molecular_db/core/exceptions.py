from fastapi import HTTPException, status

class MolecularDbException(HTTPException):
    """Base exception for the molecular database service"""
    pass

class DatabaseNotFoundError(MolecularDbException):
    """Raised when a database id is not in the catalog"""
    def __init__(self, database_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Database with id {database_id} not found"
        )

class DatabaseUnavailableError(MolecularDbException):
    """Raised when a database exists but is not online"""
    def __init__(self, database_id: str, database_status: str):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Database {database_id} is {database_status}"
        )
