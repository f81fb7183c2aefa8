from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Any, Dict, Generic, List, TypeVar
from datetime import datetime


T = TypeVar("T")


class BaseResponse(BaseModel):
    """Base response model."""
    
    success: bool = True
    message: Optional[str] = None
    data: Optional[Any] = None


class DataResponse(BaseModel, Generic[T]):
    """Envelope for a single resource."""
    
    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Envelope for a collection of resources."""
    
    success: bool = True
    count: int
    data: List[T]


class ErrorResponse(BaseModel):
    """Error response model."""
    
    success: bool = False
    message: str
    detail: Optional[Dict[str, Any]] = None


class DocumentSchema(BaseModel):
    """Fields every stored resource exposes."""
    
    id: str
    version: int = 0
    created_at: datetime
    updated_at: datetime


class RequestModel(BaseModel):
    """Request body that accepts camelCase keys as well as field names."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
