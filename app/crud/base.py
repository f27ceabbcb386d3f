from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy.orm import Session
from sqlalchemy import inspect

from app.database.session import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Base class for CRUD operations.
    """
    def __init__(self, model: Type[ModelType]):
        """
        Initialize with the model class
        """
        self.model = model

    def _primary_key(self):
        return getattr(self.model, inspect(self.model).primary_key[0].name)

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Get an object by ID
        """
        return db.query(self.model).filter(self._primary_key() == id).first()

    def get_multi(self, db: Session, *, skip: int = 0, limit: int = 100, filters: Dict = None) -> List[ModelType]:
        """
        Get multiple objects with optional filters
        """
        return self._filtered(db, filters).offset(skip).limit(limit).all()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Create a new object. Flushes only; the caller owns the transaction.
        """
        # model_dump keeps dates and enums as Python objects for the column types
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        db.flush()
        return db_obj

    def update(self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Update an object with the fields that were explicitly set
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        db.flush()
        return db_obj

    def remove(self, db: Session, *, id: Any) -> Optional[ModelType]:
        """
        Remove an object
        """
        obj = self.get(db, id)
        if obj is not None:
            db.delete(obj)
            db.flush()
        return obj

    def count(self, db: Session, *, filters: Dict = None) -> int:
        """
        Count objects with optional filters
        """
        return self._filtered(db, filters).count()

    def _filtered(self, db: Session, filters: Optional[Dict]):
        query = db.query(self.model)
        if filters:
            for attr, value in filters.items():
                if hasattr(self.model, attr):
                    if isinstance(value, list):
                        query = query.filter(getattr(self.model, attr).in_(value))
                    else:
                        query = query.filter(getattr(self.model, attr) == value)
        return query
