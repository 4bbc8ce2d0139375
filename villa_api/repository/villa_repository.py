from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ..models.villa import Villa, VillaNumber
from .base import Repository


class VillaRepository(Repository[Villa]):
    def __init__(self, db: Session) -> None:
        super().__init__(db, Villa)

    def get_by_name(self, name: str) -> Optional[Villa]:
        return self.get(func.lower(Villa.name) == name.lower())

    def search(
        self,
        capacity: Optional[int] = None,
        search: Optional[str] = None,
        page_size: int = 0,
        page_number: int = 1,
    ) -> List[Villa]:
        """List villas, optionally filtered by exact capacity and a name substring"""
        criteria = []
        if capacity is not None and capacity > 0:
            criteria.append(Villa.capacity == capacity)
        if search:
            criteria.append(func.lower(Villa.name).contains(search.lower()))

        offset = None
        if page_size > 0:
            offset = page_size * (max(page_number, 1) - 1)
        return self.get_all(*criteria, limit=page_size or None, offset=offset, order_by=Villa.id)

    def update(self, villa: Villa) -> Villa:
        villa.updated_date = datetime.now()
        self.save()
        self.db.refresh(villa)
        return villa


class VillaNumberRepository(Repository[VillaNumber]):
    def __init__(self, db: Session) -> None:
        super().__init__(db, VillaNumber)

    def list_with_villa(self) -> List[VillaNumber]:
        return (
            self.db.query(VillaNumber)
            .options(joinedload(VillaNumber.villa))
            .order_by(VillaNumber.villa_no)
            .all()
        )

    def get_by_villa_no(self, villa_no: int) -> Optional[VillaNumber]:
        return (
            self.db.query(VillaNumber)
            .options(joinedload(VillaNumber.villa))
            .filter(VillaNumber.villa_no == villa_no)
            .first()
        )

    def update(self, villa_number: VillaNumber) -> VillaNumber:
        villa_number.updated_date = datetime.now()
        self.save()
        self.db.refresh(villa_number)
        return villa_number
