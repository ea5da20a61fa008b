"""Read access to university reference data."""

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from backend.app.core.exceptions import NotFoundError
from backend.app.models.university import University


class CRUDUniversity:
    def get_multi(self, db: Session, *, country: Optional[str] = None, q: Optional[str] = None) -> List[University]:
        query = db.query(University)
        if country:
            query = query.filter(University.country.ilike(country))
        if q:
            pattern = f"%{q.strip()}%"
            query = query.filter(or_(University.name.ilike(pattern), University.campus_city.ilike(pattern)))
        return query.order_by(University.name.asc()).all()

    def get(self, db: Session, university_id: int) -> University:
        university = (
            db.query(University)
            .options(
                selectinload(University.courses),
                selectinload(University.intakes),
                selectinload(University.accepted_elts),
            )
            .filter(University.id == university_id)
            .first()
        )
        if university is None:
            raise NotFoundError("University not found")
        return university


university_crud = CRUDUniversity()
