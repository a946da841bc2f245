from sqlalchemy.orm import Session
from sqlalchemy import or_

from app.models.motorcycle import Motorcycle, MotorcycleStatus
from app.schemas.motorcycle import MotorcycleCreateRequest, MotorcycleUpdateRequest
from app.utils.audit import log_action
from app.utils.exceptions import NotFoundException, InvalidStatusException


def _serialize(m: Motorcycle) -> dict:
    return {
        "id":          m.id,
        "name":        m.name,
        "brand":       m.brand,
        "type":        m.type,
        "pricePerDay": float(m.pricePerDay),
        "imageUrl":    m.imageUrl,
        "status":      m.status.value,
        "description": m.description,
        "createdAt":   m.createdAt.isoformat() if m.createdAt else None,
        "updatedAt":   m.updatedAt.isoformat() if m.updatedAt else None,
    }


class MotorcycleService:

    def list_motorcycles(
        self, db: Session, page: int, limit: int,
        search: str | None, type_: str | None, status: str | None,
    ) -> tuple[list[dict], int]:
        q = db.query(Motorcycle)

        if search:
            kw = f"%{search}%"
            q = q.filter(or_(
                Motorcycle.name.ilike(kw),
                Motorcycle.brand.ilike(kw),
                Motorcycle.type.ilike(kw),
            ))
        if type_:
            q = q.filter(Motorcycle.type == type_)
        if status:
            try:
                q = q.filter(Motorcycle.status == MotorcycleStatus(status))
            except ValueError:
                raise InvalidStatusException(status, [s.value for s in MotorcycleStatus])

        total = q.count()
        items = q.order_by(Motorcycle.id).offset((page - 1) * limit).limit(limit).all()
        return [_serialize(m) for m in items], total

    def get_motorcycle(self, db: Session, motorcycle_id: int) -> dict:
        m = db.query(Motorcycle).filter(Motorcycle.id == motorcycle_id).first()
        if not m:
            raise NotFoundException("Motorcycle")
        return _serialize(m)

    def create_motorcycle(self, db: Session, data: MotorcycleCreateRequest, actor_id: int) -> dict:
        m = Motorcycle(
            name=data.name,
            brand=data.brand,
            type=data.type,
            pricePerDay=data.pricePerDay,
            imageUrl=str(data.imageUrl) if data.imageUrl else None,
            status=data.status,
            description=data.description,
        )
        db.add(m)
        db.flush()
        log_action(db, actor_id, "CREATE", "Motorcycle", m.id,
                   f"Created motorcycle {data.brand} {data.name}")
        db.commit()
        db.refresh(m)
        return _serialize(m)

    def update_motorcycle(self, db: Session, motorcycle_id: int, data: MotorcycleUpdateRequest, actor_id: int) -> dict:
        m = db.query(Motorcycle).filter(Motorcycle.id == motorcycle_id).first()
        if not m:
            raise NotFoundException("Motorcycle")

        changes = data.model_dump(exclude_unset=True)
        if "imageUrl" in changes:
            changes["imageUrl"] = str(data.imageUrl) if data.imageUrl else None
        for field, value in changes.items():
            if value is None and field not in ("imageUrl", "description"):
                continue
            setattr(m, field, value)

        log_action(db, actor_id, "UPDATE", "Motorcycle", m.id,
                   f"Updated motorcycle {m.brand} {m.name}: {', '.join(sorted(changes)) or 'no changes'}")
        db.commit()
        db.refresh(m)
        return _serialize(m)

    def delete_motorcycle(self, db: Session, motorcycle_id: int, actor_id: int) -> None:
        m = db.query(Motorcycle).filter(Motorcycle.id == motorcycle_id).first()
        if not m:
            raise NotFoundException("Motorcycle")
        log_action(db, actor_id, "DELETE", "Motorcycle", motorcycle_id,
                   f"Deleted motorcycle {m.brand} {m.name} and {len(m.bookings)} booking(s)")
        db.delete(m)
        db.commit()


motorcycle_service = MotorcycleService()
