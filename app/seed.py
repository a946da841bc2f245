"""
Seed the database with the back-office admin and the demo fleet.

    python -m app.seed                   # admin@rental.com / password
    python -m app.seed --admin-email owner@example.com --admin-password s3cret

Safe to re-run: the admin is upserted by email and motorcycles are only
inserted when the catalog is empty.
"""

import argparse
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

import app.models  # noqa: F401 registers every model on Base.metadata
from app.database import Base, SessionLocal, engine
from app.models.motorcycle import Motorcycle, MotorcycleStatus
from app.models.user import User, RoleName
from app.utils.security import hash_password

logger = logging.getLogger(__name__)

FLEET = [
    ("Honda Vario 160", "Honda", "Matic", 100000,
     "https://images.unsplash.com/photo-1558981806-ec527fa84c39?auto=format&fit=crop&q=80",
     "Motor matic responsif dengan performa stabil."),
    ("Yamaha NMAX 155", "Yamaha", "Maxi Scooter", 150000,
     "https://images.unsplash.com/photo-1568772585407-9361f9bf3c87?auto=format&fit=crop&q=80",
     "Skuter maxi premium nyaman untuk touring."),
    ("Honda Beat Street", "Honda", "Matic", 80000,
     "https://images.unsplash.com/photo-1568285994269-00fbfef5c4df?auto=format&fit=crop&q=80",
     "Gesit, irit bahan bakar, cocok untuk harian dalam kota."),
    ("Yamaha XMAX 250 Connected", "Yamaha", "Maxi Scooter", 250000,
     "https://images.unsplash.com/photo-1599386762295-a226b52a514b?auto=format&fit=crop&q=80",
     "Skuter maxi 250cc dengan fitur navigasi dan performa tinggi."),
    ("Vespa Sprint 150 I-Get ABS", "Piaggio", "Classic Scooter", 200000,
     "https://images.unsplash.com/photo-1593358055110-381dd207ef3a?auto=format&fit=crop&q=80",
     "Desain klasik ikonik berpadu dengan teknologi mesin modern."),
    ("Kawasaki Ninja 250 FI", "Kawasaki", "Sport", 350000,
     "https://images.unsplash.com/photo-1568772585407-9361f9bf3c87?auto=format&fit=crop&q=80",
     "Motor sport agresif legendaris untuk sensasi berkendara maksimal."),
    ("Honda PCX 160 ABS", "Honda", "Maxi Scooter", 160000,
     "https://images.unsplash.com/photo-1621255536413-5a04fe202b8b?auto=format&fit=crop&q=80",
     "Elegan dan premium, skuter pilihan elegan menjelajah kota."),
    ("Yamaha Fazzio Hybrid", "Yamaha", "Classic Scooter", 110000,
     "https://images.unsplash.com/photo-1558981403-c5f9899a28bc?auto=format&fit=crop&q=80",
     "Gaya retro modern dengan mesin hybrid pertama di kelasnya."),
]


def seed_admin(db: Session, email: str, password: str, name: str = "Admin Rental") -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        user.name     = name
        user.password = hash_password(password)
        user.isActive = True
    else:
        user = User(name=name, email=email, password=hash_password(password), role=RoleName.ADMIN)
        db.add(user)
    db.flush()
    return user


def seed_fleet(db: Session) -> int:
    if db.query(Motorcycle.id).first():
        return 0
    for name, brand, type_, price, image_url, description in FLEET:
        db.add(Motorcycle(
            name=name, brand=brand, type=type_,
            pricePerDay=Decimal(price), imageUrl=image_url,
            status=MotorcycleStatus.AVAILABLE, description=description,
        ))
    db.flush()
    return len(FLEET)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed admin user and demo motorcycles")
    parser.add_argument("--admin-email",    default="admin@rental.com")
    parser.add_argument("--admin-password", default="password")
    parser.add_argument("--create-tables",  action="store_true",
                        help="create tables directly instead of running Alembic first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_admin(db, args.admin_email.lower(), args.admin_password)
        added = seed_fleet(db)
        db.commit()
    finally:
        db.close()
    logger.info(f"Seeded admin {args.admin_email} and {added} motorcycle(s)")


if __name__ == "__main__":
    main()
