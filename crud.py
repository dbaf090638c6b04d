# Di dalam file: crud.py

from sqlalchemy.orm import Session
import models
import schemas

def get_relative_by_key(db: Session, key: str):
    """
    Cari kerabat di katalog berdasarkan kuncinya (nilai RelativeType).
    Ini berguna agar tidak ada data duplikat.
    """
    return db.query(models.Relative).filter(models.Relative.key == key).first()

def create_relative(db: Session, relative: schemas.RelativeCreate):
    db_relative = models.Relative(
        key=relative.key.value,
        name_en=relative.name_en,
        name_ar=relative.name_ar,
        gender=relative.gender.value,
    )
    db.add(db_relative)
    db.commit()
    db.refresh(db_relative)
    return db_relative

def get_relatives(db: Session, skip: int = 0, limit: int = 100):
    """
    Ambil daftar katalog kerabat.
    'skip' dan 'limit' berguna untuk paginasi.
    """
    return db.query(models.Relative).order_by(models.Relative.id).offset(skip).limit(limit).all()
