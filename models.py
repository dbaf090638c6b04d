# Di dalam file: models.py

from sqlalchemy import Column, Integer, String
from database import Base

# Katalog jenis kerabat (nama tampilan), BUKAN riwayat perhitungan
class Relative(Base):
    __tablename__ = "relatives"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String, unique=True, index=True)  # nilai RelativeType, misal "full_brother"
    name_en = Column(String)
    name_ar = Column(String)
    gender = Column(String)
